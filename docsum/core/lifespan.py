from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import pytesseract
from fastapi import FastAPI

from docsum.core.config import Settings
from docsum.core.constants import OCR_LANGUAGE

logger = logging.getLogger(__name__)


def _configure_tesseract(settings: Settings) -> None:
    # pytesseract keeps the binary path module-wide; set it once per process start.
    if settings.tesseract_cmd:
        pytesseract.pytesseract.tesseract_cmd = settings.tesseract_cmd

    try:
        version = pytesseract.get_tesseract_version()
    except pytesseract.TesseractNotFoundError:
        logger.warning("tesseract binary not found; image uploads will fail until it is installed")
        return
    logger.info("tesseract ready", extra={"tesseract_version": str(version), "ocr_language": OCR_LANGUAGE})


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure OCR, log startup checks and close the generative-service client on shutdown."""
    summary_client = app.state.summary_client
    logger.info("Starting docsum", extra={"model": summary_client.model, "app_env": app.state.settings.app_env})
    _configure_tesseract(app.state.settings)

    try:
        yield
    finally:
        await summary_client.close()
        logger.info("Stopped docsum")
