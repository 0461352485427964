from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass

from docsum.core.logging import log_context
from docsum.schemas.summaries import SummaryLength
from docsum.services.extractor import extract_text
from docsum.services.prompts import build_summary_prompt
from docsum.services.summarizer import SummaryClient, SummaryResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadRequest:
    file_bytes: bytes
    media_type: str | None
    summary_length: SummaryLength = SummaryLength.MEDIUM
    filename: str | None = None


async def summarize_document(upload: UploadRequest, client: SummaryClient) -> SummaryResponse:
    """
    Run the extract -> prompt -> generate pipeline once for a single upload.

    Steps run strictly in order and nothing is retried. Errors from the
    extractor and the summary client propagate to the API error handlers.
    """
    with log_context(media_type=upload.media_type, summary_length=upload.summary_length.value):
        step_start = time.perf_counter()
        extraction = await asyncio.to_thread(extract_text, upload.file_bytes, upload.media_type)
        logger.info(
            "extract_text %.2fms bytes=%s chars=%s",
            (time.perf_counter() - step_start) * 1000,
            len(upload.file_bytes),
            len(extraction.text),
        )
        if not extraction.text.strip():
            logger.warning("No text extracted from %s", upload.filename or "upload")

        prompt = build_summary_prompt(extraction.text, upload.summary_length)

        step_start = time.perf_counter()
        summary = await client.summarize(prompt)
        logger.info(
            "summarize %.2fms chars=%s",
            (time.perf_counter() - step_start) * 1000,
            len(summary.summary_text),
        )

        return summary
