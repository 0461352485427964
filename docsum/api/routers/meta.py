from __future__ import annotations

import time
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from docsum import __version__
from docsum.api.deps import get_summary_client
from docsum.core.constants import GREETING
from docsum.schemas.meta import HealthResponse, StatusResponse
from docsum.services.summarizer import SummaryClient

router = APIRouter()

_START_TIME = time.monotonic()


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return GREETING


@router.get("/meta/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok")


@router.get("/meta/status", response_model=StatusResponse)
async def status(client: Annotated[SummaryClient, Depends(get_summary_client)]) -> StatusResponse:
    return StatusResponse(
        status="ok",
        version=__version__,
        model=client.model,
        uptime_seconds=time.monotonic() - _START_TIME,
    )
