from __future__ import annotations

from fastapi import Request

from docsum.services.summarizer import SummaryClient


def get_summary_client(request: Request) -> SummaryClient:
    return request.app.state.summary_client
