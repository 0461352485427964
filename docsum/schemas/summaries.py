from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class SummaryLength(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class SummarizeResponse(BaseModel):
    message: str
    summary: str


class ErrorResponse(BaseModel):
    error: str
