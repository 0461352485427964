from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile
from starlette.datastructures import UploadFile as StarletteUploadFile

from docsum.api.deps import get_summary_client
from docsum.application.summaries import UploadRequest, summarize_document
from docsum.core.constants import SUCCESS_MESSAGE
from docsum.core.errors import MissingFileError
from docsum.schemas.summaries import ErrorResponse, SummarizeResponse
from docsum.services.extractor import parse_media_type
from docsum.services.summarizer import SummaryClient
from docsum.validators import parse_summary_length

router = APIRouter(prefix="/api", tags=["summaries"])

logger = logging.getLogger(__name__)

_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {
        "model": ErrorResponse,
        "description": "No file uploaded, unsupported file type or invalid summary length.",
    },
    413: {"model": ErrorResponse, "description": "Upload exceeds the configured size cap."},
    500: {"model": ErrorResponse, "description": "Text extraction or summary generation failed."},
}


@router.post("/summarize", response_model=SummarizeResponse, responses=_RESPONSES)
@router.post("/upload", response_model=SummarizeResponse, responses=_RESPONSES, include_in_schema=False)
async def summarize(
    client: Annotated[SummaryClient, Depends(get_summary_client)],
    document: Annotated[UploadFile | str | None, File()] = None,
    summary_length: Annotated[str | None, Form(alias="summaryLength")] = None,
) -> SummarizeResponse:
    # A plain text field named "document" carries no file either.
    if not isinstance(document, StarletteUploadFile):
        raise MissingFileError("Request has no document file part.")

    file_bytes = await document.read()
    if not document.filename and not file_bytes:
        # Browsers send an empty, unnamed part when the file input is left blank.
        raise MissingFileError("Document part is empty.")

    # File type is judged before any other field.
    parse_media_type(document.content_type)

    upload = UploadRequest(
        file_bytes=file_bytes,
        media_type=document.content_type,
        summary_length=parse_summary_length(summary_length),
        filename=document.filename,
    )
    logger.info(
        "Received upload",
        extra={"upload_filename": upload.filename, "content_type": upload.media_type, "bytes": len(file_bytes)},
    )

    summary = await summarize_document(upload, client)

    return SummarizeResponse(message=SUCCESS_MESSAGE, summary=summary.summary_text)
