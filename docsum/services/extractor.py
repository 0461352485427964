from __future__ import annotations

import io
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

import pytesseract
from PIL import Image
from pypdf import PdfReader

from docsum.core.constants import OCR_LANGUAGE, PDF_PAGE_SEPARATOR
from docsum.core.errors import ExtractionError, UnsupportedMediaTypeError


class MediaType(str, Enum):
    PDF = "application/pdf"
    PNG = "image/png"
    JPEG = "image/jpeg"


@dataclass(frozen=True)
class ExtractionResult:
    text: str
    media_type: MediaType


def parse_media_type(raw: str | None) -> MediaType:
    """Map a declared content type onto the accepted set, ignoring parameters."""
    essence = (raw or "").split(";", 1)[0].strip().lower()
    try:
        return MediaType(essence)
    except ValueError:
        raise UnsupportedMediaTypeError(f"Unsupported media type: {raw!r}") from None


def _read_pdf(file_bytes: bytes) -> str:
    try:
        reader = PdfReader(io.BytesIO(file_bytes))
        pages = [page.extract_text() or "" for page in reader.pages]
    except Exception as exc:
        raise ExtractionError(f"PDF text extraction failed: {exc}") from exc
    return PDF_PAGE_SEPARATOR.join(pages)


def _read_image(file_bytes: bytes) -> str:
    try:
        with Image.open(io.BytesIO(file_bytes)) as image:
            return pytesseract.image_to_string(image, lang=OCR_LANGUAGE)
    except Exception as exc:
        raise ExtractionError(f"OCR failed: {exc}") from exc


_READERS: dict[MediaType, Callable[[bytes], str]] = {
    MediaType.PDF: _read_pdf,
    MediaType.PNG: _read_image,
    MediaType.JPEG: _read_image,
}


def extract_text(file_bytes: bytes, media_type: str | None) -> ExtractionResult:
    """
    Turn an uploaded document into plain text.

    PDFs go through pypdf, PNG and JPEG images through tesseract. The media
    type is checked before any reader runs. An empty string is a valid result
    (blank page, image without text).

    Raises:
        UnsupportedMediaTypeError: ``media_type`` is not PDF, PNG or JPEG.
        ExtractionError: the underlying parser or OCR engine failed.
    """
    kind = parse_media_type(media_type)
    reader = _READERS[kind]
    return ExtractionResult(text=reader(file_bytes), media_type=kind)
