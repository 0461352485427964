"""Shared fixtures: settings, a fake summary client and sample documents."""

import io
from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient
from PIL import Image
from pypdf import PdfWriter

from docsum.api.app import create_app
from docsum.core.config import Settings, load_settings
from docsum.core.constants import GEMINI_MODEL
from docsum.services.summarizer import SummaryClient, SummaryResponse


@pytest.fixture
def settings() -> Settings:
    return load_settings(GEMINI_API_KEY="test-api-key", _env_file=None)


@pytest.fixture
def summary_client() -> Mock:
    client = Mock(spec=SummaryClient)
    client.model = GEMINI_MODEL
    client.summarize = AsyncMock(return_value=SummaryResponse(summary_text="A short summary of the document."))
    client.close = AsyncMock()
    return client


@pytest.fixture
def app(settings: Settings, summary_client: Mock):
    return create_app(settings, summary_client)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def pdf_bytes() -> bytes:
    """A one-page PDF with no text on it."""
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def _image_bytes(image_format: str) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (32, 32), "white").save(buffer, format=image_format)
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    return _image_bytes("PNG")


@pytest.fixture
def jpeg_bytes() -> bytes:
    return _image_bytes("JPEG")
