from __future__ import annotations

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware

from docsum import __version__
from docsum.api.routers import meta_router, summaries_router
from docsum.core.config import Settings, get_settings
from docsum.core.errors import AppError
from docsum.core.handlers import handle_app_error, handle_unexpected_error, handle_validation_error
from docsum.core.lifespan import lifespan
from docsum.core.logging import setup_logging
from docsum.core.middleware import log_requests
from docsum.services.summarizer import SummaryClient


def create_app(settings: Settings | None = None, summary_client: SummaryClient | None = None) -> FastAPI:
    """
    Application factory for creating FastAPI instances.

    Args:
        settings: Optional settings override. If None, loads from environment,
                  which raises MissingCredentialError when GEMINI_API_KEY is unset.
        summary_client: Optional client override, mainly for tests.
    """
    if settings is None:
        settings = get_settings()
    if summary_client is None:
        summary_client = SummaryClient.from_settings(settings)

    middleware: list[Middleware] = []
    if settings.cors_allow_origins:
        middleware.append(
            Middleware(
                CORSMiddleware,
                allow_origins=settings.cors_allow_origins,
                allow_methods=["*"],
                allow_headers=["*"],
            )
        )

    app = FastAPI(
        title="docsum",
        description="PDF and image summarization service",
        version=__version__,
        middleware=middleware,
        lifespan=lifespan,
    )
    app.include_router(meta_router)
    app.include_router(summaries_router)
    app.state.settings = settings
    app.state.summary_client = summary_client

    app.add_middleware(BaseHTTPMiddleware, dispatch=log_requests)
    app.add_exception_handler(AppError, handle_app_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app


# Initialize logging once at module load
setup_logging()

# No module-level instance: a missing credential must fail at startup, not at import.
# Serve with `docsum` or `uvicorn --factory docsum.api.app:create_app`.
