from __future__ import annotations

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from docsum.core.constants import GENERIC_FAILURE_MESSAGE
from docsum.core.errors import AppError, InvalidRequestError
from docsum.core.logging import log_context

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None)
    request.state.error_code = exc.code
    request.state.error_status_code = exc.status_code
    extra = {
        "error_code": exc.code,
        "status_code": exc.status_code,
        "error_type": type(exc).__name__,
    }
    with log_context(request_id=request_id, method=request.method, path=request.url.path):
        if exc.status_code >= 500:
            # The client only gets the public message; keep the cause chain here.
            logger.error("%s", exc.detail, extra=extra, exc_info=exc)
        else:
            logger.warning("%s", exc.detail, extra=extra)
    return _error_response(exc.status_code, exc.public_message)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None)
    request.state.error_code = InvalidRequestError.code
    request.state.error_status_code = 400
    with log_context(request_id=request_id, method=request.method, path=request.url.path):
        logger.warning(
            "Invalid request",
            extra={"error_code": InvalidRequestError.code, "status_code": 400, "errors": len(exc.errors())},
        )
    return _error_response(400, InvalidRequestError.public_message)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None)
    with log_context(request_id=request_id, method=request.method, path=request.url.path):
        logger.error("Unhandled error", extra={"error_type": type(exc).__name__}, exc_info=exc)
    return _error_response(500, GENERIC_FAILURE_MESSAGE)
