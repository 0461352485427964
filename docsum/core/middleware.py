from __future__ import annotations

import logging
import time
import uuid

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import RequestResponseEndpoint
from starlette.responses import Response

from docsum.core.errors import RequestTooLargeError
from docsum.core.logging import log_context

logger = logging.getLogger(__name__)


async def _exceeds_upload_cap(request: Request, max_bytes: int) -> bool:
    if max_bytes <= 0:
        return False

    content_length = request.headers.get("content-length")
    if content_length:
        try:
            if int(content_length) > max_bytes:
                return True
        except ValueError:
            # Ignore invalid Content-Length and fall back to streaming enforcement.
            pass

    # Chunked bodies carry no Content-Length; count while reading.
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > max_bytes:
            return True

    # Hand the buffered body on to the route.
    request._body = bytes(body)
    return False


async def log_requests(request: Request, call_next: RequestResponseEndpoint) -> Response:
    start = time.perf_counter()
    request_id = request.headers.get("X-Request-Id") or uuid.uuid4().hex
    request.state.request_id = request_id

    with log_context(request_id=request_id, method=request.method, path=request.url.path):
        # Raised errors would bypass the exception handlers from inside middleware.
        if await _exceeds_upload_cap(request, request.app.state.settings.max_upload_bytes):
            logger.warning("Rejected oversized request", extra={"status_code": RequestTooLargeError.status_code})
            response: Response = JSONResponse(
                status_code=RequestTooLargeError.status_code,
                content={"error": RequestTooLargeError.public_message},
            )
        else:
            response = await call_next(request)

        response.headers["X-Request-Id"] = request_id
        logger.info(
            "%s %s %s %.2fms",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - start) * 1000,
        )
        return response
