"""Request/response activity logging."""

from __future__ import annotations

import time
import uuid

from loguru import logger
from starlette.requests import Request
from starlette.responses import Response

from user_directory.api.http.middleware.pipeline import CallNext

REQUEST_ID_HEADER = "X-Request-ID"


class ActivityLogInterceptor:
    """Log method, path and resulting status code around each request.

    Every log line emitted while the request runs carries its request id.
    """

    async def __call__(self, request: Request, call_next: CallNext) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        method = request.method
        path = request.url.path

        start = time.perf_counter()
        with logger.contextualize(request_id=request_id):
            logger.info("Incoming request {} {}", method, path)
            try:
                response = await call_next(request)
            except Exception as exc:
                logger.bind(
                    duration_ms=round((time.perf_counter() - start) * 1000, 1),
                    error_type=type(exc).__name__,
                ).error("Request failed {} {}", method, path)
                raise

            logger.bind(
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - start) * 1000, 1),
            ).info("Outgoing response {} for {} {}", response.status_code, method, path)

        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
        return response
