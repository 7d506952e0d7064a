"""Last-resort translation of unexpected exceptions into a 500 response."""

from __future__ import annotations

from loguru import logger
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from user_directory.api.http.middleware.pipeline import CallNext

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred."


class FailureTranslationInterceptor:
    async def __call__(self, request: Request, call_next: CallNext) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            request_id = getattr(request.state, "request_id", None)
            logger.bind(
                request_id=request_id or "-",
                error_type=type(exc).__name__,
            ).exception("Unhandled error for {} {}", request.method, request.url.path)
            headers = {"X-Request-ID": request_id} if request_id else None
            return JSONResponse(
                status_code=500,
                content={"error": INTERNAL_ERROR_MESSAGE, "request_id": request_id},
                headers=headers,
            )
