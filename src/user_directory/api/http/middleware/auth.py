"""Bearer token gate for the API routes."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from user_directory.api.http.middleware.pipeline import CallNext
from user_directory.core.security import extract_bearer_token, normalize_tokens

API_PREFIX = "/api"


def is_api_path(path: str, prefix: str = API_PREFIX) -> bool:
    """True when the first path segment is ``prefix`` (case-insensitive)."""
    lowered = path.lower()
    return lowered == prefix or lowered.startswith(prefix + "/")


class TokenAuthInterceptor:
    """Reject API requests whose bearer token is not in the allow-list."""

    def __init__(self, tokens: Iterable[str]) -> None:
        self._valid_tokens = normalize_tokens(tuple(tokens))
        if not self._valid_tokens:
            logger.warning(
                "No authentication tokens configured; all API requests will be rejected."
            )

    def is_authorized(self, authorization: str | None) -> bool:
        token = extract_bearer_token(authorization)
        return token is not None and token in self._valid_tokens

    async def __call__(self, request: Request, call_next: CallNext) -> Response:
        if not is_api_path(request.url.path):
            return await call_next(request)

        if not self.is_authorized(request.headers.get("Authorization")):
            logger.warning(
                "Unauthorized request {} {}", request.method, request.url.path
            )
            return JSONResponse(
                status_code=401,
                content={"error": "Unauthorized."},
                headers={"WWW-Authenticate": "Bearer"},
            )

        return await call_next(request)
