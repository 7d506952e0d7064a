"""Ordered chain of request interceptors run inside one Starlette middleware."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

CallNext = Callable[[Request], Awaitable[Response]]
Interceptor = Callable[[Request, CallNext], Awaitable[Response]]


class InterceptorChainMiddleware(BaseHTTPMiddleware):
    """Run ``interceptors`` in order around the downstream application.

    Each interceptor receives the request and a ``call_next`` that runs the
    rest of the chain; returning without calling it short-circuits.
    """

    def __init__(self, app: ASGIApp, interceptors: Sequence[Interceptor]) -> None:
        super().__init__(app)
        self._interceptors = tuple(interceptors)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        return await self._run(0, request, call_next)

    async def _run(
        self, index: int, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if index == len(self._interceptors):
            return await call_next(request)

        async def next_step(next_request: Request) -> Response:
            return await self._run(index + 1, next_request, call_next)

        return await self._interceptors[index](request, next_step)
