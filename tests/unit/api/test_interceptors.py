"""Unit tests for the request interceptors and the chain that runs them."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.responses import JSONResponse, PlainTextResponse

from user_directory.api.http.middleware import (
    ActivityLogInterceptor,
    FailureTranslationInterceptor,
    InterceptorChainMiddleware,
    TokenAuthInterceptor,
)
from user_directory.api.http.middleware.auth import is_api_path


async def ok_handler(request):
    return PlainTextResponse("ok")


async def failing_handler(request):
    raise RuntimeError("boom")


class TestIsApiPath:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/api", True),
            ("/api/users", True),
            ("/API/users", True),
            ("/apiary", False),
            ("/health", False),
            ("/", False),
        ],
    )
    def test_is_api_path(self, path, expected):
        assert is_api_path(path) is expected


class TestTokenAuthInterceptor:
    """Test the bearer token gate."""

    @pytest.mark.asyncio
    async def test_allows_known_token(self, request_factory):
        gate = TokenAuthInterceptor(["secret"])
        request = request_factory("/api/users", {"Authorization": "Bearer secret"})

        response = await gate(request, ok_handler)

        assert response.status_code == 200

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "headers",
        [
            {},
            {"Authorization": "Bearer wrong"},
            {"Authorization": "Basic secret"},
            {"Authorization": "Bearer "},
        ],
    )
    async def test_rejects_without_valid_token(self, request_factory, headers):
        gate = TokenAuthInterceptor(["secret"])
        called = False

        async def downstream(request):
            nonlocal called
            called = True
            return PlainTextResponse("ok")

        response = await gate(request_factory("/api/users", headers), downstream)

        assert response.status_code == 401
        assert response.body == b'{"error":"Unauthorized."}'
        assert called is False

    @pytest.mark.asyncio
    async def test_non_api_paths_skip_the_gate(self, request_factory):
        gate = TokenAuthInterceptor([])

        response = await gate(request_factory("/health"), ok_handler)

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_empty_token_set_denies_everything(self, request_factory, log_messages):
        gate = TokenAuthInterceptor(["", "   "])

        response = await gate(
            request_factory("/api/users", {"Authorization": "Bearer "}), ok_handler
        )

        assert response.status_code == 401
        assert any(
            "No authentication tokens configured" in record["message"]
            for record in log_messages
        )

    @pytest.mark.asyncio
    async def test_configured_tokens_are_trimmed(self, request_factory):
        gate = TokenAuthInterceptor(["  secret  "])
        request = request_factory("/api/users", {"Authorization": "bearer secret"})

        response = await gate(request, ok_handler)

        assert response.status_code == 200


class TestFailureTranslationInterceptor:
    @pytest.mark.asyncio
    async def test_passes_responses_through(self, request_factory):
        response = await FailureTranslationInterceptor()(request_factory(), ok_handler)
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_translates_exceptions_to_500(self, request_factory, log_messages):
        request = request_factory("/api/users")
        request.state.request_id = "req-1"

        response = await FailureTranslationInterceptor()(request, failing_handler)

        assert response.status_code == 500
        assert response.body == (
            b'{"error":"An unexpected error occurred.","request_id":"req-1"}'
        )
        assert response.headers["X-Request-ID"] == "req-1"
        assert any(r["level"] == "ERROR" for r in log_messages)


class TestActivityLogInterceptor:
    @pytest.mark.asyncio
    async def test_logs_method_path_and_status(self, request_factory, log_messages):
        request = request_factory("/api/users", method="POST")

        response = await ActivityLogInterceptor()(request, ok_handler)

        messages = [r["message"] for r in log_messages]
        assert "Incoming request POST /api/users" in messages
        assert "Outgoing response 200 for POST /api/users" in messages
        assert response.headers["X-Request-ID"] == request.state.request_id

    @pytest.mark.asyncio
    async def test_reuses_incoming_request_id(self, request_factory, log_messages):
        request = request_factory("/", {"X-Request-ID": "abc-123"})

        response = await ActivityLogInterceptor()(request, ok_handler)

        assert response.headers["X-Request-ID"] == "abc-123"
        outgoing = [r for r in log_messages if r["message"].startswith("Outgoing")]
        assert outgoing[0]["extra"]["request_id"] == "abc-123"
        assert outgoing[0]["extra"]["status_code"] == 200

    @pytest.mark.asyncio
    async def test_reraises_failures(self, request_factory, log_messages):
        with pytest.raises(RuntimeError):
            await ActivityLogInterceptor()(request_factory("/x"), failing_handler)

        assert "Request failed GET /x" in [r["message"] for r in log_messages]


class TestInterceptorChainMiddleware:
    """Test ordering and short-circuiting of the chain."""

    def _app(self, interceptors) -> FastAPI:
        app = FastAPI()

        @app.get("/api/ping")
        def ping():
            return {"pong": True}

        @app.get("/api/explode")
        def explode():
            raise RuntimeError("boom")

        app.add_middleware(InterceptorChainMiddleware, interceptors=interceptors)
        return app

    def test_runs_interceptors_in_order(self):
        calls = []

        def recorder(name):
            async def interceptor(request, call_next):
                calls.append(f"{name}:before")
                response = await call_next(request)
                calls.append(f"{name}:after")
                return response

            return interceptor

        client = TestClient(self._app([recorder("a"), recorder("b")]))

        assert client.get("/api/ping").json() == {"pong": True}
        assert calls == ["a:before", "b:before", "b:after", "a:after"]

    def test_short_circuit_skips_the_rest(self):
        reached = []

        async def stop(request, call_next):
            return JSONResponse({"stopped": True}, status_code=418)

        async def never(request, call_next):
            reached.append(True)
            return await call_next(request)

        client = TestClient(self._app([stop, never]))

        response = client.get("/api/ping")

        assert response.status_code == 418
        assert reached == []

    def test_full_chain_translates_route_failures(self):
        app = self._app(
            [
                TokenAuthInterceptor(["t"]),
                FailureTranslationInterceptor(),
                ActivityLogInterceptor(),
            ]
        )
        client = TestClient(app)

        response = client.get("/api/explode", headers={"Authorization": "Bearer t"})

        assert response.status_code == 500
        assert response.json()["error"] == "An unexpected error occurred."
        assert response.json()["request_id"] == response.headers["X-Request-ID"]
