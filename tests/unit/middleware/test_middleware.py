"""Unit tests for middleware."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware


def _create_app_with_middleware() -> FastAPI:
    """Create a minimal FastAPI app with logging and request ID middleware."""
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/test")
    async def _():
        return {"ok": True}

    return app


async def _get(headers: dict[str, str] | None = None):
    app = _create_app_with_middleware()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        return await c.get("/test", headers=headers or {})


class TestRequestIDMiddleware:
    """Tests for RequestIDMiddleware."""

    @pytest.mark.asyncio
    async def test_generates_request_id(self):
        """A request without X-Request-ID gets a generated one."""
        response = await _get()

        assert response.status_code == 200
        assert len(response.headers["x-request-id"]) == 36

    @pytest.mark.asyncio
    async def test_echoes_client_request_id(self):
        """A client-supplied X-Request-ID is returned unchanged."""
        response = await _get({"X-Request-ID": "trace-abc-123"})

        assert response.headers["x-request-id"] == "trace-abc-123"

    @pytest.mark.asyncio
    async def test_replaces_oversized_request_id(self):
        """An oversized X-Request-ID is replaced with a generated one."""
        response = await _get({"X-Request-ID": "x" * 500})

        assert response.headers["x-request-id"] != "x" * 500
        assert len(response.headers["x-request-id"]) == 36


class TestRequestLoggingMiddleware:
    """Tests for RequestLoggingMiddleware."""

    @pytest.mark.asyncio
    async def test_passes_response_through(self):
        """Logging does not alter the response."""
        response = await _get()

        assert response.json() == {"ok": True}
