"""Unit tests for opt-in rate limiting."""

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from user_directory.core.rate_limit import rate_limit_exceeded_handler


def _create_limited_app() -> FastAPI:
    limiter = Limiter(key_func=get_remote_address, enabled=True)
    app = FastAPI()
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    @app.get("/limited")
    @limiter.limit("1/minute")
    async def _(request: Request) -> dict[str, bool]:
        return {"ok": True}

    return app


class TestRateLimitExceededHandler:
    @pytest.mark.asyncio
    async def test_enabled_limiter_returns_429_plain_text(self) -> None:
        transport = ASGITransport(app=_create_limited_app())
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            first = await c.get("/limited")
            second = await c.get("/limited")

        assert first.status_code == 200
        assert second.status_code == 429
        assert second.headers["content-type"].startswith("text/plain")
        assert second.text.startswith("Rate limit exceeded: ")

    @pytest.mark.asyncio
    async def test_handles_generic_exception(self) -> None:
        from unittest.mock import MagicMock

        response = await rate_limit_exceeded_handler(MagicMock(), Exception("1 per 1 minute"))

        assert response.status_code == 429
        assert response.body == b"Rate limit exceeded: 1 per 1 minute"
