"""Pytest configuration and fixtures."""

import os
from collections.abc import AsyncGenerator

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from user_directory.infrastructure.memory.user_store import InMemoryUserStore


@pytest.fixture
def user_store() -> InMemoryUserStore:
    """Create an empty store."""
    return InMemoryUserStore()


@pytest.fixture
def app(user_store: InMemoryUserStore) -> FastAPI:
    """Create an application bound to the test store."""
    from user_directory.main import create_app

    return create_app(user_store)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
