"""Shared test fixtures."""

import os

# Settings require JWT_SECRET at import time.
os.environ.setdefault("JWT_SECRET", "unit-test-secret-do-not-use-in-prod")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from src.main import app  # noqa: E402


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
