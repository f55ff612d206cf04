from contextlib import asynccontextmanager

import httpx
import pytest
from httpx import ASGITransport

MERGE_URL = "https://api.eu.ap3api.com/v1/person/merge"


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("OPENROUTER_API_KEY", "test-or-key")
    monkeypatch.setenv("OPENROUTER_MODEL", "openai/gpt-4o-mini")
    monkeypatch.setenv("ORTTO_API_KEY", "test-ortto-key")
    monkeypatch.setenv("ORTTO_UPDATE_URL", MERGE_URL)
    for name in ("REQUIRE_COUNTRY_CODE", "REQUIRE_PROMPT", "REQUIRE_CONTACT_ID"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_client():
    """Start the app with whatever environment the test has set up."""

    @asynccontextmanager
    async def _make_client():
        from app.main import app, lifespan

        async with lifespan(app):
            async with httpx.AsyncClient(
                transport=ASGITransport(app=app),
                base_url="http://test",
            ) as c:
                yield c

    return _make_client


@pytest.fixture
async def client(mock_env, make_client):
    async with make_client() as c:
        yield c
