"""Pytest configuration and fixtures for message cache performance.

Points the JSON catalog at tests/fixtures/i18n before msgcache.main is
imported (the module-level app is built from settings at import time).
"""

import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

FIXTURES_DIR = Path(__file__).parent / "fixtures"
CATALOG_DIR = FIXTURES_DIR / "i18n"

os.environ["MCP_CATALOG_BACKEND"] = "json"
os.environ["MCP_CATALOG_PATH"] = str(CATALOG_DIR)
os.environ["MCP_REDIS_ENABLED"] = "false"
os.environ["MCP_TELEMETRY_ENABLED"] = "false"

from msgcache.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from msgcache.main import app, create_app  # noqa: E402


@pytest.fixture
def catalog_dir() -> Path:
    """Directory holding the en/de JSON catalog fixtures."""
    return CATALOG_DIR


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the module-level FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def make_app(monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[..., FastAPI]]:
    """Factory building a fresh app with MCP_* env overrides.

    Usage: make_app(MCP_ENABLE_DEBUG="true", MCP_MSG_PREFIXES="tooltip-").
    Settings cache is cleared before and after so other tests see defaults.
    """

    def _make(catalog=None, **env: str) -> FastAPI:
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        get_settings.cache_clear()
        return create_app(catalog=catalog)

    yield _make
    get_settings.cache_clear()


@pytest.fixture
def client_for() -> Callable[[FastAPI], AsyncClient]:
    """Return an AsyncClient factory for an arbitrary app (use with async with)."""

    def _client(application: FastAPI) -> AsyncClient:
        return AsyncClient(transport=ASGITransport(app=application), base_url="http://test")

    return _client
