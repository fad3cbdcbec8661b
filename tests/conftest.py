"""Shared test fixtures — reduces boilerplate across test modules.

Provides:
- ``site_record`` — a realistic Netlify site record
- ``settings`` — deterministic settings with a fake token (no ``.env``)
- ``executor`` — ``AsyncMock`` standing in for ``NetlifyClient``
- ``dispatcher`` — real registry + dispatcher wired to ``executor``
- ``mock_http`` — builds a ``NetlifyClient`` on an ``httpx.MockTransport``
"""

from __future__ import annotations

from typing import Any, Callable
from unittest.mock import AsyncMock

import httpx
import pytest

from netlify_mcp.client import NetlifyClient
from netlify_mcp.config import Settings
from netlify_mcp.contracts import RemoteSuccess
from netlify_mcp.dispatcher import Dispatcher
from netlify_mcp.tools import build_registry

TEST_TOKEN = "nfp_test_token_123"

SITE_RECORD: dict[str, Any] = {
    "id": "3970e0fe-8564-4903-9a55-c5f8de49fb8b",
    "name": "my-site",
    "url": "https://my-site.netlify.app",
    "admin_url": "https://app.netlify.com/sites/my-site",
    "deploy_url": "https://main--my-site.netlify.app",
    "created_at": "2026-01-01T00:00:00.000Z",
    "updated_at": "2026-01-02T00:00:00.000Z",
    "published_deploy": {"id": "d1", "state": "ready"},
    "build_settings": {"cmd": "npm run build", "dir": "dist"},
}


@pytest.fixture
def site_record() -> dict[str, Any]:
    return dict(SITE_RECORD)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        NETLIFY_ACCESS_TOKEN=TEST_TOKEN,
        NETLIFY_API_URL="https://api.netlify.test/api/v1/",
        _env_file=None,
    )


@pytest.fixture
def executor() -> AsyncMock:
    """Fake API client; returns an empty 200 unless a test overrides it."""
    fake = AsyncMock()
    fake.execute.return_value = RemoteSuccess(status_code=200, body={})
    return fake


@pytest.fixture
def dispatcher(executor: AsyncMock) -> Dispatcher:
    return Dispatcher(build_registry(), executor)


@pytest.fixture
def mock_http(settings: Settings) -> Callable[..., NetlifyClient]:
    """Return a factory: ``mock_http(handler)`` → client using that handler."""

    def _factory(handler: Callable[[httpx.Request], httpx.Response]) -> NetlifyClient:
        return NetlifyClient(settings, transport=httpx.MockTransport(handler))

    return _factory
