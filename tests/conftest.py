"""
Shared fixtures: clean settings per test, transport doubles, mock HTTP
"""

import os
from typing import AsyncIterator, Callable, List, Optional
from unittest.mock import AsyncMock, Mock

import httpx
import pytest
import pytest_asyncio

from ytclient.app.config import reset_config
from ytclient.infrastructure.clients.youtube_api import YouTubeAPIClient

# Captured before the autouse fixture scrubs the environment
_LIVE_API_KEY = os.getenv("YOUTUBE_API_KEY")
_LIVE_ACCESS_TOKEN = os.getenv("YOUTUBE_ACCESS_TOKEN")


def _empty_json(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={})


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate every test from YOUTUBE_*/LOG_* env vars and cached config"""
    for var in list(os.environ):
        if var.startswith(("YOUTUBE_", "LOG_")):
            monkeypatch.delenv(var)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def live_api_key() -> Optional[str]:
    return _LIVE_API_KEY


@pytest.fixture
def live_access_token() -> Optional[str]:
    return _LIVE_ACCESS_TOKEN


@pytest.fixture
def transport():
    """Transport double recording every verb call"""
    client = Mock()
    client.get = AsyncMock(return_value={})
    client.post = AsyncMock(return_value={})
    client.put = AsyncMock(return_value={})
    client.delete = AsyncMock(return_value={})
    return client


@pytest_asyncio.fixture
async def make_client() -> AsyncIterator[Callable[..., YouTubeAPIClient]]:
    """
    Build real YouTubeAPIClients on top of httpx.MockTransport

    Every client built here is closed when the test finishes.
    """
    clients: List[YouTubeAPIClient] = []

    def _make(handler=_empty_json, **kwargs) -> YouTubeAPIClient:
        client = YouTubeAPIClient(transport=httpx.MockTransport(handler), **kwargs)
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.aclose()
