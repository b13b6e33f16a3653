# src/ytclient/domain/interfaces.py
"""
Domain-facing transport interface (Protocol).

Services depend on this surface only; YouTubeAPIClient satisfies it via duck
typing and tests substitute an AsyncMock double.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class YouTubeTransport(Protocol):
    """One JSON request per call; raises on error envelopes."""

    async def get(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        access_token: Optional[str] = None,
    ) -> Dict[str, Any]: ...

    async def post(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        access_token: Optional[str] = None,
        body: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]: ...

    async def put(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        access_token: Optional[str] = None,
        body: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]: ...

    async def delete(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        access_token: Optional[str] = None,
    ) -> Dict[str, Any]: ...
