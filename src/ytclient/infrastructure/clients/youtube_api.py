# src/ytclient/infrastructure/clients/youtube_api.py
"""
YouTube Data API v3 Transport
Builds and issues HTTP requests against the API root and turns each response
into a parsed JSON envelope or a single uniform error.

Features:
- One request per call (no retries, no internal timeout policy)
- Bearer-token authentication for OAuth calls, API key for public reads
- Error envelopes translated to YouTubeAPIError regardless of HTTP status
"""

import logging
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

import httpx

from ytclient.app.config import get_youtube_settings
from ytclient.services.exceptions import TransportError, YouTubeAPIError

logger = logging.getLogger(__name__)

# Left unescaped so pre-encoded values and comma-joined parts survive
PRESERVED_QUERY_CHARS = "%,"


class YouTubeAPIClient:
    """
    Async transport for the YouTube Data API v3

    Every request gets a fresh URL, header set and body; the only state
    shared between calls is the underlying httpx connection pool.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        encode_query_params: Optional[bool] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize transport

        Args:
            api_key: API key for unauthenticated calls (settings if not provided)
            base_url: API root (settings if not provided)
            timeout: Request timeout in seconds (httpx default if not set)
            encode_query_params: Percent-encode query values. '%' is never
                escaped so pre-encoded values pass through unchanged; a literal
                percent sign must therefore be sent pre-encoded as '%25'
            transport: Custom httpx transport (mock transports in tests)
        """
        settings = get_youtube_settings()

        self.api_key = api_key if api_key is not None else (settings.api_key or None)
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.encode_query_params = (
            settings.encode_query_params
            if encode_query_params is None
            else encode_query_params
        )

        client_kwargs: Dict[str, Any] = {}
        if transport is not None:
            client_kwargs["transport"] = transport
        timeout = timeout if timeout is not None else settings.request_timeout
        if timeout is not None:
            client_kwargs["timeout"] = timeout

        self.client = httpx.AsyncClient(**client_kwargs)

    # ========================================================================
    # Request Construction
    # ========================================================================

    def _format_value(self, value: Any) -> str:
        if isinstance(value, bool):
            value = "true" if value else "false"
        value = str(value)
        if self.encode_query_params:
            return quote(value, safe=PRESERVED_QUERY_CHARS)
        return value

    def build_url(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """
        Concatenate API root, endpoint and query string

        Args:
            endpoint: Endpoint path, with or without leading slash
            params: Query parameters in the order they should appear

        Returns:
            Absolute request URL
        """
        url = self.base_url + (endpoint if endpoint.startswith("/") else "/" + endpoint)

        for key, value in (params or {}).items():
            if value is None:
                continue
            url += ("&" if "?" in url else "?") + f"{key}={self._format_value(value)}"

        return url

    def build_headers(self, access_token: Optional[str] = None) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        return headers

    # ========================================================================
    # Request Execution
    # ========================================================================

    async def call(
        self,
        method: str,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        access_token: Optional[str] = None,
        body: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Issue a single API request

        Args:
            method: HTTP verb (GET, POST, PUT, DELETE)
            endpoint: API endpoint path (e.g. 'commentThreads')
            params: Query parameters
            access_token: OAuth token, sent as a bearer header
            body: JSON body for POST/PUT

        Returns:
            Parsed JSON response ({} for an empty body)

        Raises:
            TransportError: Connection failure or non-JSON response body
            YouTubeAPIError: Response envelope carries an error field
        """
        method = method.upper()
        query = dict(params or {})
        if self.api_key and not access_token and "key" not in query:
            query["key"] = self.api_key

        url = self.build_url(endpoint, query)
        headers = self.build_headers(access_token)

        logger.debug(f"➡️ {method} {endpoint} (authenticated={bool(access_token)})")

        try:
            response = await self.client.request(
                method, url, headers=headers, json=body
            )
        except httpx.RequestError as e:
            logger.debug(f"⚠️ Network error on {method} {endpoint}: {e}")
            raise TransportError(
                f"Request to {endpoint} failed: {e}", details={"method": method}
            ) from e

        return self._parse_response(method, endpoint, response)

    def _parse_response(
        self, method: str, endpoint: str, response: httpx.Response
    ) -> Dict[str, Any]:
        """Parse the body and translate error envelopes"""
        if not response.content.strip():
            return {}

        try:
            envelope = response.json()
        except ValueError as e:
            raise TransportError(
                f"Malformed response from {method} {endpoint} "
                f"(HTTP {response.status_code})",
                status_code=response.status_code,
            ) from e

        if not isinstance(envelope, dict):
            raise TransportError(
                f"Unexpected response from {method} {endpoint}: "
                f"expected a JSON object, got {type(envelope).__name__}",
                status_code=response.status_code,
            )

        if envelope.get("error"):
            error = YouTubeAPIError.from_envelope(
                envelope["error"], status_code=response.status_code
            )
            logger.debug(
                f"❌ API error on {method} {endpoint} "
                f"(HTTP {response.status_code}): {error.message}"
            )
            raise error

        return envelope

    async def get(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        access_token: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self.call("GET", endpoint, params, access_token)

    async def post(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        access_token: Optional[str] = None,
        body: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        return await self.call("POST", endpoint, params, access_token, body)

    async def put(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        access_token: Optional[str] = None,
        body: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        return await self.call("PUT", endpoint, params, access_token, body)

    async def delete(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        access_token: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self.call("DELETE", endpoint, params, access_token)

    # ========================================================================
    # Lifecycle
    # ========================================================================

    async def aclose(self) -> None:
        """Close HTTP client connection pool"""
        await self.client.aclose()
        logger.debug("🔌 YouTube API client closed")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()


# ============================================================================
# Convenience Functions
# ============================================================================


def create_youtube_client(api_key: Optional[str] = None, **kwargs: Any) -> YouTubeAPIClient:
    """
    Factory function to create the transport

    Args:
        api_key: Optional API key (reads from settings if not provided)

    Returns:
        Configured YouTubeAPIClient instance
    """
    return YouTubeAPIClient(api_key=api_key, **kwargs)
