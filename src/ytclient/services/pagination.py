"""
Page-token pagination shared by list operations
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from ytclient.domain.interfaces import YouTubeTransport

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 50


async def fetch_paginated(
    client: YouTubeTransport,
    endpoint: str,
    params: Mapping[str, Any],
    max_results: int,
    access_token: Optional[str] = None,
    page_size: int = MAX_PAGE_SIZE,
) -> List[Dict[str, Any]]:
    """
    Collect ``items`` across pages of a list endpoint

    Pages are requested one after another, each carrying the previous page's
    ``nextPageToken``. A failing page aborts the whole fetch.

    Args:
        client: Transport to issue GET requests with
        endpoint: List endpoint (e.g. 'subscriptions')
        params: Query parameters shared by every page
        max_results: Item cap; <= 0 fetches until the API runs out of pages
        access_token: OAuth token for 'mine=true' style queries
        page_size: Items requested per page (API maximum is 50)

    Returns:
        Raw resources in response order, at most max_results when positive
    """
    unbounded = max_results <= 0
    items: List[Dict[str, Any]] = []
    page_token: Optional[str] = None
    pages = 0

    while True:
        page_params = dict(params)
        page_params["maxResults"] = (
            page_size if unbounded else min(page_size, max_results - len(items))
        )
        if page_token:
            page_params["pageToken"] = page_token

        response = await client.get(endpoint, page_params, access_token)
        pages += 1
        items.extend(response.get("items") or [])

        page_token = response.get("nextPageToken")
        if not page_token:
            break
        if not unbounded and len(items) >= max_results:
            break

    logger.debug(f"📄 {endpoint}: {len(items)} items over {pages} page(s)")

    return items if unbounded else items[:max_results]
