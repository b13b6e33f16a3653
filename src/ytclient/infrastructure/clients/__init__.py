# src/ytclient/infrastructure/clients/__init__.py
"""API Clients"""

from .youtube_api import YouTubeAPIClient, create_youtube_client

__all__ = [
    "YouTubeAPIClient",
    "create_youtube_client",
]
