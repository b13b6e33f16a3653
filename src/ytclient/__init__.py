"""
ytclient
Async client for the YouTube Data API v3 with OAuth-authenticated operations
"""

from .infrastructure.clients import YouTubeAPIClient, create_youtube_client
from .services import (
    OAuthService,
    YouTubeService,
    ServiceError,
    ValidationError,
    ConfigurationError,
    ResourceNotFoundError,
    ExternalServiceError,
    TransportError,
    YouTubeAPIError,
)
from .domain import Channel, Comment, Playlist, Subscription, Video

__all__ = [
    "YouTubeAPIClient",
    "create_youtube_client",
    "OAuthService",
    "YouTubeService",
    "ServiceError",
    "ValidationError",
    "ConfigurationError",
    "ResourceNotFoundError",
    "ExternalServiceError",
    "TransportError",
    "YouTubeAPIError",
    "Channel",
    "Comment",
    "Playlist",
    "Subscription",
    "Video",
]

__version__ = "0.1.0"
