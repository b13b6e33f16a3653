"""
Services Package
Validation, pagination and response mapping on top of the transport
"""

from .base_service import BaseService
from .oauth_service import OAuthService
from .youtube_service import YouTubeService
from .pagination import fetch_paginated
from .exceptions import (
    # Base
    ServiceError,

    # Usage Errors
    ValidationError,
    ConfigurationError,
    ResourceNotFoundError,

    # External Service Errors
    ExternalServiceError,
    TransportError,
    YouTubeAPIError,

    # Utility Functions
    is_retryable_error,
)

__all__ = [
    # Base Classes
    "BaseService",

    # Services
    "OAuthService",
    "YouTubeService",
    "fetch_paginated",

    # Base Exception
    "ServiceError",

    # Usage Errors
    "ValidationError",
    "ConfigurationError",
    "ResourceNotFoundError",

    # External Service Errors
    "ExternalServiceError",
    "TransportError",
    "YouTubeAPIError",

    # Utility Functions
    "is_retryable_error",
]
