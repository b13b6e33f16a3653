"""
Service Exceptions
Error taxonomy shared by the transport and service layers
"""

from typing import Any, Dict, List, Optional


class ServiceError(Exception):
    """Base class for every error raised by ytclient"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


# ============================================================================
# Usage Errors (raised before any network I/O)
# ============================================================================


class ValidationError(ServiceError):
    """A required argument is missing or blank"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, {"field": field} if field else None)
        self.field = field


class ConfigurationError(ServiceError):
    """Client is not configured for the requested operation (e.g. no token)"""


class ResourceNotFoundError(ServiceError):
    """A lookup returned no items"""

    def __init__(self, resource_type: str, resource_id: Optional[str] = None):
        if resource_id:
            message = f"{resource_type} not found: {resource_id}"
        else:
            message = f"{resource_type} not found"
        super().__init__(
            message, {"resource_type": resource_type, "resource_id": resource_id}
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ============================================================================
# External Service Errors
# ============================================================================


class ExternalServiceError(ServiceError):
    """Failure talking to, or reported by, the remote API"""


class TransportError(ExternalServiceError):
    """Connection failure or a response body that is not valid JSON"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code


class YouTubeAPIError(ExternalServiceError):
    """The response envelope carried an ``error`` field"""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message, {"code": code, "errors": errors or []})
        self.code = code
        self.errors = errors or []
        self.status_code = status_code

    @property
    def reason(self) -> Optional[str]:
        """First machine-readable reason (e.g. ``quotaExceeded``)"""
        for error in self.errors:
            if error.get("reason"):
                return error["reason"]
        return None

    @classmethod
    def from_envelope(
        cls, error: Any, status_code: Optional[int] = None
    ) -> "YouTubeAPIError":
        """
        Build from the ``error`` field of a response envelope.

        Data API errors are objects (``{"code", "message", "errors"}``);
        OAuth-layer errors are bare strings with an optional description.
        """
        if isinstance(error, dict):
            return cls(
                error.get("message") or "Unknown YouTube API error",
                code=error.get("code"),
                errors=error.get("errors"),
                status_code=status_code,
            )
        return cls(str(error), status_code=status_code)


# ============================================================================
# Utility Functions
# ============================================================================

RETRYABLE_REASONS = {"backendError", "rateLimitExceeded", "userRateLimitExceeded"}


def is_retryable_error(error: Exception) -> bool:
    """
    Whether a caller-side retry could succeed.

    The library itself never retries; this is for callers wrapping calls.
    """
    if isinstance(error, TransportError):
        return error.status_code is None or error.status_code >= 500
    if isinstance(error, YouTubeAPIError):
        if error.reason in RETRYABLE_REASONS:
            return True
        return error.code is not None and error.code >= 500
    return False
