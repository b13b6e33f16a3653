"""
Base Service
Shared helpers for service classes: settings access, logging, validation
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from ytclient.app.config import Config, get_config
from ytclient.domain.interfaces import YouTubeTransport
from ytclient.services.exceptions import ValidationError


class BaseService(ABC):
    """
    Base class for services built on a YouTube transport

    Subclasses never hold credentials; tokens arrive per call.
    """

    def __init__(self, client: YouTubeTransport, config: Optional[Config] = None):
        self.client = client
        self.config = config or get_config()
        self.settings = self.config.youtube_api
        self.logger = logging.getLogger(f"ytclient.services.{self.get_service_name()}")

    @abstractmethod
    def get_service_name(self) -> str:
        ...

    # ========================================================================
    # Logging
    # ========================================================================

    def log_info(self, message: str) -> None:
        self.logger.info(message)

    # ========================================================================
    # Validation
    # ========================================================================

    def validate_required(
        self, value: Any, field: str, message: Optional[str] = None
    ) -> str:
        """
        Ensure a required string argument is present and not blank

        Args:
            value: Argument as passed by the caller
            field: Argument name (reported on the error)
            message: Error message (defaults to 'Invalid <field>')

        Returns:
            The value stripped of surrounding whitespace

        Raises:
            ValidationError: None, non-string, empty or whitespace-only value
        """
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(message or f"Invalid {field}", field=field)
        return value.strip()

    def resolve_max_results(self, max_results: Optional[int]) -> int:
        if max_results is None:
            return self.settings.default_max_results
        return max_results
