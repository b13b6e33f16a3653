"""
Application configuration
"""

from .config import (
    Config,
    LoggingConfig,
    YouTubeAPISettings,
    get_config,
    get_youtube_settings,
    reload_config,
    reset_config,
    setup_logging,
    validate_config,
)

__all__ = [
    "Config",
    "LoggingConfig",
    "YouTubeAPISettings",
    "get_config",
    "get_youtube_settings",
    "reload_config",
    "reset_config",
    "setup_logging",
    "validate_config",
]
