"""
Configuration Management for ytclient
Settings classes with environment variable overrides and optional YAML file
"""

import yaml
import logging
import threading
from pathlib import Path
from typing import Dict, Any, List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


# ============================================================================
# Core Configuration Classes
# ============================================================================


class LoggingConfig(BaseSettings):
    """Logging Configuration"""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )
    file_path: Optional[str] = Field(default=None, description="Log file path")


class YouTubeAPISettings(BaseSettings):
    """YouTube Data API settings"""

    model_config = SettingsConfigDict(env_prefix="YOUTUBE_")

    api_key: str = Field(default="", description="YouTube Data API v3 key")
    base_url: str = Field(
        default="https://www.googleapis.com/youtube/v3",
        description="API root every endpoint is appended to",
    )

    # Request Settings
    request_timeout: Optional[float] = Field(
        default=None, description="Request timeout in seconds (None = httpx default)"
    )
    encode_query_params: bool = Field(
        default=True,
        description=(
            "Percent-encode query values; '%' is left as-is so pre-encoded "
            "values pass through, and a literal '%' must be sent as '%25'"
        ),
    )

    # Pagination
    max_results_per_page: int = Field(
        default=50, description="Max results per API call"
    )
    default_max_results: int = Field(
        default=10, description="Default number of items for list operations"
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate API key format"""
        if v and len(v) < 20:
            raise ValueError("YouTube API key appears to be invalid (too short)")
        return v

    @field_validator("max_results_per_page")
    @classmethod
    def validate_page_size(cls, v: int) -> int:
        """The API caps list pages at 50 items"""
        if not 1 <= v <= 50:
            raise ValueError("max_results_per_page must be between 1 and 50")
        return v


# ============================================================================
# Main Configuration Class
# ============================================================================


class Config:
    """
    Main Application Configuration
    Aggregates all configuration modules with unified access
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration

        Args:
            config_path: Optional YAML config file path
        """
        self.config_path = config_path or "configs/app.yaml"
        self.yaml_config = self._load_yaml_config()

        self.logging = LoggingConfig()
        self.youtube_api = YouTubeAPISettings()

    def _load_yaml_config(self) -> Dict[str, Any]:
        """Load YAML configuration file"""
        config_file = Path(self.config_path)

        if not config_file.exists():
            logger.debug(f"Config file not found: {config_file}, using defaults")
            return {}

        with open(config_file, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot notation key"""
        keys = key.split(".")
        value = self.yaml_config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def to_dict(self) -> Dict[str, Any]:
        """Export full configuration as dictionary"""
        return {
            "logging": self.logging.model_dump(),
            "youtube_api": self.youtube_api.model_dump(exclude={"api_key"}),
        }

    def get_summary(self) -> Dict[str, Any]:
        """Get configuration summary"""
        return {
            "app": self.yaml_config.get("app", {}),
            "youtube_api": {
                "base_url": self.youtube_api.base_url,
                "api_key_set": bool(self.youtube_api.api_key),
                "page_size": self.youtube_api.max_results_per_page,
                "encode_query_params": self.youtube_api.encode_query_params,
            },
            "logging": {
                "level": self.logging.level,
                "file_path": self.logging.file_path,
            },
        }


# ============================================================================
# Global Configuration Instance (Singleton)
# ============================================================================

_config: Optional[Config] = None
_config_lock = threading.Lock()
_logging_handlers: List[logging.Handler] = []


def _needs_load(config_path: Optional[str]) -> bool:
    return _config is None or (
        config_path is not None and _config.config_path != config_path
    )


def get_config(config_path: Optional[str] = None) -> Config:
    """
    Get or create global configuration instance (Thread-safe singleton)

    Args:
        config_path: Optional path to config file. A path other than the
            one the current instance was loaded from rebuilds it.

    Returns:
        Config instance
    """
    global _config

    if _needs_load(config_path):
        with _config_lock:
            if _needs_load(config_path):
                _config = Config(config_path)
                logger.debug(f"✅ Configuration initialized from {_config.config_path}")

    return _config


def reload_config(config_path: Optional[str] = None) -> Config:
    """Force reload configuration"""
    global _config

    with _config_lock:
        _config = Config(config_path)
        logger.info("🔄 Configuration reloaded")

    return _config


def reset_config() -> None:
    """Reset global configuration (mainly for testing)"""
    global _config

    with _config_lock:
        _config = None


# ============================================================================
# Configuration Validation
# ============================================================================


def validate_config(config: Optional[Config] = None) -> Dict[str, Any]:
    """
    Validate configuration

    Args:
        config: Config instance (uses global if None)

    Returns:
        Validation result with errors and warnings
    """
    if config is None:
        config = get_config()

    errors = []
    warnings = []

    if not config.youtube_api.base_url.startswith(("https://", "http://")):
        errors.append(f"Invalid API base URL: {config.youtube_api.base_url}")

    if not config.youtube_api.api_key:
        warnings.append("YouTube API key not set - only OAuth calls will work")

    if config.youtube_api.default_max_results <= 0:
        warnings.append("default_max_results <= 0 fetches every page of list results")

    if config.logging.file_path:
        log_path = Path(config.logging.file_path)
        if not log_path.parent.exists():
            try:
                log_path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                errors.append(f"Cannot create log directory: {e}")

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
    }


# ============================================================================
# Convenience Functions
# ============================================================================


def get_youtube_settings() -> YouTubeAPISettings:
    """Get YouTube API settings (shortcut)"""
    return get_config().youtube_api


def setup_logging(config: Optional[Config] = None) -> None:
    """
    Setup logging based on configuration

    Handlers installed by an earlier call are replaced, not stacked.

    Args:
        config: Config instance (uses global if None)
    """
    import logging.handlers

    if config is None:
        config = get_config()

    log_level = getattr(logging, config.logging.level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    while _logging_handlers:
        handler = _logging_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(config.logging.format))
    root_logger.addHandler(console_handler)
    _logging_handlers.append(console_handler)

    # File handler (if specified)
    if config.logging.file_path:
        log_path = Path(config.logging.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_path,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(config.logging.format))
        root_logger.addHandler(file_handler)
        _logging_handlers.append(file_handler)

    logger.info(f"📝 Logging configured: level={config.logging.level}")
