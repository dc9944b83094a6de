"""Configuration management for corext."""

from corext.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from corext.core.config.models import (
    AppConfig,
    CacheConfig,
    ConfigBase,
    KeyStrategy,
    LoggingConfig,
)

__all__ = [
    "AppConfig",
    "CacheConfig",
    "ConfigBase",
    "KeyStrategy",
    "LoggingConfig",
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
]
