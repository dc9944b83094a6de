"""Configuration models for corext."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Self

from pydantic import BaseModel, ConfigDict, Field

KeyStrategy = Literal["sha256", "legacy"]


class ConfigBase(BaseModel):
    """Base class for all corext configurations.

    Subclasses must implement default_path() to specify their default location.
    """

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def default_path(cls) -> Path:
        """Return the default config file path for this config type."""
        raise NotImplementedError(f"{cls.__name__} must implement default_path()")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> Self:
        """Load config from path or use default path.

        Args:
            path: Path to config file, or None to use default

        Returns:
            Loaded config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValidationError: If config is invalid
        """
        # AppConfig needs environment variable loading
        if cls.__name__ == "AppConfig":
            from corext.core.config.loader import load_app_config

            return load_app_config(path)  # type: ignore[return-value]

        from corext.core.config.loader import load_config

        if path is None:
            path = cls.default_path()
        raw = load_config(path)
        return cls.model_validate(raw)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    filename: str | None = Field(default=None, description="Log file (stdout when unset)")
    structured: bool = Field(default=False, description="Emit JSON log lines")


class CacheConfig(BaseModel):
    """Core extension descriptor cache configuration."""

    enabled: bool = Field(default=True, description="Disable to never touch the disk")
    key_strategy: KeyStrategy = Field(
        default="sha256",
        description="Cache file name derivation ('legacy' keeps 32-bit string hash names)",
    )


class AppConfig(ConfigBase):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")
    permanent_dir: str | None = Field(
        default=None, description="Permanent storage root; caching is disabled when unset"
    )
    cache: CacheConfig = CacheConfig()
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("config.json")
