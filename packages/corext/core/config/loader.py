"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from corext.core.config.models import AppConfig, LoggingConfig
from corext.core.utils.logging import configure_logging as _configure_logging

logger = logging.getLogger(__name__)

PERMANENT_DIR_ENV = "COREXT_PERMANENT_DIR"
LOG_LEVEL_ENV = "COREXT_LOG_LEVEL"


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("config.json")
        'json'
        >>> detect_format("config.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Format is auto-detected from file extension.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        # safe_load returns None for empty files
        if data is None:
            data = {}

    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping in {path}")
    return data


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    Missing files yield the defaults. Environment variables fill in values
    the file leaves unset.

    Args:
        path: Path to app config file (.json, .yaml, or .yml).
              Defaults to config.json

    Returns:
        Validated AppConfig instance

    Raises:
        ValidationError: If config is invalid
    """
    if path is None:
        path = AppConfig.default_path()

    if Path(path).exists():
        config = AppConfig.model_validate(load_config(path))
    else:
        logger.debug(f"Config file {path} not found, using defaults")
        config = AppConfig()

    return _load_env_vars_into_config(config)


def configure_logging(config: AppConfig | None = None) -> logging.Handler:
    """Configure corext logging from app config.

    Args:
        config: AppConfig instance (loads default if None)

    Returns:
        Handler installed on the corext package logger
    """
    if config is None:
        config = load_app_config()

    return _configure_logging(config.logging)


def _load_env_vars_into_config(config: AppConfig) -> AppConfig:
    """Fill unset config values from the environment.

    Args:
        config: AppConfig instance to populate

    Returns:
        The same config, or an updated copy when a variable applied
    """
    updates: dict[str, Any] = {}

    if config.permanent_dir is None:
        permanent_dir = os.getenv(PERMANENT_DIR_ENV)
        if permanent_dir:
            logger.debug(f"Loaded {PERMANENT_DIR_ENV} from environment")
            updates["permanent_dir"] = permanent_dir

    level = os.getenv(LOG_LEVEL_ENV)
    if level and "level" not in config.logging.model_fields_set:
        updates["logging"] = LoggingConfig.model_validate(
            {**config.logging.model_dump(), "level": level.upper()}
        )

    if updates:
        config = config.model_copy(update=updates)
    return config
