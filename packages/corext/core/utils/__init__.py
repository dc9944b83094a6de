"""Shared utilities for corext."""

from corext.core.utils.logging import PACKAGE_LOGGER, JsonLineFormatter, configure_logging

__all__ = [
    "PACKAGE_LOGGER",
    "JsonLineFormatter",
    "configure_logging",
]
