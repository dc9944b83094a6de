"""Logging setup for the corext package.

corext is embedded in a host application, so it never reconfigures the root
logger. configure_logging() installs one handler on the ``corext`` package
logger; records still propagate to whatever the host has set up.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from corext.core.config.models import LoggingConfig

PACKAGE_LOGGER = "corext"

# LogRecord attributes that are not user supplied ``extra`` fields
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
}


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record.

    Example line::

        {"ts": "2026-01-29T12:00:00+00:00", "level": "WARNING",
         "logger": "corext.core.caching.backends.fs",
         "message": "Failed to parse cached core extension ...",
         "where": "fs:lookup:131", "cache_path": "..."}

    ``extra`` fields are merged at the top level. Exceptions add an ``error``
    object with type, message and traceback.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "where": f"{record.module}:{record.funcName}:{record.lineno}",
        }
        entry.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )

        if record.exc_info and record.exc_info[0] is not None:
            entry["error"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(entry, default=str)


def _build_handler(config: LoggingConfig) -> logging.Handler:
    handler: logging.Handler
    if config.filename:
        handler = logging.FileHandler(config.filename, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stdout)

    if config.structured:
        handler.setFormatter(JsonLineFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))
    return handler


def configure_logging(config: LoggingConfig) -> logging.Handler:
    """Install the corext handler described by config.

    Safe to call repeatedly: the handler from a previous call is closed and
    replaced, handlers added by the host are left alone.

    Args:
        config: Level, format, destination file and structured switch

    Returns:
        The installed handler

    Examples:
        >>> configure_logging(LoggingConfig(level="DEBUG", structured=True))
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    for previous in [h for h in package_logger.handlers if getattr(h, "_corext", False)]:
        package_logger.removeHandler(previous)
        previous.close()

    handler = _build_handler(config)
    handler._corext = True  # type: ignore[attr-defined]
    package_logger.addHandler(handler)
    package_logger.setLevel(config.level.upper())
    return handler
