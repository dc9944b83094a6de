"""Tests for corext logging setup."""

from collections.abc import Iterator
import json
import logging
from pathlib import Path
import sys

import pytest

from corext.core.config import AppConfig, LoggingConfig
from corext.core.session import CorextSession
from corext.core.utils.logging import PACKAGE_LOGGER, JsonLineFormatter, configure_logging


@pytest.fixture(autouse=True)
def restore_package_logger() -> Iterator[logging.Logger]:
    """Undo configure_logging() side effects on the corext logger."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = package_logger.handlers[:], package_logger.level
    yield package_logger
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


def _record(level: int = logging.INFO, **kwargs) -> logging.LogRecord:
    record = logging.LogRecord(
        name="corext.core.caching.backends.fs",
        level=level,
        pathname="/src/corext/core/caching/backends/fs.py",
        lineno=131,
        msg=kwargs.pop("msg", "Cache hit: %s"),
        args=kwargs.pop("args", ("file:///a.jar",)),
        exc_info=kwargs.pop("exc_info", None),
        func="lookup",
    )
    for key, value in kwargs.items():
        setattr(record, key, value)
    return record


class TestJsonLineFormatter:
    """Tests for the JSON line format."""

    def test_basic_fields(self):
        data = json.loads(JsonLineFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "corext.core.caching.backends.fs"
        assert data["message"] == "Cache hit: file:///a.jar"
        assert data["where"] == "fs:lookup:131"
        assert data["ts"].endswith("+00:00")
        assert "error" not in data

    def test_extra_fields_are_top_level(self):
        """Test values passed through extra= appear next to the message."""
        record = _record(descriptor_url="file:///a.jar", cache_path="/perm/cache/a.xed")

        data = json.loads(JsonLineFormatter().format(record))

        assert data["descriptor_url"] == "file:///a.jar"
        assert data["cache_path"] == "/perm/cache/a.xed"
        assert "args" not in data
        assert "pathname" not in data

    def test_exception_is_reported(self):
        try:
            raise ValueError("bad descriptor")
        except ValueError:
            exc_info = sys.exc_info()

        record = _record(level=logging.WARNING, msg="Failed", args=(), exc_info=exc_info)
        data = json.loads(JsonLineFormatter().format(record))

        assert data["error"]["type"] == "ValueError"
        assert data["error"]["message"] == "bad descriptor"
        assert "ValueError: bad descriptor" in data["error"]["traceback"]


class TestConfigureLogging:
    """Tests for installing the corext handler."""

    def test_text_output_to_stdout(self, capsys: pytest.CaptureFixture[str]):
        configure_logging(LoggingConfig(level="INFO", format="%(levelname)s | %(message)s"))

        logging.getLogger("corext.core.session").info("Session ready")

        assert "INFO | Session ready" in capsys.readouterr().out

    def test_level_applies_to_package_only(self, restore_package_logger: logging.Logger):
        root_level = logging.getLogger().level

        configure_logging(LoggingConfig(level="DEBUG"))

        assert restore_package_logger.level == logging.DEBUG
        assert logging.getLogger().level == root_level

    def test_repeated_calls_replace_handler(self, restore_package_logger: logging.Logger):
        """Test reconfiguring keeps one corext handler and leaves host handlers."""
        host_handler = logging.NullHandler()
        restore_package_logger.addHandler(host_handler)

        first = configure_logging(LoggingConfig())
        second = configure_logging(LoggingConfig(level="WARNING"))

        assert first not in restore_package_logger.handlers
        assert second in restore_package_logger.handlers
        assert host_handler in restore_package_logger.handlers

    def test_structured_output_to_file(self, tmp_path: Path):
        log_file = tmp_path / "corext.jsonl"
        handler = configure_logging(
            LoggingConfig(level="DEBUG", structured=True, filename=str(log_file))
        )

        package_logger = logging.getLogger("corext.core.caching.backends.fs")
        package_logger.debug("Cache hit: %s", "file:///a.jar")
        package_logger.warning("Failed to parse cached core extension /x.xed: truncated")
        handler.flush()

        lines = [json.loads(line) for line in log_file.read_text().splitlines() if line]

        assert [line["level"] for line in lines] == ["DEBUG", "WARNING"]
        assert lines[0]["message"] == "Cache hit: file:///a.jar"


class TestSessionLogging:
    """Tests for logging setup through CorextSession."""

    def test_session_installs_handler_on_request(self, restore_package_logger: logging.Logger):
        config = AppConfig(logging=LoggingConfig(level="WARNING", structured=True))

        CorextSession(app_config=config, setup_logging=True)

        installed = [h for h in restore_package_logger.handlers if getattr(h, "_corext", False)]
        assert len(installed) == 1
        assert isinstance(installed[0].formatter, JsonLineFormatter)
        assert restore_package_logger.level == logging.WARNING

    def test_session_leaves_logging_alone_by_default(
        self, restore_package_logger: logging.Logger
    ):
        handlers = restore_package_logger.handlers[:]

        CorextSession(app_config=AppConfig())

        assert restore_package_logger.handlers == handlers
