"""Environment implementations."""

from __future__ import annotations

from pathlib import Path

from corext.core.config.models import AppConfig
from corext.core.io import AbsolutePath, absolute_path


class StaticEnvironment:
    """Environment with a fixed permanent directory (or none)."""

    def __init__(self, permanent_dir: str | Path | None = None) -> None:
        self._permanent_dir = absolute_path(permanent_dir) if permanent_dir is not None else None

    def permanent_directory(self) -> AbsolutePath | None:
        return self._permanent_dir


class ConfigEnvironment:
    """Environment backed by ``AppConfig.permanent_dir``.

    Relative directories are resolved against the working directory at
    construction time.
    """

    def __init__(self, config: AppConfig) -> None:
        self._delegate = StaticEnvironment(config.permanent_dir)

    def permanent_directory(self) -> AbsolutePath | None:
        return self._delegate.permanent_directory()
