"""corext session coordinator.

Wires configuration, environment, descriptor serializer, descriptor cache and
the core extension repository together.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any

from corext.core.caching import (
    DescriptorCache,
    NullDescriptorCache,
    create_descriptor_cache,
    resolve_core_extension,
)
from corext.core.config.loader import configure_logging
from corext.core.config.models import AppConfig
from corext.core.environment import ConfigEnvironment, Environment
from corext.core.extension import CoreExtension, CoreExtensionRepository, JsonExtensionSerializer
from corext.core.extension.serializer import ExtensionSerializer
from corext.core.io import FileSystem

logger = logging.getLogger(__name__)


class CorextSession:
    """Session owning the core extension repository and its descriptor cache."""

    def __init__(
        self,
        *,
        app_config: AppConfig | Path | str | None = None,
        environment: Environment | None = None,
        serializer: ExtensionSerializer | None = None,
        fs: FileSystem | None = None,
        setup_logging: bool = False,
    ):
        """Initialize session.

        Args:
            app_config: AppConfig instance, path, or None (uses default path)
            environment: Environment override (defaults to the config's permanent_dir)
            serializer: Descriptor serializer (defaults to JSON)
            fs: Filesystem for the cache (defaults to the real filesystem)
            setup_logging: Install the corext log handler from app_config.logging

        Raises:
            ValidationError: If config is invalid
        """
        self.app_config: AppConfig = self._resolve_config(app_config)
        if setup_logging:
            configure_logging(self.app_config)
        self.environment: Environment = environment or ConfigEnvironment(self.app_config)
        self.serializer: ExtensionSerializer = serializer or JsonExtensionSerializer()
        self.repository = CoreExtensionRepository()
        self.cache: DescriptorCache | NullDescriptorCache = create_descriptor_cache(
            self.app_config.cache, self.environment, self.serializer, fs
        )

        logger.debug(f"Session initialized: descriptor cache enabled={self.cache.enabled}")

    @staticmethod
    def _resolve_config(value: Any) -> AppConfig:
        """Resolve config from value, path, or default.

        Raises:
            TypeError: If value is wrong type
        """
        if value is None:
            return AppConfig.load_or_default()
        elif isinstance(value, (Path, str)):
            return AppConfig.load_or_default(Path(value))
        elif isinstance(value, AppConfig):
            return value
        else:
            raise TypeError(f"Expected AppConfig, Path, str, or None; got {type(value).__name__}")

    async def resolve(
        self,
        descriptor_url: str,
        resolve: Callable[[str], Awaitable[CoreExtension]],
    ) -> CoreExtension:
        """Get descriptor through the cache and register it in the repository.

        Args:
            descriptor_url: Descriptor URL
            resolve: Async full resolution used on cache miss

        Returns:
            Registered descriptor

        Raises:
            CacheStoreError: If a freshly resolved descriptor cannot be stored
        """
        extension = await resolve_core_extension(
            self.cache, self.repository, descriptor_url, resolve
        )
        self.repository.add(extension)
        return extension

    def resolve_sync(
        self,
        descriptor_url: str,
        resolve: Callable[[str], CoreExtension],
    ) -> CoreExtension:
        """Blocking version of resolve()."""

        async def _resolve(url: str) -> CoreExtension:
            return resolve(url)

        return asyncio.run(self.resolve(descriptor_url, _resolve))
