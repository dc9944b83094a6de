"""Filesystem-backed descriptor cache using core.io for all operations.

Layout: ``<permanent dir>/cache/extension/core/<key>.xed``, one file per
descriptor URL.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from corext.core.caching.errors import CacheStoreError
from corext.core.caching.keys import cache_file_name
from corext.core.config.models import KeyStrategy
from corext.core.environment.protocols import Environment
from corext.core.extension.models import CoreExtension, Provenance
from corext.core.extension.serializer import ExtensionSerializer
from corext.core.io import AbsolutePath, FileSystem, RealFileSystem, WriteResult

CACHE_SUBDIR = ("cache", "extension", "core")


class DescriptorCache:
    """
    Async cache of resolved core extension descriptors.

    The cache folder is taken from the environment once, at construction.
    Without a permanent directory the cache is disabled for its whole
    lifetime: store does nothing and lookup always misses.
    """

    def __init__(
        self,
        environment: Environment,
        serializer: ExtensionSerializer,
        fs: FileSystem | None = None,
        *,
        key_strategy: KeyStrategy = "sha256",
        logger: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> None:
        """
        Initialize descriptor cache.

        Args:
            environment: Provider of the permanent storage directory
            serializer: Descriptor serializer
            fs: Async filesystem implementation (defaults to RealFileSystem)
            key_strategy: Cache file name derivation
            logger: Receives warnings about unreadable cache files
        """
        self.serializer = serializer
        self.fs = fs if fs is not None else RealFileSystem()
        self.key_strategy = key_strategy
        self.logger = logger if logger is not None else logging.getLogger(__name__)

        permanent_dir = environment.permanent_directory()
        self._folder: AbsolutePath | None = (
            self.fs.join(permanent_dir, *CACHE_SUBDIR) if permanent_dir is not None else None
        )

    @property
    def enabled(self) -> bool:
        return self._folder is not None

    @property
    def folder(self) -> AbsolutePath | None:
        """Cache folder, None when disabled."""
        return self._folder

    def path_for(self, descriptor_url: str) -> AbsolutePath | None:
        """Compute cache file path for a descriptor URL (sync, None when disabled)."""
        if self._folder is None:
            return None
        return self.fs.join(self._folder, cache_file_name(descriptor_url, self.key_strategy))

    async def store(self, extension: CoreExtension) -> WriteResult | None:
        """
        Persist a descriptor, replacing any previous entry for its URL (async).

        Args:
            extension: Descriptor to store; its descriptor_url selects the file

        Returns:
            WriteResult, or None when the cache is disabled

        Raises:
            CacheStoreError: On serialization or write failure
        """
        if self._folder is None:
            return None

        path: AbsolutePath | None = None
        try:
            path = self.path_for(extension.descriptor_url)
            content = self.serializer.save(extension)
            await self.fs.mkdirs(self._folder, exist_ok=True)  # type: ignore[arg-type]
            result = await self.fs.write_text(path, content)
        except Exception as e:
            where = path if path is not None else self._folder
            raise CacheStoreError(
                f"Failed to store core extension {extension} in {where}: {e}",
                path=str(where),
                cause=e,
            ) from e

        self.logger.debug(f"Stored core extension {extension} in {path}")
        return result

    async def lookup(self, repository: Any, descriptor_url: str) -> CoreExtension | None:
        """
        Load the cached descriptor for a URL (async).

        Unreadable or malformed entries are logged as warnings and reported
        as a miss. A descriptor stored under another URL with the same key is
        returned as is.

        Args:
            repository: Repository to attach to the loaded descriptor
            descriptor_url: Descriptor URL to look up

        Returns:
            Descriptor tagged as cached, or None on miss
        """
        if self._folder is None:
            return None

        path: AbsolutePath | None = None
        try:
            path = self.path_for(descriptor_url)
            if path is None or not await self.fs.is_file(path):
                return None
            content = await self.fs.read_text(path)
            extension = self.serializer.load(
                repository, descriptor_url, content, provenance=Provenance.CACHED
            )
        except Exception as e:
            where = path if path is not None else descriptor_url
            self.logger.warning(f"Failed to parse cached core extension {where}: {e}")
            return None

        self.logger.debug(f"Cache hit: {descriptor_url}")
        return extension


class DescriptorCacheSync:
    """
    Synchronous wrapper around DescriptorCache.

    Uses asyncio.run() to execute async operations in blocking mode, so it
    must not be called from a running event loop.
    """

    def __init__(
        self,
        environment: Environment,
        serializer: ExtensionSerializer,
        fs: FileSystem | None = None,
        *,
        key_strategy: KeyStrategy = "sha256",
        logger: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> None:
        self._async_cache = DescriptorCache(
            environment, serializer, fs, key_strategy=key_strategy, logger=logger
        )

    @property
    def enabled(self) -> bool:
        return self._async_cache.enabled

    @property
    def folder(self) -> AbsolutePath | None:
        return self._async_cache.folder

    def path_for(self, descriptor_url: str) -> AbsolutePath | None:
        return self._async_cache.path_for(descriptor_url)

    def store(self, extension: CoreExtension) -> WriteResult | None:
        """Store descriptor (blocking)."""
        return asyncio.run(self._async_cache.store(extension))

    def lookup(self, repository: Any, descriptor_url: str) -> CoreExtension | None:
        """Load descriptor, None on miss (blocking)."""
        return asyncio.run(self._async_cache.lookup(repository, descriptor_url))
