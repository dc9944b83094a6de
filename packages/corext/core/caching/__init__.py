"""Core extension descriptor cache.

Stores resolved core extension descriptors on disk so they do not have to be
resolved again at next restart.

Key features:
- One file per descriptor URL under ``<permanent dir>/cache/extension/core``
- Disabled mode when the environment has no permanent directory
- Store failures raise CacheStoreError; unreadable entries are a cache miss
"""

import logging

from corext.core.caching.backends.fs import DescriptorCache, DescriptorCacheSync
from corext.core.caching.backends.null import NullDescriptorCache, NullDescriptorCacheSync
from corext.core.caching.errors import CacheError, CacheStoreError
from corext.core.caching.keys import (
    CACHE_FILE_EXTENSION,
    cache_file_name,
    derive_key,
    external_form,
    legacy_hash_key,
    sha256_key,
)
from corext.core.caching.protocols import DescriptorCacheProtocol, DescriptorCacheSyncProtocol
from corext.core.caching.wrapper import resolve_core_extension, resolve_core_extension_sync
from corext.core.config.models import CacheConfig
from corext.core.environment.protocols import Environment
from corext.core.extension.serializer import ExtensionSerializer
from corext.core.io import FileSystem


def create_descriptor_cache(
    config: CacheConfig,
    environment: Environment,
    serializer: ExtensionSerializer,
    fs: FileSystem | None = None,
    logger: logging.Logger | logging.LoggerAdapter | None = None,
) -> DescriptorCache | NullDescriptorCache:
    """Build the async cache selected by configuration."""
    if not config.enabled:
        return NullDescriptorCache()
    return DescriptorCache(
        environment, serializer, fs, key_strategy=config.key_strategy, logger=logger
    )


__all__ = [
    # Core
    "DescriptorCacheProtocol",
    "DescriptorCacheSyncProtocol",
    "CacheError",
    "CacheStoreError",
    # Backends
    "DescriptorCache",
    "DescriptorCacheSync",
    "NullDescriptorCache",
    "NullDescriptorCacheSync",
    "create_descriptor_cache",
    # Keys
    "CACHE_FILE_EXTENSION",
    "cache_file_name",
    "derive_key",
    "external_form",
    "legacy_hash_key",
    "sha256_key",
    # Helpers
    "resolve_core_extension",
    "resolve_core_extension_sync",
]
