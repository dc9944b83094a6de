"""Protocols for descriptor cache backends.

Defines async-first DescriptorCacheProtocol and sync convenience wrapper protocol.
"""

from typing import Any, Protocol

from corext.core.extension.models import CoreExtension
from corext.core.io import WriteResult


class DescriptorCacheProtocol(Protocol):
    """
    Protocol for descriptor cache backends (async-first).

    All implementations must support:
    - Miss-on-error semantics for lookup (corruption → cache miss)
    - Propagated errors for store
    """

    @property
    def enabled(self) -> bool:
        """False when the cache never touches the disk."""
        ...

    async def store(self, extension: CoreExtension) -> WriteResult | None:
        """
        Persist a descriptor under its descriptor URL (async).

        Returns:
            WriteResult, or None when caching is disabled

        Raises:
            CacheStoreError: On write or serialization failure
        """
        ...

    async def lookup(self, repository: Any, descriptor_url: str) -> CoreExtension | None:
        """
        Load a cached descriptor (async).

        Returns:
            Descriptor tagged as cached, or None on miss/error/disabled
        """
        ...


class DescriptorCacheSyncProtocol(Protocol):
    """Blocking counterpart of DescriptorCacheProtocol."""

    @property
    def enabled(self) -> bool:
        """False when the cache never touches the disk."""
        ...

    def store(self, extension: CoreExtension) -> WriteResult | None:
        """Persist a descriptor (blocking)."""
        ...

    def lookup(self, repository: Any, descriptor_url: str) -> CoreExtension | None:
        """Load a cached descriptor, None on miss (blocking)."""
        ...
