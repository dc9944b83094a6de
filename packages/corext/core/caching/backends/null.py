"""No-op descriptor cache.

Always reports cache miss, discards all stores.
"""

import asyncio
from typing import Any

from corext.core.extension.models import CoreExtension
from corext.core.io import WriteResult


class NullDescriptorCache:
    """No-op async descriptor cache, used when caching is switched off."""

    @property
    def enabled(self) -> bool:
        return False

    async def store(self, extension: CoreExtension) -> WriteResult | None:
        """Discard (async)."""
        return None

    async def lookup(self, repository: Any, descriptor_url: str) -> CoreExtension | None:
        """Always returns None (async)."""
        return None


class NullDescriptorCacheSync:
    """Synchronous wrapper around NullDescriptorCache."""

    def __init__(self) -> None:
        self._async_cache = NullDescriptorCache()

    @property
    def enabled(self) -> bool:
        return False

    def store(self, extension: CoreExtension) -> WriteResult | None:
        """Discard (blocking)."""
        return asyncio.run(self._async_cache.store(extension))

    def lookup(self, repository: Any, descriptor_url: str) -> CoreExtension | None:
        """Always returns None (blocking)."""
        return asyncio.run(self._async_cache.lookup(repository, descriptor_url))
