"""Resolve-through-cache helpers.

Provides resolve_core_extension() async function and
resolve_core_extension_sync() convenience wrapper.
"""

import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

from corext.core.caching.protocols import DescriptorCacheProtocol, DescriptorCacheSyncProtocol
from corext.core.extension.models import CoreExtension

logger = logging.getLogger(__name__)


def _owned_by(extension: CoreExtension, repository: Any) -> CoreExtension:
    """Return the descriptor with its repository back-reference set."""
    if extension.repository is repository:
        return extension
    return extension.model_copy(update={"repository": repository})


async def resolve_core_extension(
    cache: DescriptorCacheProtocol,
    repository: Any,
    descriptor_url: str,
    resolve: Callable[[str], Awaitable[CoreExtension]],
) -> CoreExtension:
    """
    Get a core extension descriptor, resolving it only on cache miss (async).

    Workflow:
    1. Look the descriptor URL up in the cache
    2. On miss: run resolve(descriptor_url), attach repository, store the result
    3. Return descriptor

    Args:
        cache: Async descriptor cache
        repository: Repository set on the returned descriptor, cached or fresh
        descriptor_url: Descriptor URL
        resolve: Async function doing the full resolution

    Returns:
        Cached or freshly resolved descriptor owned by repository

    Raises:
        CacheStoreError: If the freshly resolved descriptor cannot be stored

    Example:
        >>> extension = await resolve_core_extension(
        ...     cache=descriptor_cache,
        ...     repository=repository,
        ...     descriptor_url="jar:file:/opt/app/lib/core.jar!/META-INF/extension.xed",
        ...     resolve=scan_descriptor,
        ... )
    """
    extension = await cache.lookup(repository, descriptor_url)
    if extension is not None:
        return extension

    start = time.perf_counter()
    extension = _owned_by(await resolve(descriptor_url), repository)
    resolve_ms = (time.perf_counter() - start) * 1000

    await cache.store(extension)

    if cache.enabled:
        logger.debug(f"Resolved and cached {descriptor_url} in {resolve_ms:.1f}ms")
    return extension


def resolve_core_extension_sync(
    cache: DescriptorCacheSyncProtocol,
    repository: Any,
    descriptor_url: str,
    resolve: Callable[[str], CoreExtension],
) -> CoreExtension:
    """
    Get a core extension descriptor, resolving it only on cache miss (sync).

    Blocking version for scripts, tests, and non-async contexts.

    Args:
        cache: Sync descriptor cache
        repository: Repository set on the returned descriptor, cached or fresh
        descriptor_url: Descriptor URL
        resolve: Function doing the full resolution

    Returns:
        Cached or freshly resolved descriptor owned by repository

    Raises:
        CacheStoreError: If the freshly resolved descriptor cannot be stored
    """
    extension = cache.lookup(repository, descriptor_url)
    if extension is not None:
        return extension

    start = time.perf_counter()
    extension = _owned_by(resolve(descriptor_url), repository)
    resolve_ms = (time.perf_counter() - start) * 1000

    cache.store(extension)

    if cache.enabled:
        logger.debug(f"Resolved and cached {descriptor_url} in {resolve_ms:.1f}ms")
    return extension
