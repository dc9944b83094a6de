"""Exceptions raised by the descriptor cache."""

from __future__ import annotations


class CacheError(Exception):
    """Base exception for descriptor cache failures."""


class CacheStoreError(CacheError):
    """Failure to persist a descriptor.

    Attributes:
        path: Target cache file
        cause: Underlying I/O or serialization error
    """

    def __init__(self, message: str, *, path: str, cause: BaseException) -> None:
        super().__init__(message)
        self.path = path
        self.cause = cause
