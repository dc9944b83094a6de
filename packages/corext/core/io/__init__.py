"""Filesystem abstraction layer for corext.

Example:
    >>> from corext.core.io import RealFileSystem, absolute_path
    >>> fs = RealFileSystem()
    >>> path = fs.join(absolute_path("/tmp"), "cache", "test.txt")
    >>> await fs.write_text(path, "Hello, world!")
    >>> content = await fs.read_text(path)
"""

from .impl_fake import FakeFileSystem
from .impl_real import RealFileSystem
from .models import AbsolutePath, WriteResult, absolute_path
from .protocols import FileSystem

__all__ = [
    "AbsolutePath",
    "absolute_path",
    "WriteResult",
    "FileSystem",
    "RealFileSystem",
    "FakeFileSystem",
]
