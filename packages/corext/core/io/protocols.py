"""Filesystem operations the descriptor cache needs."""

from typing import Protocol

from .models import AbsolutePath, WriteResult


class FileSystem(Protocol):
    """
    Async filesystem seen by the descriptor cache.

    write_text must swap the whole content in one step: a concurrent reader
    gets the previous entry or the new one, never a mix.
    """

    def join(self, base: AbsolutePath, *parts: str) -> AbsolutePath:
        """Append segments to base without touching the disk."""
        ...

    async def is_file(self, path: AbsolutePath) -> bool:
        """True when path names an existing regular file (links followed)."""
        ...

    async def read_text(self, path: AbsolutePath, encoding: str = "utf-8") -> str:
        """
        Whole content of a text file.

        Raises:
            FileNotFoundError: If there is no such file
            OSError: On any other read failure
        """
        ...

    async def write_text(
        self,
        path: AbsolutePath,
        content: str,
        encoding: str = "utf-8",
    ) -> WriteResult:
        """
        Create or replace a text file, creating missing parent folders.

        Raises:
            OSError: On write failure
        """
        ...

    async def mkdirs(self, path: AbsolutePath, exist_ok: bool = True) -> None:
        """
        Create a folder and its parents.

        Raises:
            FileExistsError: If path exists and exist_ok is false
            OSError: On any other failure
        """
        ...
