"""Disk FileSystem on top of aiofiles.

A write lands in a hidden sibling file (``.<name>.<random>``) that is then
renamed over the target with os.replace(). Before the rename the sibling gets
the mode a plain open() would have produced under the current umask.
"""

import asyncio
import contextlib
import os
import tempfile
import time
from pathlib import Path

import aiofiles  # type: ignore[import-untyped]
import aiofiles.os  # type: ignore[import-untyped]

from .models import AbsolutePath, WriteResult


def _new_file_mode() -> int:
    """Permission bits open() gives a new file under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _reserve_sibling(target: Path) -> str:
    fd, name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.")
    os.close(fd)
    return name


class RealFileSystem:
    """FileSystem backed by the local disk."""

    def join(self, base: AbsolutePath, *parts: str) -> AbsolutePath:
        """Join paths lexically; symlinks are not resolved."""
        return AbsolutePath(Path(base).joinpath(*parts))

    async def is_file(self, path: AbsolutePath) -> bool:
        return bool(await aiofiles.os.path.isfile(path))

    async def read_text(self, path: AbsolutePath, encoding: str = "utf-8") -> str:
        async with aiofiles.open(path, encoding=encoding) as f:
            content: str = await f.read()
        return content

    async def write_text(
        self,
        path: AbsolutePath,
        content: str,
        encoding: str = "utf-8",
    ) -> WriteResult:
        started = time.perf_counter()
        target = Path(path)
        data = content.encode(encoding)
        loop = asyncio.get_running_loop()

        await aiofiles.os.makedirs(target.parent, exist_ok=True)
        sibling = await loop.run_in_executor(None, _reserve_sibling, target)
        try:
            async with aiofiles.open(sibling, mode="wb") as f:
                await f.write(data)
            await loop.run_in_executor(None, os.chmod, sibling, _new_file_mode())
            await loop.run_in_executor(None, os.replace, sibling, target)
        except BaseException:
            with contextlib.suppress(OSError):
                await aiofiles.os.unlink(sibling)
            raise

        return WriteResult(
            path=str(target),
            bytes_written=len(data),
            duration_ms=(time.perf_counter() - started) * 1000,
        )

    async def mkdirs(self, path: AbsolutePath, exist_ok: bool = True) -> None:
        await aiofiles.os.makedirs(path, exist_ok=exist_ok)
