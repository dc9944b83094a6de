"""In-memory FileSystem used by the test suite."""

from pathlib import Path, PurePosixPath

from .models import AbsolutePath, WriteResult

_ROOT = PurePosixPath("/")


class FakeFileSystem:
    """
    Dictionary-backed FileSystem.

    Paths are normalized to absolute POSIX paths. With ``read_only`` every
    write and mkdirs raises PermissionError, which stands in for a full or
    read-only disk. One instance per test; no locking.
    """

    def __init__(self, *, read_only: bool = False) -> None:
        self.read_only = read_only
        self._files: dict[PurePosixPath, str] = {}
        self._dirs: set[PurePosixPath] = {_ROOT}

    @staticmethod
    def _key(path: AbsolutePath | str) -> PurePosixPath:
        return _ROOT / PurePosixPath(path)

    def _check_writable(self, path: AbsolutePath) -> None:
        if self.read_only:
            raise PermissionError(f"Read-only filesystem: {path}")

    def _add_dir(self, key: PurePosixPath) -> None:
        self._dirs.add(key)
        self._dirs.update(key.parents)

    def join(self, base: AbsolutePath, *parts: str) -> AbsolutePath:
        return AbsolutePath(Path(self._key(base).joinpath(*parts)))

    async def is_file(self, path: AbsolutePath) -> bool:
        return self._key(path) in self._files

    async def is_dir(self, path: AbsolutePath) -> bool:
        return self._key(path) in self._dirs

    async def read_text(self, path: AbsolutePath, encoding: str = "utf-8") -> str:
        try:
            return self._files[self._key(path)]
        except KeyError:
            raise FileNotFoundError(f"File not found: {path}") from None

    async def write_text(
        self,
        path: AbsolutePath,
        content: str,
        encoding: str = "utf-8",
    ) -> WriteResult:
        self._check_writable(path)
        key = self._key(path)
        if key in self._dirs:
            raise IsADirectoryError(f"Is a directory: {path}")

        self._add_dir(key.parent)
        self._files[key] = content
        return WriteResult(
            path=str(key), bytes_written=len(content.encode(encoding)), duration_ms=0.0
        )

    async def mkdirs(self, path: AbsolutePath, exist_ok: bool = True) -> None:
        self._check_writable(path)
        key = self._key(path)
        if key in self._files or (key in self._dirs and not exist_ok):
            raise FileExistsError(f"Already exists: {path}")
        self._add_dir(key)

    def files(self) -> list[str]:
        """Stored file paths, sorted."""
        return sorted(str(key) for key in self._files)
