"""Value types shared by the FileSystem implementations."""

from pathlib import Path
from typing import NewType

from pydantic import BaseModel, ConfigDict, Field

AbsolutePath = NewType("AbsolutePath", Path)


def absolute_path(path: str | Path) -> AbsolutePath:
    """
    Anchor a path to the filesystem root.

    Relative paths are taken from the working directory and symlinks in the
    given path are resolved once, here. Joins made later keep their segments
    literal.

    Example:
        >>> absolute_path("/var/lib/app").is_absolute()
        True
    """
    return AbsolutePath(Path(path).resolve())


class WriteResult(BaseModel):
    """Outcome of a successful write_text()."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(description="File that now holds the content")
    bytes_written: int = Field(ge=0)
    duration_ms: float = Field(ge=0.0)
