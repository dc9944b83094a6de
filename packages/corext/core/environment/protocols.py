"""Protocol for the host environment."""

from typing import Protocol

from corext.core.io import AbsolutePath


class Environment(Protocol):
    """Source of host-owned storage locations."""

    def permanent_directory(self) -> AbsolutePath | None:
        """
        Directory for data that must survive restarts.

        Returns:
            Absolute directory path, or None when no writable location exists
        """
        ...
