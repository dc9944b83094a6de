"""In-memory repository of core extensions."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from corext.core.extension.models import CoreExtension

logger = logging.getLogger(__name__)


class CoreExtensionRepository:
    """Registry of the extensions bundled with the running application.

    Extensions are keyed by id; adding an extension with an id already
    present replaces the previous entry.
    """

    def __init__(self, repository_id: str = "core") -> None:
        self.repository_id = repository_id
        self._extensions: dict[str, CoreExtension] = {}

    def add(self, extension: CoreExtension) -> None:
        """Register an extension."""
        if extension.id in self._extensions:
            logger.debug(f"Replacing core extension {extension.id}")
        self._extensions[extension.id] = extension

    def get(self, extension_id: str) -> CoreExtension | None:
        """Get extension by id, None if unknown."""
        return self._extensions.get(extension_id)

    def exists(self, extension_id: str) -> bool:
        return extension_id in self._extensions

    def __iter__(self) -> Iterator[CoreExtension]:
        return iter(self._extensions.values())

    def __len__(self) -> int:
        return len(self._extensions)

    def __repr__(self) -> str:
        return f"CoreExtensionRepository(id={self.repository_id!r}, size={len(self)})"
