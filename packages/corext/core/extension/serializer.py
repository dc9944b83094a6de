"""Descriptor serialization.

The descriptor cache treats the serialized text as opaque; it only calls
``save`` and ``load`` on an ``ExtensionSerializer``.
"""

from __future__ import annotations

from typing import Any, Protocol

from pydantic import TypeAdapter, ValidationError

from corext.core.extension.models import CoreExtension, Provenance

_PAYLOAD = TypeAdapter(dict[str, Any])


class DescriptorFormatError(ValueError):
    """Raised when serialized descriptor content cannot be parsed."""


class ExtensionSerializer(Protocol):
    """Protocol for descriptor serializers."""

    def save(self, extension: CoreExtension) -> str:
        """Serialize a descriptor to text."""
        ...

    def load(
        self,
        repository: Any,
        descriptor_url: str,
        content: str,
        provenance: Provenance = Provenance.RESOLVED,
    ) -> CoreExtension:
        """
        Build a descriptor from serialized text.

        Args:
            repository: Repository that will own the descriptor
            descriptor_url: URL to attach to the descriptor
            content: Serialized descriptor
            provenance: Provenance tag for the new instance

        Raises:
            DescriptorFormatError: If content is malformed
        """
        ...


class JsonExtensionSerializer:
    """JSON serializer backed by the pydantic model schema."""

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def save(self, extension: CoreExtension) -> str:
        return extension.model_dump_json(indent=self.indent)

    def load(
        self,
        repository: Any,
        descriptor_url: str,
        content: str,
        provenance: Provenance = Provenance.RESOLVED,
    ) -> CoreExtension:
        try:
            payload = _PAYLOAD.validate_json(content)
            return CoreExtension.model_validate(
                {
                    **payload,
                    "descriptor_url": descriptor_url,
                    "provenance": provenance,
                    "repository": repository,
                }
            )
        except ValidationError as e:
            raise DescriptorFormatError(
                f"Invalid extension descriptor for {descriptor_url}: {e}"
            ) from e
