"""Core extension descriptors, their serializer and repository."""

from corext.core.extension.models import CoreExtension, ExtensionDependency, Provenance
from corext.core.extension.repository import CoreExtensionRepository
from corext.core.extension.serializer import (
    DescriptorFormatError,
    ExtensionSerializer,
    JsonExtensionSerializer,
)

__all__ = [
    "CoreExtension",
    "ExtensionDependency",
    "Provenance",
    "CoreExtensionRepository",
    "ExtensionSerializer",
    "JsonExtensionSerializer",
    "DescriptorFormatError",
]
