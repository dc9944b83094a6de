"""Pydantic models for core extension descriptors."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Provenance(str, Enum):
    """Where a descriptor instance came from."""

    RESOLVED = "resolved"
    CACHED = "cached"


class ExtensionDependency(BaseModel):
    """Dependency declared by an extension descriptor."""

    id: str = Field(description="Dependency extension id")
    version_constraint: str | None = Field(
        default=None, description="Version constraint (e.g., '[1.0,2.0)')"
    )
    optional: bool = Field(default=False, description="Whether the dependency is optional")

    model_config = ConfigDict(frozen=True)


class CoreExtension(BaseModel):
    """Descriptor of an extension bundled with the running application.

    Provenance and the owning repository are construction parameters and are
    never written to the serialized form, so two descriptors have equal
    content when their ``model_dump()`` output is equal.
    """

    id: str = Field(description="Extension id (e.g., 'org.example:feature-core')")
    version: str = Field(description="Extension version")
    type: str | None = Field(default=None, description="Packaging type (e.g., 'jar')")
    name: str | None = Field(default=None, description="Human-readable name")
    summary: str | None = Field(default=None, description="One-line summary")
    description: str | None = Field(default=None, description="Long description")
    features: list[str] = Field(default_factory=list, description="Provided feature ids")
    authors: list[str] = Field(default_factory=list, description="Author names")
    dependencies: list[ExtensionDependency] = Field(
        default_factory=list, description="Declared dependencies"
    )
    properties: dict[str, str] = Field(
        default_factory=dict, description="Free-form descriptor properties"
    )
    descriptor_url: str = Field(description="URL the descriptor was resolved from")

    provenance: Provenance = Field(default=Provenance.RESOLVED, exclude=True)
    repository: Any = Field(default=None, exclude=True, repr=False)

    model_config = ConfigDict(frozen=True)

    @property
    def is_cached(self) -> bool:
        """True when this instance was loaded from the descriptor cache."""
        return self.provenance is Provenance.CACHED

    def __str__(self) -> str:
        return f"{self.id}/{self.version}"
