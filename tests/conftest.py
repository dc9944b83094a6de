"""Shared pytest fixtures for corext tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from corext.core.environment import StaticEnvironment
from corext.core.extension import (
    CoreExtension,
    CoreExtensionRepository,
    ExtensionDependency,
    JsonExtensionSerializer,
)
from corext.core.io import FakeFileSystem

# ============================================================================
# Collaborator Fixtures
# ============================================================================


@pytest.fixture
def fs() -> FakeFileSystem:
    """Provide fresh FakeFileSystem instance."""
    return FakeFileSystem()


@pytest.fixture
def environment() -> StaticEnvironment:
    """Environment with a permanent directory."""
    return StaticEnvironment("/permanent")


@pytest.fixture
def serializer() -> JsonExtensionSerializer:
    return JsonExtensionSerializer()


@pytest.fixture
def repository() -> CoreExtensionRepository:
    return CoreExtensionRepository()


# ============================================================================
# Descriptor Fixtures
# ============================================================================

CORE_URL = "jar:file:/opt/app/lib/feature-core-1.2.jar!/META-INF/extension.xed"


@pytest.fixture
def make_extension() -> Callable[..., CoreExtension]:
    """Factory fixture building descriptors with overridable fields."""

    def _make(**overrides: object) -> CoreExtension:
        fields: dict[str, object] = {
            "id": "org.example:feature-core",
            "version": "1.2",
            "type": "jar",
            "name": "Feature Core",
            "summary": "Core feature module",
            "features": ["org.example:feature-api"],
            "authors": ["Jane Doe"],
            "dependencies": [
                ExtensionDependency(id="org.example:commons", version_constraint="[2.0,3.0)")
            ],
            "properties": {"build": "42"},
            "descriptor_url": CORE_URL,
        }
        fields.update(overrides)
        return CoreExtension.model_validate(fields)

    return _make


@pytest.fixture
def extension(make_extension: Callable[..., CoreExtension]) -> CoreExtension:
    return make_extension()
