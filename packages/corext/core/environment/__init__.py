"""Host environment abstraction (storage locations)."""

from corext.core.environment.impl import ConfigEnvironment, StaticEnvironment
from corext.core.environment.protocols import Environment

__all__ = [
    "Environment",
    "StaticEnvironment",
    "ConfigEnvironment",
]
