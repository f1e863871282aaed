"""bundlesplit Core Package - Domain models, types, exceptions and configuration.

Modules:
    models: AliasBinding and ChunkRule domain models
    types: Build mode, chunk name and identifier types
    exceptions: Core exception classes for error handling
    config: Unified pydantic-settings configuration
"""

from .exceptions import (
    BundleSplitError,
    ConfigurationError,
    ValidationError,
)
from .models import AliasBinding, ChunkRule
from .types import BuildMode, ChunkName, MatchKind, ModuleId, ModulePath

__all__ = [
    # Domain Models
    "AliasBinding",
    "ChunkRule",

    # Types
    "BuildMode",
    "ChunkName",
    "MatchKind",
    "ModuleId",
    "ModulePath",

    # Exceptions
    "BundleSplitError",
    "ValidationError",
    "ConfigurationError",
]
