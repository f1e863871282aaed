"""bundlesplit Core Types Package - Common type definitions and aliases.

The types are organized into logical groups:
- Build mode and chunk name enumerations
- Rule matching kinds
- String aliases for module identifiers and paths
"""

from .common import (
    AliasName,
    BuildMode,
    ChunkName,
    MatchKind,
    ModuleId,
    ModulePath,
)

__all__ = [
    # Enums
    "BuildMode",
    "ChunkName",
    "MatchKind",

    # String types
    "ModuleId",
    "ModulePath",
    "AliasName",
]
