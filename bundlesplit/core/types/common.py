"""bundlesplit Core Types - Common type definitions and aliases.

This module contains the enums and type aliases shared by the environment
selector, the chunk classifier and the build configuration layer.
"""

from enum import Enum
from typing import Optional, NewType


# String-based type aliases for better semantic clarity
ModuleId = NewType("ModuleId", str)        # Resolved module identifier, e.g. "/app/node_modules/x/index.js"
ModulePath = NewType("ModulePath", str)    # Concrete source module path
AliasName = NewType("AliasName", str)      # Symbolic import name, e.g. "@env"


class BuildMode(Enum):
    """Build profile selected once per build invocation."""

    PRODUCTION = "production"
    DEVELOPMENT = "development"
    DEFAULT = "default"

    @classmethod
    def from_string(cls, value: Optional[str]) -> "BuildMode":
        """Convert a mode token to BuildMode, defaulting to DEFAULT for anything unrecognized."""
        if isinstance(value, BuildMode):
            return value
        if value == cls.PRODUCTION.value:
            return cls.PRODUCTION
        if value == cls.DEVELOPMENT.value:
            return cls.DEVELOPMENT
        return cls.DEFAULT


class ChunkName(Enum):
    """Well-known output chunks emitted by the bundler."""

    BABYLONJS = "babylonjs"   # 3D engine core
    LOADERS = "loaders"       # 3D engine loaders (glTF and texture side effects)
    FIREBASE = "firebase"     # remote backend SDK
    MARKED = "marked"         # markdown rendering
    VENDOR = "vendor"         # every other third-party package, plus preload helpers


class MatchKind(Enum):
    """How a chunk rule tests a module identifier against its markers."""

    CONTAINS_ANY = "contains_any"
    LACKS_ALL = "lacks_all"
    ALWAYS = "always"
