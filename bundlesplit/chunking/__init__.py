"""Chunk partitioning policy for emitted bundles."""

from .classifier import (
    DEFAULT_DEPENDENCY_MARKER,
    DEFAULT_PRELOAD_MARKERS,
    ChunkClassifier,
    classify,
    default_rules,
    package_marker,
)

__all__ = [
    "ChunkClassifier",
    "classify",
    "default_rules",
    "package_marker",
    "DEFAULT_DEPENDENCY_MARKER",
    "DEFAULT_PRELOAD_MARKERS",
]
