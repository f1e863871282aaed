"""bundlesplit Core Models Package - Domain model definitions.

The models follow these principles:
- Immutable data structures using dataclasses with frozen=True
- Validation in __post_init__, raising core ValidationError
- Dictionary conversion for emitting bundler configuration
"""

from .alias import AliasBinding
from .chunk_rule import ChunkRule, normalize_module_id

__all__ = [
    "AliasBinding",
    "ChunkRule",
    "normalize_module_id",
]
