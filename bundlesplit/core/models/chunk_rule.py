"""bundlesplit ChunkRule Domain Model - One (predicate, outcome) pair of the chunk policy.

A ChunkRule describes a single step of the ordered chunk classification
policy. The predicate is expressed as data (a match kind plus a tuple of
substring markers) so each rule can be tested on its own and emitted into
a bundler configuration unchanged.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any, Tuple

from ..types import MatchKind, ModuleId
from ..exceptions import ValidationError


def normalize_module_id(module_id: str) -> str:
    """Normalize path separators so Windows-style ids match the same markers."""
    return module_id.replace("\\", "/")


@dataclass(frozen=True)
class ChunkRule:
    """Domain model representing one classification rule.

    Attributes:
        name: Rule name, unique within a classifier
        outcome: Chunk name assigned on match, or None for "unclassified"
        kind: How markers are tested against a module identifier
        markers: Substrings tested by CONTAINS_ANY and LACKS_ALL rules
    """

    name: str
    outcome: Optional[str]
    kind: MatchKind = MatchKind.CONTAINS_ANY
    markers: Tuple[str, ...] = ()

    def __post_init__(self):
        """Validate rule after initialization."""
        self._validate()

    def _validate(self) -> None:
        if not self.name:
            raise ValidationError("name", self.name, "Rule name cannot be empty")

        if self.outcome is not None and not self.outcome.strip():
            raise ValidationError("outcome", self.outcome, "Chunk name cannot be blank")

        if self.kind != MatchKind.ALWAYS:
            if not self.markers:
                raise ValidationError(
                    "markers", self.markers,
                    f"{self.kind.value} rule requires at least one marker",
                    context={"rule": self.name},
                )
            if any(not marker for marker in self.markers):
                raise ValidationError(
                    "markers", self.markers, "Markers cannot be empty strings",
                    context={"rule": self.name},
                )

    def matches(self, module_id: ModuleId | str) -> bool:
        """Return True if this rule's predicate holds for the module identifier."""
        if self.kind == MatchKind.ALWAYS:
            return True

        normalized = normalize_module_id(module_id)
        hit = any(marker in normalized for marker in self.markers)

        if self.kind == MatchKind.LACKS_ALL:
            return not hit
        return hit

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChunkRule":
        """Create a ChunkRule from a dictionary.

        Raises:
            ValidationError: If required fields are missing or invalid
        """
        name = data.get("name")
        if not name:
            raise ValidationError("name", name, "Rule name is required")

        kind_value = data.get("kind", MatchKind.CONTAINS_ANY.value)
        try:
            kind = kind_value if isinstance(kind_value, MatchKind) else MatchKind(kind_value)
        except ValueError:
            raise ValidationError("kind", kind_value, "Unknown match kind", context={"rule": name})

        return cls(
            name=name,
            outcome=data.get("outcome"),
            kind=kind,
            markers=tuple(data.get("markers", ())),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert ChunkRule to dictionary."""
        return {
            "name": self.name,
            "outcome": self.outcome,
            "kind": self.kind.value,
            "markers": list(self.markers),
        }

    def __str__(self) -> str:
        target = self.outcome if self.outcome is not None else "<unclassified>"
        return f"{self.name} -> {target}"
