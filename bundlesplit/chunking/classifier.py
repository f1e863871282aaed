"""Chunk classifier - maps resolved module identifiers to output chunk names.

The policy is an explicit ordered list of ChunkRule objects evaluated
first-match-wins. Order is part of the contract: preload helpers are
checked before the first-party test, and the engine loaders package before
the engine core package, since a loaders id also carries the core marker
when nested under it.
"""

from collections.abc import Iterable, Sequence
from typing import Any, Optional

from bundlesplit.core.config import ChunkingConfig
from bundlesplit.core.models import ChunkRule
from bundlesplit.core.types import ChunkName, MatchKind, ModuleId

DEFAULT_DEPENDENCY_MARKER = "node_modules"
DEFAULT_PRELOAD_MARKERS = ("vite/preload-helper", "vite/modulepreload-polyfill")


def package_marker(dependency_marker: str, package: str) -> str:
    """Marker matching files inside ``package`` under the dependency root."""
    return f"{dependency_marker}/{package.strip('/')}/"


def default_rules(
    dependency_marker: str = DEFAULT_DEPENDENCY_MARKER,
    preload_markers: Sequence[str] = DEFAULT_PRELOAD_MARKERS,
    extra_rules: Iterable[tuple[str, Sequence[str]]] = (),
) -> tuple[ChunkRule, ...]:
    """Build the ordered chunk policy.

    Args:
        dependency_marker: Path segment marking third-party code
        preload_markers: Markers of bundler runtime preload helpers
        extra_rules: (chunk, packages) pairs checked after the built-in
            packages and before the vendor catch-all

    Returns:
        Rules in evaluation order
    """
    dependency_marker = dependency_marker.strip("/\\")

    def pkg(name: str) -> str:
        return package_marker(dependency_marker, name)

    vendor = ChunkName.VENDOR.value

    rules = [
        ChunkRule("preload-helper", vendor, MatchKind.CONTAINS_ANY, tuple(preload_markers)),
        ChunkRule("first-party", None, MatchKind.LACKS_ALL, (dependency_marker,)),
        ChunkRule("babylon-loaders", ChunkName.LOADERS.value, MatchKind.CONTAINS_ANY,
                  (pkg("@babylonjs/loaders"),)),
        ChunkRule("babylon-core", ChunkName.BABYLONJS.value, MatchKind.CONTAINS_ANY,
                  (pkg("@babylonjs/core"),)),
        ChunkRule("firebase", ChunkName.FIREBASE.value, MatchKind.CONTAINS_ANY,
                  (pkg("firebase"), pkg("@firebase"))),
        ChunkRule("marked", ChunkName.MARKED.value, MatchKind.CONTAINS_ANY,
                  (pkg("marked"),)),
    ]

    for index, (chunk, packages) in enumerate(extra_rules):
        rules.append(ChunkRule(
            f"extra-{index}-{chunk}", chunk, MatchKind.CONTAINS_ANY,
            tuple(pkg(p) for p in packages),
        ))

    rules.append(ChunkRule("vendor", vendor, MatchKind.ALWAYS))
    return tuple(rules)


class ChunkClassifier:
    """Ordered first-match-wins chunk classifier.

    Holds no state besides its immutable rule tuple, so one instance can be
    shared across any number of concurrent callers.
    """

    def __init__(self, rules: Optional[Sequence[ChunkRule]] = None):
        self._rules: tuple[ChunkRule, ...] = tuple(rules) if rules is not None else default_rules()

    @classmethod
    def from_config(cls, chunking: ChunkingConfig) -> "ChunkClassifier":
        """Build a classifier from a ChunkingConfig."""
        return cls(default_rules(
            dependency_marker=chunking.dependency_marker,
            preload_markers=tuple(chunking.preload_markers),
            extra_rules=[(r.chunk, r.packages) for r in chunking.extra_rules],
        ))

    @property
    def rules(self) -> tuple[ChunkRule, ...]:
        return self._rules

    def match(self, module_id: ModuleId | str) -> Optional[ChunkRule]:
        """Return the first rule matching the identifier, if any."""
        for rule in self._rules:
            if rule.matches(module_id):
                return rule
        return None

    def classify(self, module_id: ModuleId | str) -> Optional[str]:
        """Return the chunk name for a module, or None for default bundler grouping."""
        rule = self.match(module_id)
        return rule.outcome if rule is not None else None

    __call__ = classify

    def plan(self, module_ids: Iterable[ModuleId | str]) -> dict[Optional[str], list[ModuleId]]:
        """Group module identifiers by assigned chunk, preserving input order."""
        groups: dict[Optional[str], list[ModuleId]] = {}
        for module_id in module_ids:
            groups.setdefault(self.classify(module_id), []).append(ModuleId(module_id))
        return groups

    def describe(self) -> list[dict[str, Any]]:
        """Rules in evaluation order as plain dicts."""
        return [rule.to_dict() for rule in self._rules]

    def __repr__(self) -> str:
        return f"ChunkClassifier(rules=[{', '.join(str(r) for r in self._rules)}])"


_default_classifier = ChunkClassifier()


def classify(module_id: ModuleId | str) -> Optional[str]:
    """Classify a module identifier with the default policy."""
    return _default_classifier.classify(module_id)
