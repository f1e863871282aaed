"""Tests for ChunkRule validation and conversion."""

import pytest

from bundlesplit.core.exceptions import BundleSplitError, ValidationError
from bundlesplit.core.models import ChunkRule, normalize_module_id
from bundlesplit.core.types import MatchKind


class TestChunkRule:
    """ChunkRule construction and predicates."""

    def test_contains_any(self):
        rule = ChunkRule("ui", "ui", MatchKind.CONTAINS_ANY, ("node_modules/lit/", "node_modules/@lit/"))
        assert rule.matches("/p/node_modules/@lit/reactive-element/index.js")
        assert not rule.matches("/p/node_modules/lit-html/index.js")

    def test_lacks_all(self):
        rule = ChunkRule("app", None, MatchKind.LACKS_ALL, ("node_modules", "vendor_modules"))
        assert rule.matches("/p/src/main.ts")
        assert not rule.matches("/p/vendor_modules/x.js")

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError, match="name"):
            ChunkRule("", "vendor", MatchKind.ALWAYS)

    def test_blank_outcome_rejected(self):
        with pytest.raises(ValidationError, match="outcome"):
            ChunkRule("x", "  ", MatchKind.ALWAYS)

    def test_markers_required_unless_always(self):
        with pytest.raises(ValidationError) as exc_info:
            ChunkRule("x", "x", MatchKind.CONTAINS_ANY, ())
        assert exc_info.value.context == {"rule": "x"}
        assert "rule=x" in str(exc_info.value)

    def test_empty_marker_rejected(self):
        with pytest.raises(ValidationError):
            ChunkRule("x", "x", MatchKind.LACKS_ALL, ("node_modules", ""))

    def test_from_dict_unknown_kind(self):
        with pytest.raises(ValidationError, match="kind"):
            ChunkRule.from_dict({"name": "x", "outcome": "x", "kind": "regex", "markers": ["a"]})

    def test_from_dict_defaults_to_contains_any(self):
        rule = ChunkRule.from_dict({"name": "x", "outcome": "x", "markers": ["a"]})
        assert rule.kind == MatchKind.CONTAINS_ANY
        assert rule.markers == ("a",)

    def test_str(self):
        assert str(ChunkRule("first-party", None, MatchKind.LACKS_ALL, ("node_modules",))) == \
            "first-party -> <unclassified>"

    def test_validation_error_is_bundlesplit_error(self):
        assert issubclass(ValidationError, BundleSplitError)


def test_normalize_module_id():
    assert normalize_module_id("a\\b\\c.js") == "a/b/c.js"
    assert normalize_module_id("/already/posix.js") == "/already/posix.js"
