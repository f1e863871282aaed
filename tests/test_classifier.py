"""Tests for the chunk classification policy."""

import pytest

from bundlesplit.chunking import ChunkClassifier, classify, default_rules, package_marker
from bundlesplit.core.config import ChunkingConfig, ChunkRuleConfig
from bundlesplit.core.models import ChunkRule
from bundlesplit.core.types import ChunkName, MatchKind

VENDOR = ChunkName.VENDOR.value
LOADERS = ChunkName.LOADERS.value
BABYLONJS = ChunkName.BABYLONJS.value
FIREBASE = ChunkName.FIREBASE.value
MARKED = ChunkName.MARKED.value


@pytest.fixture
def classifier():
    """Classifier with the default policy."""
    return ChunkClassifier()


@pytest.fixture
def rules_by_name():
    """Default rules keyed by name."""
    return {rule.name: rule for rule in default_rules()}


class TestConcreteScenarios:
    """Reference ids and their expected chunks."""

    @pytest.mark.parametrize("module_id,expected", [
        ("/project/node_modules/@babylonjs/loaders/index.js", LOADERS),
        ("/project/node_modules/@babylonjs/core/index.js", BABYLONJS),
        ("/project/node_modules/@firebase/app/index.js", FIREBASE),
        ("/project/node_modules/firebase/auth/dist/index.mjs", FIREBASE),
        ("/project/node_modules/marked/lib/marked.js", MARKED),
        ("/project/node_modules/lodash/index.js", VENDOR),
        ("/project/src/app/main.ts", None),
    ])
    def test_scenario(self, classifier, module_id, expected):
        assert classifier.classify(module_id) == expected

    def test_module_level_classify_uses_default_policy(self):
        assert classify("/project/node_modules/@babylonjs/core/Meshes/mesh.js") == BABYLONJS
        assert classify("/project/src/render/scene.ts") is None


class TestOrdering:
    """Priority properties of the first-match-wins policy."""

    def test_loaders_win_over_core_when_nested(self, classifier):
        module_id = "/project/node_modules/@babylonjs/core/node_modules/@babylonjs/loaders/glTF/index.js"
        assert classifier.classify(module_id) == LOADERS

    def test_loaders_rule_precedes_core_rule(self, rules_by_name):
        names = [rule.name for rule in default_rules()]
        assert names.index("babylon-loaders") < names.index("babylon-core")
        assert rules_by_name["babylon-core"].matches(
            "/p/node_modules/@babylonjs/core/node_modules/@babylonjs/loaders/x.js"
        )

    def test_preload_helper_wins_without_dependency_marker(self, classifier):
        assert classifier.classify("\0vite/preload-helper.js") == VENDOR
        assert classifier.classify("/project/src/vite/modulepreload-polyfill.js") == VENDOR

    def test_preload_helper_inside_dependency_root(self, classifier):
        assert classifier.classify("/project/node_modules/vite/preload-helper.js") == VENDOR

    def test_first_party_exclusion_ignores_package_names(self, classifier):
        assert classifier.classify("/project/src/@babylonjs/core/fake.ts") is None
        assert classifier.classify("/project/src/firebase/marked/lodash.ts") is None

    def test_strict_first_match_for_multiple_markers(self, classifier):
        # firebase rule comes before marked, so firebase wins
        module_id = "/p/node_modules/firebase/node_modules/marked/lib/marked.js"
        assert classifier.classify(module_id) == FIREBASE

    def test_catch_all_for_unknown_third_party(self, classifier):
        for module_id in [
            "/p/node_modules/react/index.js",
            "/p/node_modules/.pnpm/zod@3.22.0/node_modules/zod/lib/index.mjs",
            "/p/node_modules/marked-highlight/index.js",
            "/p/node_modules/@babylonjs/gui/index.js",
        ]:
            assert classifier.classify(module_id) == VENDOR


class TestTotality:
    """The classifier never raises and always yields a single outcome."""

    @pytest.mark.parametrize("module_id", [
        "",
        " ",
        "node_modules",
        "\0virtual:module",
        "C:\\project\\src\\main.ts",
        "???",
        "/" * 500,
    ])
    def test_odd_inputs(self, classifier, module_id):
        outcome = classifier.classify(module_id)
        assert outcome is None or isinstance(outcome, str)

    def test_windows_separators(self, classifier):
        assert classifier.classify("C:\\project\\node_modules\\@babylonjs\\loaders\\index.js") == LOADERS
        assert classifier.classify("C:\\project\\node_modules\\lodash\\index.js") == VENDOR

    def test_empty_rule_list_is_unclassified(self):
        assert ChunkClassifier([]).classify("/p/node_modules/x/index.js") is None

    def test_classifier_is_callable(self, classifier):
        assert classifier("/p/node_modules/marked/lib/marked.js") == MARKED


class TestIndividualRules:
    """Each default rule tested on its own."""

    def test_preload_helper_rule(self, rules_by_name):
        rule = rules_by_name["preload-helper"]
        assert rule.outcome == VENDOR
        assert rule.matches("\0vite/preload-helper.js")
        assert not rule.matches("/p/node_modules/lodash/index.js")

    def test_first_party_rule(self, rules_by_name):
        rule = rules_by_name["first-party"]
        assert rule.kind == MatchKind.LACKS_ALL
        assert rule.outcome is None
        assert rule.matches("/p/src/main.ts")
        assert not rule.matches("/p/node_modules/lodash/index.js")

    def test_firebase_rule_scoped_and_unscoped(self, rules_by_name):
        rule = rules_by_name["firebase"]
        assert rule.matches("/p/node_modules/firebase/app/dist/index.esm.js")
        assert rule.matches("/p/node_modules/@firebase/firestore/dist/index.js")
        assert not rule.matches("/p/node_modules/firebase-tools/lib/index.js")

    def test_marked_rule(self, rules_by_name):
        rule = rules_by_name["marked"]
        assert rule.matches("/p/node_modules/marked/lib/marked.esm.js")
        assert not rule.matches("/p/node_modules/marked-highlight/index.js")

    def test_vendor_rule_always_matches(self, rules_by_name):
        rule = rules_by_name["vendor"]
        assert rule.kind == MatchKind.ALWAYS
        assert rule.matches("")

    def test_vendor_is_last(self):
        assert default_rules()[-1].name == "vendor"


class TestConfiguredRules:
    """Classifier built from ChunkingConfig."""

    def test_extra_rules_before_catch_all(self):
        config = ChunkingConfig(extra_rules=[ChunkRuleConfig(chunk="three", packages=["three", "@three/addons"])])
        classifier = ChunkClassifier.from_config(config)

        assert classifier.classify("/p/node_modules/three/build/three.module.js") == "three"
        assert classifier.classify("/p/node_modules/@three/addons/loader.js") == "three"
        assert classifier.classify("/p/node_modules/lodash/index.js") == VENDOR
        names = [rule.name for rule in classifier.rules]
        assert names.index("marked") < names.index("extra-0-three") < names.index("vendor")

    def test_extra_rules_cannot_override_builtin_packages(self):
        config = ChunkingConfig(extra_rules=[ChunkRuleConfig(chunk="engine", packages=["@babylonjs/core"])])
        classifier = ChunkClassifier.from_config(config)
        assert classifier.classify("/p/node_modules/@babylonjs/core/index.js") == BABYLONJS

    def test_custom_dependency_marker(self):
        classifier = ChunkClassifier.from_config(ChunkingConfig(dependency_marker="vendor_modules"))
        assert classifier.classify("/p/vendor_modules/marked/lib/marked.js") == MARKED
        assert classifier.classify("/p/node_modules/marked/lib/marked.js") is None

    def test_dependency_marker_trailing_slash(self):
        classifier = ChunkClassifier.from_config(ChunkingConfig(dependency_marker="node_modules/"))
        assert classifier.classify("/p/node_modules/@babylonjs/core/index.js") == BABYLONJS
        assert classifier.classify("/p/node_modules/lodash/index.js") == VENDOR

    def test_default_rules_strip_marker_separators(self):
        classifier = ChunkClassifier(default_rules(dependency_marker="node_modules\\"))
        assert classifier.classify("/p/node_modules/marked/lib/marked.js") == MARKED

    def test_package_marker(self):
        assert package_marker("node_modules", "@firebase/") == "node_modules/@firebase/"


class TestPlanAndDescribe:
    """Grouping and serialization helpers."""

    def test_plan_groups_in_input_order(self, classifier):
        ids = [
            "/p/node_modules/lodash/index.js",
            "/p/src/main.ts",
            "/p/node_modules/@babylonjs/core/index.js",
            "/p/node_modules/react/index.js",
        ]
        plan = classifier.plan(ids)

        assert plan[VENDOR] == [ids[0], ids[3]]
        assert plan[None] == [ids[1]]
        assert plan[BABYLONJS] == [ids[2]]
        assert list(plan) == [VENDOR, None, BABYLONJS]

    def test_describe_round_trips_rules(self, classifier):
        described = classifier.describe()
        assert [d["name"] for d in described] == [r.name for r in classifier.rules]
        assert ChunkClassifier([ChunkRule.from_dict(d) for d in described]).rules == classifier.rules
