"""Tests for build configuration composition."""

from pathlib import Path

import pytest

from bundlesplit import create_build_configuration
from bundlesplit.core.config import BuildOptions, BundleSplitConfig, ChunkingConfig, ChunkRuleConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("BUNDLESPLIT_MODE", "BUNDLESPLIT_BUILD__TARGET", "BUNDLESPLIT_BUILD__SOURCEMAP"):
        monkeypatch.delenv(key, raising=False)


class TestCreateBuildConfiguration:
    """Composition of alias, classifier and build options."""

    def test_defaults_to_configured_mode(self):
        build = create_build_configuration()
        assert build.mode == "production"
        assert build.alias.target == "src/environments/environment.prod.ts"

    def test_explicit_mode_wins(self):
        config = BundleSplitConfig(mode="production")
        build = create_build_configuration("development", config)
        assert build.mode == "development"
        assert build.alias.target == "src/environments/environment.dev.ts"

    def test_empty_mode_is_default_environment(self):
        build = create_build_configuration("")
        assert build.alias.target == "src/environments/environment.ts"

    def test_project_root_resolves_alias(self, tmp_path):
        build = create_build_configuration("staging", project_root=tmp_path)
        assert Path(build.alias.target) == (tmp_path / "src/environments/environment.ts").resolve()

    def test_classifier_uses_config(self):
        config = BundleSplitConfig(chunking=ChunkingConfig(
            extra_rules=[ChunkRuleConfig(chunk="three", packages=["three"])],
        ))
        build = create_build_configuration(config=config)
        assert build.classifier.classify("/p/node_modules/three/build/three.module.js") == "three"


class TestToDict:
    """Bundler-shaped output."""

    def test_shape(self):
        config = BundleSplitConfig(build=BuildOptions(sourcemap="hidden", target="es2020"))
        data = create_build_configuration("development", config).to_dict()

        assert data["mode"] == "development"
        assert data["base"] == "./"
        assert data["build"]["target"] == "es2020"
        assert data["build"]["sourcemap"] == "hidden"
        assert data["build"]["chunkSizeWarningLimit"] == 6000
        assert data["optimizeDeps"]["exclude"] == ["@babylonjs/core", "@babylonjs/loaders"]
        assert data["resolve"]["alias"] == {"@env": "src/environments/environment.dev.ts"}

    def test_manual_chunks_in_evaluation_order(self):
        rules = create_build_configuration().to_dict()["build"]["manualChunks"]
        assert [r["name"] for r in rules] == [
            "preload-helper", "first-party", "babylon-loaders", "babylon-core",
            "firebase", "marked", "vendor",
        ]
        assert rules[1] == {
            "name": "first-party", "outcome": None, "kind": "lacks_all", "markers": ["node_modules"],
        }
