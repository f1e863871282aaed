"""Build configuration composition.

Combines the environment alias binding, the chunk classifier and the
declarative build options into one value a bundler front-end can consume.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from bundlesplit.chunking import ChunkClassifier
from bundlesplit.core.config import BuildOptions, BundleSplitConfig
from bundlesplit.core.models import AliasBinding
from bundlesplit.environment import EnvironmentSelector


@dataclass(frozen=True)
class BuildConfiguration:
    """Everything the bundler needs from this layer for one build."""

    mode: str
    alias: AliasBinding
    classifier: ChunkClassifier
    options: BuildOptions

    def to_dict(self) -> dict[str, Any]:
        """Bundler-shaped configuration dictionary."""
        return {
            "mode": self.mode,
            "base": self.options.base,
            "build": {
                "target": self.options.target,
                "sourcemap": self.options.sourcemap,
                "chunkSizeWarningLimit": self.options.chunk_size_warning_limit,
                "manualChunks": self.classifier.describe(),
            },
            "optimizeDeps": {
                "exclude": list(self.options.optimize_deps_exclude),
            },
            "resolve": {
                "alias": {self.alias.alias: self.alias.target},
            },
        }


def create_build_configuration(
    mode: Optional[str] = None,
    config: Optional[BundleSplitConfig] = None,
    project_root: Optional[Path] = None,
) -> BuildConfiguration:
    """Compose the build configuration for a mode.

    Args:
        mode: Build mode token; defaults to the configured mode
        config: Loaded configuration; defaults to built-in defaults
        project_root: Resolve the environment alias against this directory

    Returns:
        Composed BuildConfiguration
    """
    config = config or BundleSplitConfig()
    mode = config.mode if mode is None else mode

    alias = EnvironmentSelector(config.environment).bind(mode, project_root)
    classifier = ChunkClassifier.from_config(config.chunking)

    logger.debug(f"Composed build configuration for mode={mode!r} with {len(classifier.rules)} chunk rules")
    return BuildConfiguration(
        mode=mode,
        alias=alias,
        classifier=classifier,
        options=config.build,
    )
