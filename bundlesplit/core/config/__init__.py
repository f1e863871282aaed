"""
Configuration management package for bundlesplit.

This package provides a unified configuration system that supports:
- Multiple configuration sources (environment variables, config files, runtime overrides)
- Type-safe configuration validation using Pydantic
- YAML, TOML and JSON config files
"""

from .settings_sources import (
    YamlConfigSettingsSource,
    TomlConfigSettingsSource,
    JsonConfigSettingsSource,
    create_config_sources,
    find_config_files,
)
from .unified_config import (
    BuildOptions,
    BundleSplitConfig,
    ChunkingConfig,
    ChunkRuleConfig,
    EnvironmentConfig,
    get_config,
    reset_config,
    set_config,
)

__all__ = [
    "BundleSplitConfig",
    "EnvironmentConfig",
    "ChunkingConfig",
    "ChunkRuleConfig",
    "BuildOptions",
    "get_config",
    "set_config",
    "reset_config",
    "YamlConfigSettingsSource",
    "TomlConfigSettingsSource",
    "JsonConfigSettingsSource",
    "create_config_sources",
    "find_config_files",
]
