"""
Unified configuration system for bundlesplit.

This module provides a single, type-safe configuration model covering the
environment selector, the chunk classifier and the declarative build knobs,
with hierarchical loading from multiple sources.
"""

from pathlib import Path
from typing import Any, Literal, Union

from loguru import logger
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator
from pydantic_settings import BaseSettings, EnvSettingsSource, SettingsConfigDict

from bundlesplit.core.exceptions import ConfigurationError
from .settings_sources import create_config_sources, deep_merge, find_config_files, user_config_dir


class EnvironmentConfig(BaseModel):
    """Environment module selection configuration."""

    alias: str = Field(
        default='@env',
        min_length=1,
        description="Symbolic import name bound to the selected environment module"
    )

    directory: str = Field(
        default='src/environments',
        description="Directory holding the environment modules, relative to the project root"
    )

    production_file: str = Field(
        default='environment.prod.ts',
        min_length=1,
        description="Environment module used for production builds"
    )

    development_file: str = Field(
        default='environment.dev.ts',
        min_length=1,
        description="Environment module used for development builds"
    )

    default_file: str = Field(
        default='environment.ts',
        min_length=1,
        description="Environment module used for any other build mode"
    )


class ChunkRuleConfig(BaseModel):
    """An extra package group emitted as its own chunk."""

    chunk: str = Field(description="Output chunk name")

    packages: list[str] = Field(
        min_length=1,
        description="Package names (scoped or unscoped) routed to the chunk"
    )

    @field_validator('chunk')
    def validate_chunk(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("chunk name cannot be blank")
        return v.strip()

    @field_validator('packages')
    def validate_packages(cls, v: list[str]) -> list[str]:
        cleaned = [p.strip().strip('/') for p in v]
        if any(not p for p in cleaned):
            raise ValueError("package names cannot be blank")
        return cleaned


class ChunkingConfig(BaseModel):
    """Chunk classification configuration."""

    dependency_marker: str = Field(
        default='node_modules',
        min_length=1,
        description="Path segment marking a third-party dependency"
    )

    preload_markers: list[str] = Field(
        default_factory=lambda: ['vite/preload-helper', 'vite/modulepreload-polyfill'],
        min_length=1,
        description="Markers identifying bundler runtime preload helpers"
    )

    extra_rules: list[ChunkRuleConfig] = Field(
        default_factory=list,
        description="Extra package chunks, checked after the built-in packages and before the vendor catch-all"
    )

    @field_validator('dependency_marker')
    def validate_dependency_marker(cls, v: str) -> str:
        # package markers append "/<package>/" to this segment
        cleaned = v.strip().strip('/\\')
        if not cleaned:
            raise ValueError("dependency marker cannot be blank")
        return cleaned


class BuildOptions(BaseModel):
    """Declarative build knobs passed through to the bundler."""

    base: str = Field(
        default='./',
        description="Public base path of emitted assets"
    )

    target: str = Field(
        default='es2022',
        description="Output language target"
    )

    sourcemap: Union[bool, Literal['inline', 'hidden']] = Field(
        default=False,
        description="Source map emission mode"
    )

    chunk_size_warning_limit: int = Field(
        default=6000,
        ge=1,
        description="Chunk size in kB above which the bundler warns"
    )

    optimize_deps_exclude: list[str] = Field(
        default_factory=lambda: ['@babylonjs/core', '@babylonjs/loaders'],
        description="Packages excluded from dev-server dependency pre-bundling"
    )


class BundleSplitConfig(BaseSettings):
    """
    Unified configuration for bundlesplit.

    Configuration Sources (in order of precedence):
    1. Runtime parameters (highest priority)
    2. Environment variables (BUNDLESPLIT_*)
    3. Project config file (bundlesplit.yaml / .toml / .json)
    4. User config file (~/.config/bundlesplit/bundlesplit.*)
    5. Default values (lowest priority)

    Environment Variable Examples:
        BUNDLESPLIT_MODE=production
        BUNDLESPLIT_ENVIRONMENT__ALIAS=@env
        BUNDLESPLIT_CHUNKING__DEPENDENCY_MARKER=node_modules
        BUNDLESPLIT_BUILD__TARGET=es2022
        BUNDLESPLIT_BUILD__SOURCEMAP=hidden
        BUNDLESPLIT_DEBUG=true
    """

    model_config = SettingsConfigDict(
        env_prefix='BUNDLESPLIT_',
        env_nested_delimiter='__',
        case_sensitive=False,
        validate_default=True,
        extra='ignore',
        env_file=None,
    )

    mode: str = Field(
        default='production',
        description="Build mode token; anything other than production/development uses the default environment"
    )

    environment: EnvironmentConfig = Field(
        default_factory=EnvironmentConfig,
        description="Environment module selection"
    )

    chunking: ChunkingConfig = Field(
        default_factory=ChunkingConfig,
        description="Chunk classification"
    )

    build: BuildOptions = Field(
        default_factory=BuildOptions,
        description="Declarative build knobs"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    @classmethod
    def load_hierarchical(cls,
                          project_dir: Path | None = None,
                          config_file: Path | None = None,
                          **override_values: Any) -> 'BundleSplitConfig':
        """
        Load configuration from hierarchical sources.

        Args:
            project_dir: Project directory to search for bundlesplit.* files
            config_file: Explicit config file, replacing project file discovery
            **override_values: Runtime parameter overrides

        Returns:
            Loaded and validated configuration

        Raises:
            ConfigurationError: If a config file is missing, unreadable or invalid
        """
        config_files: list[Path] = []

        # 1. User config file
        user_files = find_config_files([user_config_dir()])
        if user_files:
            config_files.append(user_files[0])

        # 2. Project config file
        if config_file is not None:
            if not config_file.exists():
                raise ConfigurationError(str(config_file), "Config file does not exist")
            config_files.append(config_file)
        else:
            project_files = find_config_files([project_dir or Path.cwd()])
            if project_files:
                config_files.append(project_files[0])

        config_data: dict[str, Any] = {}
        for source in create_config_sources(cls, config_files):
            config_data = deep_merge(config_data, source())

        # 3. Environment variables
        config_data = deep_merge(config_data, EnvSettingsSource(cls)())

        # 4. Runtime overrides
        config_data = deep_merge(config_data, override_values)

        try:
            config = cls(**config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(
                ", ".join(str(f) for f in config_files) or None,
                f"Invalid configuration: {e}",
                cause=e,
            ) from e

        logger.debug(f"Loaded configuration from {[str(f) for f in config_files]}: {config!r}")
        return config

    def to_dict(self) -> dict[str, Any]:
        """
        Convert configuration to dictionary format.

        Returns:
            Configuration as dictionary
        """
        return self.model_dump(mode='json')

    def __repr__(self) -> str:
        return (
            f"BundleSplitConfig("
            f"mode={self.mode}, "
            f"environment.alias={self.environment.alias}, "
            f"chunking.extra_rules={len(self.chunking.extra_rules)}, "
            f"build.target={self.build.target})"
        )


# Global configuration instance
_config_instance: BundleSplitConfig | None = None


def get_config() -> BundleSplitConfig:
    """
    Get the global configuration instance.

    Returns:
        Global BundleSplitConfig instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = BundleSplitConfig.load_hierarchical()
    return _config_instance


def set_config(config: BundleSplitConfig) -> None:
    """
    Set the global configuration instance.

    Args:
        config: Configuration instance to set as global
    """
    global _config_instance
    _config_instance = config


def reset_config() -> None:
    """Reset the global configuration instance."""
    global _config_instance
    _config_instance = None
