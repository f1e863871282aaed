"""
Custom settings sources for bundlesplit configuration management.

This module provides Pydantic settings sources that load configuration from
YAML, TOML and JSON files, plus helpers to discover config files in the
usual project and user locations.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Type, Union

from loguru import logger
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from bundlesplit.core.exceptions import ConfigurationError

CONFIG_FILE_NAMES = [
    'bundlesplit.yaml',
    'bundlesplit.yml',
    'bundlesplit.toml',
    'bundlesplit.json',
    '.bundlesplit.yaml',
    '.bundlesplit.yml',
    '.bundlesplit.toml',
    '.bundlesplit.json',
]


class BaseFileConfigSettingsSource(PydanticBaseSettingsSource, ABC):
    """
    Abstract base class for file-based configuration sources.

    This class provides the common framework for loading configuration
    from various file formats (YAML, TOML, JSON) with consistent behavior.
    """

    def __init__(
        self,
        settings_cls: Type[BaseSettings],
        config_file: Union[str, Path, List[Union[str, Path]]]
    ):
        """
        Initialize file-based configuration source.

        Args:
            settings_cls: The settings class
            config_file: Path(s) to configuration file(s)

        Raises:
            ConfigurationError: If an existing file cannot be parsed
        """
        super().__init__(settings_cls)

        if isinstance(config_file, (str, Path)):
            self.config_files = [Path(config_file)]
        else:
            self.config_files = [Path(f) for f in config_file]

        self._data = self._load_files()

    def _load_files(self) -> Dict[str, Any]:
        """Load and merge data from all configuration files."""
        merged_data: Dict[str, Any] = {}

        for config_file in self.config_files:
            if not config_file.exists():
                logger.debug(f"Config file {config_file} not found, skipping")
                continue

            try:
                file_data = self.load_file(config_file)
            except Exception as e:
                raise ConfigurationError(
                    str(config_file), f"Failed to parse config file: {e}", cause=e
                ) from e

            if file_data is None:
                continue
            if not isinstance(file_data, dict):
                raise ConfigurationError(
                    str(config_file), "Top-level config value must be a mapping"
                )

            # Later files override earlier ones
            merged_data = deep_merge(merged_data, file_data)
            logger.debug(f"Loaded config file {config_file}")

        return merged_data

    @abstractmethod
    def load_file(self, path: Path) -> Any:
        """
        Load configuration data from a specific file.

        Args:
            path: Path to the configuration file

        Returns:
            Parsed file content, expected to be a mapping
        """
        pass

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> Tuple[Any, str, bool]:
        """Get field value from configuration data."""
        if field_name in self._data:
            return self._data[field_name], field_name, True
        return None, field_name, False

    def __call__(self) -> Dict[str, Any]:
        """Return the loaded configuration data."""
        return self._data

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(config_files={[str(f) for f in self.config_files]})'


class YamlConfigSettingsSource(BaseFileConfigSettingsSource):
    """Configuration source for YAML files."""

    def load_file(self, path: Path) -> Any:
        import yaml

        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f)


class TomlConfigSettingsSource(BaseFileConfigSettingsSource):
    """Configuration source for TOML files."""

    def load_file(self, path: Path) -> Any:
        try:
            import tomllib
        except ImportError:
            import tomli as tomllib

        with open(path, 'rb') as f:
            return tomllib.load(f)


class JsonConfigSettingsSource(BaseFileConfigSettingsSource):
    """Configuration source for JSON files."""

    def load_file(self, path: Path) -> Any:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge two mappings, values in ``override`` winning."""
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def create_config_sources(
    settings_cls: Type[BaseSettings],
    config_files: Optional[List[Union[str, Path]]] = None,
) -> List[PydanticBaseSettingsSource]:
    """
    Create a file source per configuration file, picked by file suffix.

    Args:
        settings_cls: Settings class
        config_files: List of configuration files to load

    Returns:
        List of configured settings sources, in the given order

    Raises:
        ConfigurationError: If a file has an unsupported suffix or cannot be parsed
    """
    sources: List[PydanticBaseSettingsSource] = []

    for config_file in config_files or []:
        config_path = Path(config_file)
        suffix = config_path.suffix.lower()

        if suffix in ('.yaml', '.yml'):
            sources.append(YamlConfigSettingsSource(settings_cls, config_path))
        elif suffix == '.toml':
            sources.append(TomlConfigSettingsSource(settings_cls, config_path))
        elif suffix == '.json':
            sources.append(JsonConfigSettingsSource(settings_cls, config_path))
        else:
            raise ConfigurationError(str(config_path), f"Unknown config file format: {suffix or '<none>'}")

    return sources


def find_config_files(
    base_dirs: Optional[List[Union[str, Path]]] = None,
    config_names: Optional[List[str]] = None,
) -> List[Path]:
    """
    Find configuration files in common locations.

    Args:
        base_dirs: Directories to search (defaults to the current directory)
        config_names: Config file names to look for

    Returns:
        List of found configuration files in priority order
    """
    if base_dirs is None:
        base_dirs = [Path.cwd()]
    else:
        base_dirs = [Path(d) for d in base_dirs]

    if config_names is None:
        config_names = CONFIG_FILE_NAMES

    found_files = []

    for base_dir in base_dirs:
        if not base_dir.exists():
            continue

        for config_name in config_names:
            config_path = base_dir / config_name
            if config_path.exists() and config_path.is_file():
                found_files.append(config_path)

    return found_files


def user_config_dir() -> Path:
    """Directory holding the per-user configuration file."""
    return Path.home() / '.config' / 'bundlesplit'
