"""Environment selector - picks the environment module bound to the build alias."""

from pathlib import Path
from typing import Optional, Union

from loguru import logger

from bundlesplit.core.config import EnvironmentConfig
from bundlesplit.core.models import AliasBinding
from bundlesplit.core.types import AliasName, BuildMode, ModulePath


class EnvironmentSelector:
    """Maps a build mode to exactly one environment module.

    Production and development modes get their own module; every other
    mode token, including an empty one, falls back to the default module.
    """

    def __init__(self, config: Optional[EnvironmentConfig] = None):
        self.config = config or EnvironmentConfig()

    def file_for(self, mode: Union[BuildMode, str, None]) -> str:
        """Environment module file name for a mode."""
        build_mode = BuildMode.from_string(mode)
        if build_mode == BuildMode.PRODUCTION:
            return self.config.production_file
        if build_mode == BuildMode.DEVELOPMENT:
            return self.config.development_file
        return self.config.default_file

    def select(self, mode: Union[BuildMode, str, None]) -> ModulePath:
        """Return the environment module path, relative to the project root."""
        directory = self.config.directory.rstrip("/")
        file_name = self.file_for(mode)
        return ModulePath(f"{directory}/{file_name}" if directory else file_name)

    def bind(
        self,
        mode: Union[BuildMode, str, None],
        project_root: Optional[Path] = None,
    ) -> AliasBinding:
        """Select the environment module and bind it to the configured alias.

        Args:
            mode: Build mode token
            project_root: When given, the target is resolved to an absolute path

        Returns:
            The single alias binding for this build
        """
        target = self.select(mode)
        if project_root is not None:
            target = ModulePath(str((Path(project_root) / target).resolve()))

        binding = AliasBinding(
            alias=AliasName(self.config.alias),
            target=target,
            mode=BuildMode.from_string(mode),
        )
        logger.debug(f"Bound {binding.alias} -> {binding.target} (mode={mode!r})")
        return binding


def select(
    mode: Union[BuildMode, str, None],
    environments: Optional[EnvironmentConfig] = None,
) -> ModulePath:
    """Select the environment module path for a build mode."""
    return EnvironmentSelector(environments).select(mode)
