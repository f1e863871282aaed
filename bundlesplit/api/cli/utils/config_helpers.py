"""
Configuration helper utilities for CLI commands.

This module bridges CLI arguments with the unified configuration system.
"""

import argparse
from pathlib import Path

from bundlesplit.core.config.unified_config import BundleSplitConfig


def args_to_config(args: argparse.Namespace, project_dir: Path | None = None) -> BundleSplitConfig:
    """
    Convert CLI arguments to unified configuration.

    Args:
        args: Parsed CLI arguments
        project_dir: Project directory for config file loading

    Returns:
        BundleSplitConfig instance

    Raises:
        ConfigurationError: If the configuration cannot be loaded
    """
    config_overrides = {}

    if getattr(args, 'mode', None) is not None:
        config_overrides['mode'] = args.mode

    if getattr(args, 'verbose', False):
        config_overrides['debug'] = True

    if project_dir is None and getattr(args, 'project_root', None):
        project_dir = Path(args.project_root)

    return BundleSplitConfig.load_hierarchical(
        project_dir=project_dir,
        config_file=getattr(args, 'config', None),
        **config_overrides,
    )
