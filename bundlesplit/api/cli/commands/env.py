"""Env command - show the environment alias binding for a build mode."""

import argparse

from bundlesplit.environment import EnvironmentSelector
from ..utils.config_helpers import args_to_config
from ..utils.output import OutputFormatter


def env_command(args: argparse.Namespace) -> None:
    """Select the environment module for the requested mode and print the binding.

    Args:
        args: Parsed command-line arguments
    """
    formatter = OutputFormatter(verbose=args.verbose)
    config = args_to_config(args)

    binding = EnvironmentSelector(config.environment).bind(config.mode, args.project_root)

    if args.json:
        formatter.json_output(binding.to_dict())
        return

    print(f"{binding.alias} -> {binding.target}")
    formatter.verbose_info(f"Mode: {config.mode!r} ({binding.mode.value})")


__all__: list[str] = ["env_command"]
