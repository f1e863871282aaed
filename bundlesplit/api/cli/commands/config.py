"""Config command module - shows and validates the composed build configuration."""

import argparse

from bundlesplit.build import create_build_configuration
from ..utils.config_helpers import args_to_config
from ..utils.output import OutputFormatter


def config_command(args: argparse.Namespace) -> None:
    """Dispatch config subcommands.

    Args:
        args: Parsed command-line arguments
    """
    if args.config_command == "show":
        _show_config(args)
    else:
        _validate_config(args)


def _show_config(args: argparse.Namespace) -> None:
    formatter = OutputFormatter(verbose=args.verbose)
    config = args_to_config(args)

    if args.settings:
        formatter.json_output(config.to_dict())
        return

    build_config = create_build_configuration(config=config, project_root=args.project_root)
    formatter.json_output(build_config.to_dict())


def _validate_config(args: argparse.Namespace) -> None:
    formatter = OutputFormatter(verbose=args.verbose)
    config = args_to_config(args)

    # Building the rules runs ChunkRule validation on top of the settings model
    build_config = create_build_configuration(config=config)

    formatter.success("Configuration is valid")
    formatter.info(f"Mode: {config.mode} -> {build_config.alias.target}")
    formatter.info(f"Chunk rules: {len(build_config.classifier.rules)}")
    for rule in build_config.classifier.rules:
        formatter.verbose_info(str(rule))


__all__: list[str] = ["config_command"]
