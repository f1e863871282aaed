"""Config command argument parser for bundlesplit CLI."""

import argparse
from pathlib import Path

from .main_parser import add_common_arguments, add_mode_argument


def add_config_subparser(subparsers) -> argparse.ArgumentParser:
    """Add config command subparser to the main parser.

    Args:
        subparsers: Subparsers object from the main argument parser

    Returns:
        The configured config subparser
    """
    config_parser = subparsers.add_parser(
        "config",
        help="Inspect the composed build configuration",
        description="Show or validate the bundler configuration produced for a build mode"
    )

    config_subparsers = config_parser.add_subparsers(
        dest="config_command",
        help="Configuration commands",
        required=True
    )

    show_parser = config_subparsers.add_parser(
        "show",
        help="Print the composed bundler configuration as JSON"
    )
    add_common_arguments(show_parser)
    add_mode_argument(show_parser)
    show_parser.add_argument(
        "--project-root",
        type=Path,
        help="Resolve the environment alias against this directory"
    )
    show_parser.add_argument(
        "--settings",
        action="store_true",
        help="Print the loaded settings instead of the bundler configuration"
    )

    validate_parser = config_subparsers.add_parser(
        "validate",
        help="Load the configuration and report problems"
    )
    add_common_arguments(validate_parser)

    return config_parser


__all__: list[str] = ["add_config_subparser"]
