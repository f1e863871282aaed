"""Env command argument parser for bundlesplit CLI."""

import argparse
from pathlib import Path
from typing import Any, cast

from .main_parser import add_common_arguments, add_json_argument, add_mode_argument


def add_env_subparser(subparsers: Any) -> argparse.ArgumentParser:
    """Add env command subparser."""
    parser = subparsers.add_parser(
        "env",
        help="Show the environment module bound for a build mode",
        description="Select the environment module for a build mode and print the alias binding.",
    )

    add_common_arguments(parser)
    add_mode_argument(parser)
    add_json_argument(parser)

    parser.add_argument(
        "--project-root",
        type=Path,
        help="Resolve the bound module against this directory",
    )

    return cast(argparse.ArgumentParser, parser)


__all__: list[str] = ["add_env_subparser"]
