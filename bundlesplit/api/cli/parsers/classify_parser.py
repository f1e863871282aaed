"""Classify and plan command argument parsers for bundlesplit CLI."""

import argparse
from pathlib import Path
from typing import Any, cast

from .main_parser import add_common_arguments, add_json_argument


def add_classify_subparser(subparsers: Any) -> argparse.ArgumentParser:
    """Add classify command subparser."""
    parser = subparsers.add_parser(
        "classify",
        help="Classify module identifiers into chunks",
        description=(
            "Print the chunk assigned to each module identifier. "
            "Identifiers are read from stdin when none are given; "
            "'-' marks modules left to the bundler's default grouping."
        ),
    )

    add_common_arguments(parser)
    add_json_argument(parser)

    parser.add_argument(
        "ids",
        nargs="*",
        metavar="ID",
        help="Resolved module identifiers",
    )

    return cast(argparse.ArgumentParser, parser)


def add_plan_subparser(subparsers: Any) -> argparse.ArgumentParser:
    """Add plan command subparser."""
    parser = subparsers.add_parser(
        "plan",
        help="Group module identifiers by chunk",
        description="Group a list of resolved module identifiers by assigned chunk.",
    )

    add_common_arguments(parser)
    add_json_argument(parser)

    parser.add_argument(
        "--input", "-i",
        type=Path,
        help="File with one module identifier per line (default: stdin)",
    )

    return cast(argparse.ArgumentParser, parser)


__all__: list[str] = ["add_classify_subparser", "add_plan_subparser"]
