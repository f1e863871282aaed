"""Main argument parser for bundlesplit CLI."""

import argparse
from pathlib import Path


def create_main_parser() -> argparse.ArgumentParser:
    """Create and configure the main argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    from bundlesplit import __version__

    parser = argparse.ArgumentParser(
        prog="bundlesplit",
        description="Environment selection and chunk partitioning policy for client bundles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bundlesplit classify /app/node_modules/@babylonjs/core/index.js
  vite-list-modules | bundlesplit plan --json
  bundlesplit env --mode production --project-root .
  bundlesplit config show --mode development
  bundlesplit config validate --config bundlesplit.yaml
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"bundlesplit {__version__}",
    )

    return parser


def setup_subparsers(parser: argparse.ArgumentParser) -> argparse._SubParsersAction:
    """Set up subparsers for the main parser.

    Args:
        parser: Main argument parser

    Returns:
        Subparsers action for adding command parsers
    """
    return parser.add_subparsers(dest="command", help="Available commands")


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add common arguments used across multiple commands.

    Args:
        parser: Parser to add arguments to
    """
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Configuration file path (default: bundlesplit.* in the project root)",
    )


def add_mode_argument(parser: argparse.ArgumentParser, required: bool = False) -> None:
    """Add build mode argument to a parser.

    Args:
        parser: Parser to add argument to
        required: Whether the argument is required
    """
    parser.add_argument(
        "--mode", "-m",
        required=required,
        help="Build mode (production, development, or any other token for the default environment)",
    )


def add_json_argument(parser: argparse.ArgumentParser) -> None:
    """Add JSON output flag to a parser."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print machine-readable JSON",
    )


__all__ = [
    "create_main_parser",
    "setup_subparsers",
    "add_common_arguments",
    "add_mode_argument",
    "add_json_argument",
]
