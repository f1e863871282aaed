"""Modular CLI entry point for bundlesplit."""

import argparse
import sys
from typing import Optional, Sequence

from loguru import logger

from bundlesplit.core.exceptions import BundleSplitError


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI.

    Args:
        verbose: Whether to enable verbose logging
    """
    logger.remove()

    if verbose:
        logger.add(
            sys.stderr,
            level="DEBUG",
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
        )
    else:
        logger.add(
            sys.stderr,
            level="INFO",
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
        )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the complete argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    from .parsers import create_main_parser, setup_subparsers
    from .parsers.classify_parser import add_classify_subparser, add_plan_subparser
    from .parsers.env_parser import add_env_subparser
    from .parsers.config_parser import add_config_subparser

    parser = create_main_parser()
    subparsers = setup_subparsers(parser)

    add_classify_subparser(subparsers)
    add_plan_subparser(subparsers)
    add_env_subparser(subparsers)
    add_config_subparser(subparsers)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging(getattr(args, "verbose", False))

    try:
        if args.command == "classify":
            from .commands.classify import classify_command
            classify_command(args)
        elif args.command == "plan":
            from .commands.classify import plan_command
            plan_command(args)
        elif args.command == "env":
            from .commands.env import env_command
            env_command(args)
        elif args.command == "config":
            from .commands.config import config_command
            config_command(args)
        else:
            logger.error(f"Unknown command: {args.command}")
            sys.exit(1)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(0)
    except BundleSplitError as e:
        logger.error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.error(f"Command failed: {e}")
        logger.opt(exception=True).debug("Full error details:")
        sys.exit(1)


if __name__ == "__main__":
    main()
