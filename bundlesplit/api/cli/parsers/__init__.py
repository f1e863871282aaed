"""Argument parser utilities for bundlesplit CLI commands."""

from .main_parser import create_main_parser, setup_subparsers
from .classify_parser import add_classify_subparser, add_plan_subparser
from .env_parser import add_env_subparser
from .config_parser import add_config_subparser

__all__ = [
    "create_main_parser",
    "setup_subparsers",
    "add_classify_subparser",
    "add_plan_subparser",
    "add_env_subparser",
    "add_config_subparser",
]
