"""Shared utilities for bundlesplit CLI commands."""

from .config_helpers import args_to_config
from .output import OutputFormatter, format_chunk, format_plan, print_section
from .validation import exit_on_validation_error, read_module_ids, validate_path

__all__ = [
    "OutputFormatter",
    "format_chunk",
    "format_plan",
    "print_section",
    "args_to_config",
    "validate_path",
    "read_module_ids",
    "exit_on_validation_error",
]
