"""Validation utilities for bundlesplit CLI arguments."""

import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from loguru import logger


def validate_path(path: Path, must_exist: bool = True, must_be_dir: bool = True) -> bool:
    """Validate a file system path.

    Args:
        path: Path to validate
        must_exist: Whether the path must exist
        must_be_dir: Whether the path must be a directory

    Returns:
        True if valid, False otherwise
    """
    if must_exist and not path.exists():
        logger.error(f"Path does not exist: {path}")
        return False

    if must_exist and must_be_dir and not path.is_dir():
        logger.error(f"Path is not a directory: {path}")
        return False

    if must_exist and not must_be_dir and not path.is_file():
        logger.error(f"Path is not a file: {path}")
        return False

    return True


def clean_module_ids(lines: Iterable[str]) -> List[str]:
    """Strip whitespace and drop blank lines and '#' comments."""
    ids = []
    for line in lines:
        value = line.strip()
        if value and not value.startswith("#"):
            ids.append(value)
    return ids


def read_module_ids(ids: Optional[List[str]], input_file: Optional[Path] = None,
                    stdin: Optional[TextIO] = None) -> List[str]:
    """Collect module identifiers from arguments, a file, or stdin.

    Args:
        ids: Identifiers given on the command line
        input_file: File with one identifier per line
        stdin: Stream read when neither ids nor input_file are given

    Returns:
        Identifiers in input order
    """
    if ids:
        return clean_module_ids(ids)

    if input_file is not None:
        if not validate_path(input_file, must_exist=True, must_be_dir=False):
            exit_on_validation_error(f"Invalid input file: {input_file}")
        with open(input_file, "r", encoding="utf-8") as f:
            return clean_module_ids(f)

    return clean_module_ids(stdin if stdin is not None else sys.stdin)


def exit_on_validation_error(message: str) -> None:
    """Log error message and exit with error code.

    Args:
        message: Error message to display
    """
    logger.error(message)
    sys.exit(1)
