"""bundlesplit Core Exceptions Package - Core exception classes for error handling."""

from .core import (
    BundleSplitError,
    ConfigurationError,
    ValidationError,
)

__all__ = [
    # Base exception
    "BundleSplitError",

    # Domain-specific exceptions
    "ValidationError",
    "ConfigurationError",
]
