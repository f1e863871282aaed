"""bundlesplit Core Exceptions - Core exception classes for error handling.

The chunk classifier and environment selector are total and never raise.
These exceptions only surface at the configuration and CLI boundary.
"""

from typing import Optional, Any, Dict


class BundleSplitError(Exception):
    """Base exception for all bundlesplit-specific errors.

    Provides context tracking so callers can report which file, key or
    rule caused the failure.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize bundlesplit error.

        Args:
            message: Human-readable error description
            context: Optional dictionary with error context (e.g., config file, rule name)
            cause: Optional underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.cause = cause

    def __str__(self) -> str:
        """Return formatted error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message


class ValidationError(BundleSplitError):
    """Raised when a rule or configuration value fails validation."""

    def __init__(
        self,
        field: str,
        value: Any,
        reason: str,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize validation error.

        Args:
            field: Name of the field that failed validation
            value: The invalid value
            reason: Description of why validation failed
            context: Optional additional context
        """
        message = f"Validation failed for field '{field}': {reason}"
        super().__init__(message, context)
        self.field = field
        self.value = value
        self.reason = reason


class ConfigurationError(BundleSplitError):
    """Raised when configuration cannot be loaded or is invalid."""

    def __init__(
        self,
        config_key: Optional[str] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize configuration error.

        Args:
            config_key: Configuration key or file that caused the error
            reason: Description of what went wrong
            context: Optional additional context
            cause: Optional underlying exception
        """
        prefix = f"Configuration error ({config_key})" if config_key else "Configuration error"
        message = f"{prefix}: {reason}" if reason else prefix

        super().__init__(message, context, cause)
        self.config_key = config_key
        self.reason = reason
