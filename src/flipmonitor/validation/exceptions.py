"""
Exception taxonomy and error handling.

Every user-facing failure of the size parser, the delay parser and the
configuration layer is a ``ValidationError`` subclass, so callers can catch
a whole family or a single, precise condition.
"""

import logging
import sys
from enum import Enum
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """Severity levels for error handling."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ValidationError(Exception):
    """
    Exception raised when validation fails.

    This is the base exception type used throughout the package.
    """

    def __init__(self, message: str, field_name: Optional[str] = None,
                 value: Any = None, severity: ErrorSeverity = ErrorSeverity.ERROR):
        super().__init__(message)
        self.field_name = field_name
        self.value = value
        self.severity = severity


# --- Size parsing ---


class SizeParseError(ValidationError):
    """A size string could not be turned into a byte count."""

    def __init__(self, message: str, value: Any = None,
                 field_name: Optional[str] = "memory_to_monitor"):
        super().__init__(message, field_name=field_name, value=value)


class ZeroValueError(SizeParseError):
    """A plain integer size of zero."""


class SuffixRequiredError(SizeParseError):
    """A non-integer number was given without a unit suffix."""


class InvalidMantissaError(SizeParseError):
    """The numeric part of a size string is not a number."""


class SuffixTooLongError(SizeParseError):
    """The unit suffix has more than two characters."""


class InvalidUnitTerminatorError(SizeParseError):
    """The unit suffix does not end with a valid byte or bit marker."""


class UnknownSiPrefixError(SizeParseError):
    """The unit suffix starts with a letter that is not an SI prefix."""


class TooSmallError(SizeParseError):
    """The size truncates to zero bytes."""


class SizeOverflowError(SizeParseError):
    """The size does not fit in a byte count."""


# --- Delay parsing ---


class DelayParseError(ValidationError):
    """A duration string could not be turned into a delay."""

    def __init__(self, message: str, value: Any = None,
                 field_name: Optional[str] = "delay_between_checks"):
        super().__init__(message, field_name=field_name, value=value)


class InvalidDurationError(DelayParseError):
    """The string does not match the duration grammar."""


# --- Configuration ---


class InvalidConfigurationError(ValidationError):
    """
    Raised when the configuration assembler receives inputs that the
    argument layer should have made impossible.

    This signals a programming error, not a user error.
    """

    def __init__(self, message: str, field_name: Optional[str] = None, value: Any = None):
        super().__init__(
            message, field_name=field_name, value=value, severity=ErrorSeverity.CRITICAL
        )


class ConfigFileError(ValidationError):
    """A defaults file is malformed or holds values of the wrong type."""


def handle_error(
    error: Exception,
    context: str,
    severity: Union[ErrorSeverity, str] = ErrorSeverity.ERROR,
    reraise: bool = True,
    logger: Optional[logging.Logger] = None
) -> None:
    """
    Handle errors with consistent logging and optional re-raising.

    Args:
        error: The exception that occurred
        context: Context description of where the error occurred
        severity: Severity level for logging
        reraise: Whether to re-raise the exception after logging
        logger: Logger instance to use (defaults to module logger)
    """
    effective_logger = logger or globals()['logger']

    error_msg = f"Error in {context}: {error}"

    if isinstance(severity, str):
        severity_str = severity.lower()
    else:
        severity_str = severity.value

    if severity_str == "debug":
        effective_logger.debug(error_msg, exc_info=True)
    elif severity_str == "info":
        effective_logger.info(error_msg)
    elif severity_str == "warning":
        effective_logger.warning(error_msg)
    elif severity_str == "error":
        effective_logger.error(error_msg)
    elif severity_str == "critical":
        effective_logger.critical(error_msg, exc_info=True)

    if reraise:
        raise error


def handle_config_error(error: Exception, context: str, **kwargs) -> None:
    """Handle configuration-related errors."""
    handle_error(error, f"config {context}", **kwargs)


def handle_cli_error(error: Exception, context: str, **kwargs) -> None:
    """Log a CLI error and exit the process with ``exit_code`` (default 1)."""
    exit_code = kwargs.pop('exit_code', 1)
    severity = kwargs.pop('severity', ErrorSeverity.ERROR)
    handle_error(error, f"CLI {context}", severity=severity, reraise=False, **kwargs)
    sys.exit(exit_code)
