"""
Validation and error handling for the flipmonitor package.

This module provides the exception taxonomy shared by the parsers and the
configuration layer, plus small validators and consistent error reporting.
"""

from .exceptions import (
    ConfigFileError,
    DelayParseError,
    ErrorSeverity,
    InvalidConfigurationError,
    InvalidDurationError,
    InvalidMantissaError,
    InvalidUnitTerminatorError,
    SizeOverflowError,
    SizeParseError,
    SuffixRequiredError,
    SuffixTooLongError,
    TooSmallError,
    UnknownSiPrefixError,
    ValidationError,
    ZeroValueError,
    handle_cli_error,
    handle_config_error,
    handle_error,
)

from .validators import (
    validate_boolean,
    validate_enum_choice,
    validate_non_empty_string,
)

__all__ = [
    # Base
    "ErrorSeverity",
    "ValidationError",
    # Size parsing
    "SizeParseError",
    "ZeroValueError",
    "SuffixRequiredError",
    "InvalidMantissaError",
    "SuffixTooLongError",
    "InvalidUnitTerminatorError",
    "UnknownSiPrefixError",
    "TooSmallError",
    "SizeOverflowError",
    # Delay parsing
    "DelayParseError",
    "InvalidDurationError",
    # Configuration
    "InvalidConfigurationError",
    "ConfigFileError",
    # Handlers
    "handle_error",
    "handle_config_error",
    "handle_cli_error",
    # Validators
    "validate_boolean",
    "validate_enum_choice",
    "validate_non_empty_string",
]
