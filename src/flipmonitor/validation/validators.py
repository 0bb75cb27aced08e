"""
Generic value validators.

Used by the defaults-file validator to check the types of values read from
TOML before they are handed to the parsers.
"""

from typing import Any, List, Optional

from .exceptions import ValidationError


def validate_boolean(value: Any, field_name: str = "value") -> bool:
    """
    Validate that a value is a real boolean.

    TOML distinguishes ``true`` from ``1``; so do we.

    Raises:
        ValidationError: If value is not a bool
    """
    if not isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be a boolean, got {value!r}",
            field_name=field_name,
            value=value
        )
    return value


def validate_non_empty_string(value: Any, field_name: str = "value") -> str:
    """
    Validate that a value is a non-empty string and return it stripped.

    Raises:
        ValidationError: If value is not a string or is blank
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"{field_name} must be a non-empty string, got {value!r}",
            field_name=field_name,
            value=value
        )
    return value.strip()


def validate_enum_choice(
    value: Any,
    choices: List[str],
    field_name: str = "value",
    case_sensitive: bool = True
) -> str:
    """
    Validate that a value is one of the allowed choices.

    Args:
        value: Value to validate
        choices: List of allowed choices
        field_name: Name of the field being validated
        case_sensitive: Whether the comparison should be case-sensitive

    Returns:
        The matching choice, as spelled in ``choices``

    Raises:
        ValidationError: If value is not in choices
    """
    str_value = str(value)
    match: Optional[str] = None
    if case_sensitive:
        if str_value in choices:
            match = str_value
    else:
        for choice in choices:
            if choice.lower() == str_value.lower():
                match = choice
                break

    if match is None:
        raise ValidationError(
            f"{field_name} must be one of {choices}, got {value}",
            field_name=field_name,
            value=value
        )
    return match
