"""
Parsing of human-written memory sizes.

Understands plain byte counts (``"200"``) as well as SI-scaled byte and bit
quantities (``"5kB"``, ``"2.5GB"``, ``"3Mb"``). Prefixes are decimal, so
``"1kB"`` is 1000 bytes. Results that are not whole bytes are truncated
toward zero: the value is an upper bound on memory to allocate.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Tuple

from ..models.units import MAX_BYTE_COUNT, ParsedSize, SiPrefix, SizeUnit
from ..validation.exceptions import (
    InvalidMantissaError,
    InvalidUnitTerminatorError,
    SizeOverflowError,
    SuffixRequiredError,
    SuffixTooLongError,
    TooSmallError,
    ZeroValueError,
)

_PLAIN_INTEGER_RE = re.compile(r"\+?[0-9]+")
_MANTISSA_RE = re.compile(r"[0-9.]*")

_MAX_SUFFIX_LENGTH = 2
_MAX_BYTE_COUNT_DIGITS = len(str(MAX_BYTE_COUNT))


def split_size_string(size_string: str) -> Tuple[str, str]:
    """
    Split a size string into its leading run of digits and dots (the
    mantissa) and everything after it (the suffix).

    Either part may be empty.
    """
    mantissa = _MANTISSA_RE.match(size_string).group()
    return mantissa, size_string[len(mantissa):]


def parse_size_components(size_string: str) -> ParsedSize:
    """
    Decompose a suffixed size string such as ``"2.5GB"`` or ``"3Mb"``.

    The suffix is at most two characters: an optional SI prefix letter
    followed by ``'B'`` for bytes or ``'b'`` for bits. A bit suffix always
    needs a prefix, so ``"10b"`` is rejected.

    Raises:
        SuffixRequiredError: If there is no suffix
        InvalidMantissaError: If the numeric part is not a number
        SuffixTooLongError: If the suffix is longer than two characters
        InvalidUnitTerminatorError: If the suffix does not end in a valid unit
        UnknownSiPrefixError: If the prefix letter is not an SI prefix
    """
    number, suffix = split_size_string(size_string)
    if not suffix:
        raise SuffixRequiredError(
            "you need to specify a suffix to use non-integer numbers",
            value=size_string,
        )

    try:
        mantissa = Decimal(number)
    except InvalidOperation:
        raise InvalidMantissaError(
            f"could not interpret '{number}' as a number", value=size_string
        )

    if len(suffix) > _MAX_SUFFIX_LENGTH:
        raise SuffixTooLongError(
            "the suffix is too long, it can be at most two letters", value=size_string
        )

    prefix_symbol, terminator = suffix[:-1], suffix[-1]
    if terminator == SizeUnit.BYTE.value:
        unit = SizeUnit.BYTE
    elif terminator == SizeUnit.BIT.value and prefix_symbol:
        unit = SizeUnit.BIT
    else:
        raise InvalidUnitTerminatorError(
            "the suffix must end with either 'B' or 'b' and be two characters long",
            value=size_string,
        )

    prefix = SiPrefix.from_symbol(prefix_symbol) if prefix_symbol else SiPrefix.NONE
    return ParsedSize(mantissa=mantissa, prefix=prefix, unit=unit)


def parse_size(size_string: str) -> int:
    """
    Parse a string describing a number of bytes into a positive integer.

    A bare integer is taken as an exact number of bytes. Anything else must
    carry a unit suffix, optionally with an SI prefix, e.g. ``'4GB'``,
    ``'30kB'`` or ``'1Mb'`` (125000 bytes).

    Raises:
        ZeroValueError: If the plain integer is zero
        TooSmallError: If a suffixed size is less than one byte
        SizeOverflowError: If the size exceeds ``MAX_BYTE_COUNT``
        SizeParseError: For any other malformed size string
    """
    if _PLAIN_INTEGER_RE.fullmatch(size_string):
        digits = size_string.lstrip("+").lstrip("0")
        if len(digits) > _MAX_BYTE_COUNT_DIGITS:
            raise SizeOverflowError(
                f"too large, at most {MAX_BYTE_COUNT} bytes can be monitored",
                value=size_string,
            )
        byte_count = int(digits or "0")
        if byte_count == 0:
            raise ZeroValueError("zero is not a valid value", value=size_string)
    else:
        byte_count = parse_size_components(size_string).byte_count
        if byte_count == 0:
            raise TooSmallError("too small", value=size_string)

    if byte_count > MAX_BYTE_COUNT:
        raise SizeOverflowError(
            f"too large, at most {MAX_BYTE_COUNT} bytes can be monitored",
            value=size_string,
        )
    return byte_count


def format_size(byte_count: int) -> str:
    """Render a byte count in a form ``parse_size`` reads back unchanged."""
    return f"{byte_count}{SizeUnit.BYTE.value}"
