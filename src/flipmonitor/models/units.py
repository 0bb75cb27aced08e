"""
Size units and SI prefixes.

These are the building blocks the size parser combines into a byte count:
a numeric mantissa, an optional SI prefix and a byte/bit unit.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction

from ..validation.exceptions import UnknownSiPrefixError

# The largest number of bytes a 64-bit address space can describe.
MAX_BYTE_COUNT = 2**64 - 1


class SiPrefix(Enum):
    """Decimal SI magnitude prefixes, keyed by their symbol letter."""

    NONE = ("", 1)
    KILO = ("k", 10**3)
    MEGA = ("M", 10**6)
    GIGA = ("G", 10**9)
    TERA = ("T", 10**12)
    PETA = ("P", 10**15)
    # Anything above peta is unlikely to be useful, but costs nothing to accept.
    EXA = ("E", 10**18)
    ZETTA = ("Z", 10**21)
    YOTTA = ("Y", 10**24)

    def __init__(self, symbol: str, multiplier: int):
        self.symbol = symbol
        self.multiplier = multiplier

    @classmethod
    def from_symbol(cls, symbol: str) -> "SiPrefix":
        """
        Look up a prefix by its letter. Symbols are case-sensitive
        (``'M'`` is mega, ``'m'`` is not accepted).

        Raises:
            UnknownSiPrefixError: If no prefix uses the letter
        """
        for prefix in cls:
            if prefix.symbol == symbol:
                return prefix
        raise UnknownSiPrefixError(f"'{symbol}' is an unsupported si prefix", value=symbol)


class SizeUnit(Enum):
    """Whether a size counts bytes or bits."""

    BYTE = "B"
    BIT = "b"

    @property
    def bits(self) -> int:
        return 8 if self is SizeUnit.BYTE else 1


@dataclass(frozen=True)
class ParsedSize:
    """A size string broken into its parts."""

    mantissa: Decimal
    prefix: SiPrefix = SiPrefix.NONE
    unit: SizeUnit = SizeUnit.BYTE

    @property
    def exact_bytes(self) -> Fraction:
        """The size in bytes, without any rounding."""
        return Fraction(self.mantissa) * self.prefix.multiplier * self.unit.bits / 8

    @property
    def byte_count(self) -> int:
        """The size in whole bytes, truncated toward zero."""
        return int(self.exact_bytes)
