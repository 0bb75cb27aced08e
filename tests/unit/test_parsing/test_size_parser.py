"""
Unit tests for the size parser.

Covers the plain-integer path, SI-scaled byte and bit suffixes, truncation,
and every error in the size parsing taxonomy.
"""

from decimal import Decimal

import pytest

from flipmonitor.models.units import MAX_BYTE_COUNT, SiPrefix, SizeUnit
from flipmonitor.parsing.size import (
    format_size,
    parse_size,
    parse_size_components,
    split_size_string,
)
from flipmonitor.validation import (
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
)

POWERS_OF_TWO = [2**i for i in range(10)]
PREFIX_MULTIPLIERS = {
    "k": 10**3,
    "M": 10**6,
    "G": 10**9,
    "T": 10**12,
    "P": 10**15,
}


@pytest.mark.unit
class TestPlainIntegers:
    """Bare numbers are exact byte counts."""

    @pytest.mark.parametrize("n", POWERS_OF_TWO + [3, 200, 999_999_937, 2**63])
    def test_integer_is_byte_count(self, n):
        assert parse_size(str(n)) == n

    def test_leading_plus_is_accepted(self):
        assert parse_size("+42") == 42

    def test_leading_zeros(self):
        assert parse_size("0007") == 7

    def test_zero_is_rejected(self):
        with pytest.raises(ZeroValueError) as exc_info:
            parse_size("0")

        assert "zero is not a valid value" in str(exc_info.value)
        assert exc_info.value.value == "0"

    def test_many_zeros_are_rejected(self):
        with pytest.raises(ZeroValueError):
            parse_size("000")

    def test_largest_byte_count(self):
        assert parse_size(str(MAX_BYTE_COUNT)) == MAX_BYTE_COUNT

    def test_integer_overflow_is_an_error(self):
        with pytest.raises(SizeOverflowError):
            parse_size(str(MAX_BYTE_COUNT + 1))

    def test_very_long_integer_is_an_overflow(self):
        with pytest.raises(SizeOverflowError) as exc_info:
            parse_size("9" * 5000)

        assert "too large" in str(exc_info.value)

    def test_long_run_of_leading_zeros(self):
        assert parse_size("0" * 5000 + "42") == 42

    def test_long_run_of_zeros_is_zero(self):
        with pytest.raises(ZeroValueError):
            parse_size("+" + "0" * 5000)


@pytest.mark.unit
class TestSiSuffixes:
    """SI-scaled byte and bit quantities."""

    @pytest.mark.parametrize("n", POWERS_OF_TWO)
    @pytest.mark.parametrize("prefix", sorted(PREFIX_MULTIPLIERS))
    def test_prefixed_bytes(self, n, prefix):
        assert parse_size(f"{n}{prefix}B") == n * PREFIX_MULTIPLIERS[prefix]

    @pytest.mark.parametrize("n", [123_456_789, 987_654_321_987, 10**15 + 1])
    def test_large_mantissas_are_exact(self, n):
        assert parse_size(f"{n}kB") == n * 1000

    def test_unprefixed_byte_suffix(self):
        assert parse_size("5B") == 5

    def test_fractional_gigabytes(self):
        assert parse_size("2.5GB") == 2_500_000_000

    def test_one_megabit(self):
        assert parse_size("1Mb") == 125_000

    def test_three_megabits(self):
        assert parse_size("3Mb") == 375_000

    def test_examples_from_help_text(self):
        assert parse_size("200") == 200
        assert parse_size("5kB") == 5_000
        assert parse_size("2GB") == 2_000_000_000

    def test_exa_zetta_yotta(self):
        assert parse_size("1EB") == 10**18
        assert parse_size("2.5EB") == 25 * 10**17

    def test_leading_dot_mantissa(self):
        assert parse_size(".5kB") == 500

    def test_trailing_dot_mantissa(self):
        assert parse_size("5.kB") == 5000


@pytest.mark.unit
class TestTruncation:
    """Sub-byte remainders are truncated toward zero."""

    def test_bits_truncate(self):
        # 1001 bits = 125.125 bytes
        assert parse_size("1.001kb") == 125

    def test_fraction_of_a_byte_truncates(self):
        assert parse_size("1.9B") == 1

    def test_just_below_a_byte_is_too_small(self):
        with pytest.raises(TooSmallError) as exc_info:
            parse_size("0.9B")

        assert "too small" in str(exc_info.value)

    def test_zero_with_suffix_is_too_small(self):
        with pytest.raises(TooSmallError):
            parse_size("0kB")

    def test_less_than_eight_bits_is_too_small(self):
        with pytest.raises(TooSmallError):
            parse_size("0.007kb")

    def test_suffixed_overflow(self):
        with pytest.raises(SizeOverflowError):
            parse_size("19EB")

    def test_yottabytes_overflow(self):
        with pytest.raises(SizeOverflowError):
            parse_size("1YB")


@pytest.mark.unit
class TestSizeErrors:
    """Each malformed input maps to one error."""

    def test_decimal_without_suffix(self):
        with pytest.raises(SuffixRequiredError) as exc_info:
            parse_size("2.5")

        assert "suffix" in str(exc_info.value)

    def test_empty_string_needs_suffix(self):
        with pytest.raises(SuffixRequiredError):
            parse_size("")

    def test_unknown_prefix(self):
        with pytest.raises(UnknownSiPrefixError) as exc_info:
            parse_size("10XB")

        assert "'X'" in str(exc_info.value)

    def test_prefixes_are_case_sensitive(self):
        with pytest.raises(UnknownSiPrefixError):
            parse_size("10mB")
        with pytest.raises(UnknownSiPrefixError):
            parse_size("10KB")

    def test_single_bit_suffix(self):
        with pytest.raises(InvalidUnitTerminatorError):
            parse_size("10b")

    @pytest.mark.parametrize("text", ["10k", "10kX", "10G", "5x"])
    def test_invalid_terminators(self, text):
        with pytest.raises(InvalidUnitTerminatorError):
            parse_size(text)

    def test_suffix_too_long(self):
        with pytest.raises(SuffixTooLongError):
            parse_size("10kkB")

    def test_spelled_out_unit_is_too_long(self):
        with pytest.raises(SuffixTooLongError):
            parse_size("10 kB")

    @pytest.mark.parametrize("text", ["1.2.3kB", ".kB", "kB", "B", "-5", "-5kB"])
    def test_invalid_mantissa(self, text):
        with pytest.raises(InvalidMantissaError):
            parse_size(text)

    def test_mantissa_checked_before_suffix_length(self):
        with pytest.raises(InvalidMantissaError):
            parse_size("1.2.3kkB")

    def test_errors_share_a_base_class(self):
        for text in ["0", "2.5", "10XB", "10b", "10kkB", "0.1B", "1.2.3kB"]:
            with pytest.raises(SizeParseError) as exc_info:
                parse_size(text)
            assert isinstance(exc_info.value, ValidationError)
            assert exc_info.value.field_name == "memory_to_monitor"


@pytest.mark.unit
class TestComponents:
    """Decomposition into mantissa, prefix and unit."""

    def test_split(self):
        assert split_size_string("2.5GB") == ("2.5", "GB")
        assert split_size_string("GB") == ("", "GB")
        assert split_size_string("123") == ("123", "")

    def test_split_stops_at_first_non_numeric(self):
        assert split_size_string("1k2B") == ("1", "k2B")

    def test_components_of_bits(self):
        parsed = parse_size_components("3Mb")

        assert parsed.mantissa == Decimal("3")
        assert parsed.prefix is SiPrefix.MEGA
        assert parsed.unit is SizeUnit.BIT
        assert parsed.byte_count == 375_000

    def test_components_without_prefix(self):
        parsed = parse_size_components("7B")

        assert parsed.prefix is SiPrefix.NONE
        assert parsed.unit is SizeUnit.BYTE


@pytest.mark.unit
class TestCanonicalForm:
    """Re-parsing the canonical form gives back the same byte count."""

    @pytest.mark.parametrize("text", ["200", "5kB", "2.5GB", "1Mb", "1.001kb", "3PB"])
    def test_reparse_is_idempotent(self, text):
        byte_count = parse_size(text)

        assert parse_size(format_size(byte_count)) == byte_count

    def test_format(self):
        assert format_size(125_000) == "125000B"
