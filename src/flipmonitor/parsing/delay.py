"""
Parsing of human-written durations.

The grammar is a sequence of ``<integer><unit>`` terms, optionally separated
by whitespace, whose lengths are summed: ``"30s"``, ``"5min"``, ``"1h30m"``,
``"2h 15m"``. Month and year are the average Gregorian lengths.
"""

import re
from datetime import timedelta
from typing import Dict

from ..validation.exceptions import InvalidDurationError

_NANOS_PER_SECOND = 10**9

# Unit spelling -> length in nanoseconds.
_UNIT_NANOS: Dict[str, int] = {}
for _spellings, _nanos in (
    (("nsec", "ns", "nanos"), 1),
    (("usec", "us", "micros"), 10**3),
    (("msec", "ms", "millis"), 10**6),
    (("seconds", "second", "secs", "sec", "s"), _NANOS_PER_SECOND),
    (("minutes", "minute", "mins", "min", "m"), 60 * _NANOS_PER_SECOND),
    (("hours", "hour", "hrs", "hr", "h"), 3600 * _NANOS_PER_SECOND),
    (("days", "day", "d"), 86400 * _NANOS_PER_SECOND),
    (("weeks", "week", "w"), 604800 * _NANOS_PER_SECOND),
    (("months", "month", "M"), 2_630_016 * _NANOS_PER_SECOND),
    (("years", "year", "y"), 31_557_600 * _NANOS_PER_SECOND),
):
    for _spelling in _spellings:
        _UNIT_NANOS[_spelling] = _nanos

_NUMBER_RE = re.compile(r"[0-9]+")
_UNIT_RE = re.compile(r"[A-Za-z]+")
_SPACE_RE = re.compile(r"\s*")

_SUPPORTED_UNITS = "ns, us, ms, sec, min, hours, days, weeks, months, years (and few variations)"


def _duration_nanos(delay_string: str) -> int:
    text = delay_string.strip()
    if not text:
        raise InvalidDurationError("value was empty", value=delay_string)

    total = 0
    pos = 0
    while pos < len(text):
        number = _NUMBER_RE.match(text, pos)
        if number is None:
            raise InvalidDurationError(
                f"expected number at {pos}", value=delay_string
            )
        pos = _SPACE_RE.match(text, number.end()).end()

        unit = _UNIT_RE.match(text, pos)
        if unit is None:
            raise InvalidDurationError(
                f"time unit needed, for example {number.group()}sec or {number.group()}ms",
                value=delay_string,
            )
        nanos = _UNIT_NANOS.get(unit.group())
        if nanos is None:
            raise InvalidDurationError(
                f"unknown time unit {unit.group()!r}, supported units: {_SUPPORTED_UNITS}",
                value=delay_string,
            )
        try:
            count = int(number.group())
        except ValueError:
            # more digits than int() will convert
            raise InvalidDurationError("number is too large", value=delay_string)
        total += count * nanos
        pos = _SPACE_RE.match(text, unit.end()).end()
    return total


def parse_delay(delay_string: str) -> timedelta:
    """
    Parse a human duration such as ``"30s"`` or ``"1h30m"``.

    Parts finer than a microsecond are dropped. A zero duration is valid.

    Raises:
        InvalidDurationError: If the string does not match the grammar or the
            duration is too long to represent
    """
    nanos = _duration_nanos(delay_string)
    try:
        return timedelta(microseconds=nanos // 1000)
    except OverflowError:
        raise InvalidDurationError("number is too large", value=delay_string)


def format_delay(delay: timedelta) -> str:
    """Render a delay in a form ``parse_delay`` reads back unchanged."""
    remaining = delay // timedelta(microseconds=1)
    if remaining == 0:
        return "0s"

    parts = []
    for suffix, micros in (
        ("d", 86400 * 10**6),
        ("h", 3600 * 10**6),
        ("m", 60 * 10**6),
        ("s", 10**6),
        ("ms", 10**3),
        ("us", 1),
    ):
        count, remaining = divmod(remaining, micros)
        if count:
            parts.append(f"{count}{suffix}")
    return " ".join(parts)
