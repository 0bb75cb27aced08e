"""
Text-to-quantity parsers for command-line values.

Both parsers are pure: they either return a value or raise a
``ValidationError`` subclass describing what is wrong with the input.
"""

from .delay import format_delay, parse_delay
from .size import format_size, parse_size, parse_size_components, split_size_string

__all__ = [
    "format_delay",
    "format_size",
    "parse_delay",
    "parse_size",
    "parse_size_components",
    "split_size_string",
]
