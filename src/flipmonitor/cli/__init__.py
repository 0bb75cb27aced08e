"""
Command-line interface for the flipmonitor package.
"""

from .main import build_parser, describe_config, main_cli, parse_cli

__all__ = [
    "build_parser",
    "describe_config",
    "main_cli",
    "parse_cli",
]
