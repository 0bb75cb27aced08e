"""
flipmonitor: configuration front-end for a memory bit-flip detector.

The package turns command-line text into a validated, immutable
``MonitorConfig``: how much memory to watch, how to obtain it, how often to
re-check it, and whether checks run in parallel.

The package is organized into specialized modules:
- parsing: size ("5kB", "3Mb") and duration ("30s", "1h30m") parsers
- models: SI prefixes, units and configuration data structures
- validation: exception taxonomy and error handling
- config: configuration assembly and TOML defaults
- system: platform capabilities and memory queries
- cli: command-line interface

Usage:
    From command line:
        flipmonitor --memory-to-monitor 2GB -d 1m

    Programmatically:
        from flipmonitor import parse_size, assemble_config
        config = assemble_config(memory_to_monitor=parse_size("2GB"))
"""

from .cli import main_cli, parse_cli
from .config import assemble_config
from .models import (
    AllocationMode,
    ExplicitSize,
    MonitorConfig,
    SiPrefix,
    SizeUnit,
    UseAllMemory,
)
from .parsing import parse_delay, parse_size
from .system import PlatformCapabilities, detect_platform_capabilities
from .validation import (
    DelayParseError,
    InvalidConfigurationError,
    SizeParseError,
    ValidationError,
)
from .version import __version__

__all__ = [
    # Entry points
    "main_cli",
    "parse_cli",
    "assemble_config",
    # Parsers
    "parse_size",
    "parse_delay",
    # Models
    "AllocationMode",
    "ExplicitSize",
    "MonitorConfig",
    "SiPrefix",
    "SizeUnit",
    "UseAllMemory",
    # System
    "PlatformCapabilities",
    "detect_platform_capabilities",
    # Errors
    "ValidationError",
    "SizeParseError",
    "DelayParseError",
    "InvalidConfigurationError",
    "__version__",
]
