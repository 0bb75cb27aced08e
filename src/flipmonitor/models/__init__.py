"""
Data models for the monitor configuration.

Unit models:
- SI prefixes and byte/bit units used by the size parser
- The decomposed form of a parsed size string

Configuration models:
- Allocation modes for "use all memory"
- The memory target union (explicit size or use-all)
- The immutable configuration handed to the detector
"""

from .config import (
    DEFAULT_DELAY,
    AllocationMode,
    ExplicitSize,
    MemoryTarget,
    MonitorConfig,
    RunDefaults,
    UseAllMemory,
)
from .units import MAX_BYTE_COUNT, ParsedSize, SiPrefix, SizeUnit

__all__ = [
    # Units
    "MAX_BYTE_COUNT",
    "ParsedSize",
    "SiPrefix",
    "SizeUnit",
    # Configuration
    "DEFAULT_DELAY",
    "AllocationMode",
    "ExplicitSize",
    "MemoryTarget",
    "MonitorConfig",
    "RunDefaults",
    "UseAllMemory",
]
