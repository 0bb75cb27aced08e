"""
System interaction utilities.

- Platform capability detection (whether free and available memory differ)
- Memory budget resolution through psutil
"""

from .memory import resolve_memory_budget
from .platform import PlatformCapabilities, detect_platform_capabilities

__all__ = [
    "PlatformCapabilities",
    "detect_platform_capabilities",
    "resolve_memory_budget",
]
