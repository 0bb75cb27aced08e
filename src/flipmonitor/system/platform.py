"""
Host platform capabilities that change the shape of the configuration.
"""

import sys
from dataclasses import dataclass

# Platforms whose memory statistics do not separate free from available memory.
_NO_FREE_AVAILABLE_SPLIT = ("win32", "cygwin", "freebsd")


@dataclass(frozen=True)
class PlatformCapabilities:
    """
    What the host can tell us about its memory.

    When ``distinguishes_free_memory`` is False, "use all memory" is a plain
    on/off switch and no allocation mode is ever recorded.
    """

    distinguishes_free_memory: bool = True


def detect_platform_capabilities(platform: str = sys.platform) -> PlatformCapabilities:
    """Work out the capabilities of ``platform`` (a ``sys.platform`` value)."""
    distinguishes = not platform.startswith(_NO_FREE_AVAILABLE_SPLIT)
    return PlatformCapabilities(distinguishes_free_memory=distinguishes)
