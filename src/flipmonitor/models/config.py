"""
Configuration data models.

``MonitorConfig`` is the single value the detection loop receives. The memory
target is a two-variant union, so a config can never hold both an explicit
size and the "use all" selector, nor neither.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Optional, Union

DEFAULT_DELAY = "30s"
DEFAULT_DELAY_SECONDS = 30


class AllocationMode(Enum):
    """
    What "use all memory" means on platforms that can tell the difference.

    ``AVAILABLE`` also counts memory the OS can reclaim from idle pages and
    caches; ``FREE`` only counts memory nobody is using right now.
    """

    AVAILABLE = "available"
    FREE = "free"


@dataclass(frozen=True)
class ExplicitSize:
    """Monitor exactly ``byte_count`` bytes."""

    byte_count: int


@dataclass(frozen=True)
class UseAllMemory:
    """
    Monitor as much memory as the system will give.

    ``mode`` is None on platforms that cannot distinguish free from
    available memory.
    """

    mode: Optional[AllocationMode] = None


MemoryTarget = Union[ExplicitSize, UseAllMemory]


@dataclass(frozen=True)
class RunDefaults:
    """
    Defaults read from a TOML file, applied where the command line is silent.
    A None field means the file did not set it.
    """

    delay_between_checks: Optional[timedelta] = None
    parallel: Optional[bool] = None
    verbose: Optional[bool] = None


@dataclass(frozen=True)
class MonitorConfig:
    """
    Validated settings for one run of the bit-flip detector.
    """

    memory_target: MemoryTarget
    # Pause between two integrity checks. Zero means check continuously.
    delay_between_checks: timedelta = field(
        default_factory=lambda: timedelta(seconds=DEFAULT_DELAY_SECONDS)
    )
    # Run the integrity check in parallel.
    parallel: bool = False
    # Print extra information.
    verbose: bool = False

    @property
    def memory_to_monitor(self) -> Optional[int]:
        if isinstance(self.memory_target, ExplicitSize):
            return self.memory_target.byte_count
        return None

    @property
    def use_all(self) -> bool:
        return isinstance(self.memory_target, UseAllMemory)

    @property
    def allocation_mode(self) -> Optional[AllocationMode]:
        if isinstance(self.memory_target, UseAllMemory):
            return self.memory_target.mode
        return None
