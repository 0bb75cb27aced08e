"""
System memory queries.

Turns a memory target into a concrete number of bytes for the detector.
This is the only place that asks the operating system about memory.
"""

import logging

import psutil

from ..models.config import AllocationMode, ExplicitSize, MemoryTarget, UseAllMemory

logger = logging.getLogger(__name__)


def resolve_memory_budget(target: MemoryTarget) -> int:
    """Return how many bytes the detector should allocate for ``target``.

    Args:
        target: An explicit size, or the "use all memory" selector.

    Returns:
        The explicit byte count as-is, otherwise the currently free or
        available memory reported by psutil. Without an allocation mode the
        available figure is used, which is all the OS will hand out.
    """
    if isinstance(target, ExplicitSize):
        return target.byte_count

    if not isinstance(target, UseAllMemory):
        raise TypeError(f"Unknown memory target: {target!r}")

    memory = psutil.virtual_memory()
    if target.mode is AllocationMode.FREE:
        budget = memory.free
    else:
        budget = memory.available
    logger.debug(
        f"System memory: total={memory.total} available={memory.available} "
        f"free={memory.free}, using {budget} bytes"
    )
    return budget
