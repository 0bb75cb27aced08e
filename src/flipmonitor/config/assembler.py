"""
Assembly of the final ``MonitorConfig``.

The assembler receives already-parsed values from the argument layer. That
layer guarantees exactly one memory selector through a required, mutually
exclusive argument group; receiving anything else here is a programming
error and raises ``InvalidConfigurationError``.
"""

from datetime import timedelta
from typing import Optional, Union

from ..models.config import (
    DEFAULT_DELAY_SECONDS,
    AllocationMode,
    ExplicitSize,
    MemoryTarget,
    MonitorConfig,
    UseAllMemory,
)
from ..system.platform import PlatformCapabilities, detect_platform_capabilities
from ..validation.exceptions import InvalidConfigurationError

UseAllSelector = Union[AllocationMode, bool, None]


def _use_all_target(
    use_all: UseAllSelector, capabilities: PlatformCapabilities
) -> Optional[UseAllMemory]:
    """Translate the platform-specific ``use_all`` value into a target, or None if unset."""
    if capabilities.distinguishes_free_memory:
        if use_all is None:
            return None
        if not isinstance(use_all, AllocationMode):
            raise InvalidConfigurationError(
                f"use_all must be an AllocationMode on this platform, got {use_all!r}",
                field_name="use_all",
                value=use_all,
            )
        return UseAllMemory(mode=use_all)

    if use_all is None or use_all is False:
        return None
    if use_all is not True:
        raise InvalidConfigurationError(
            f"use_all must be a boolean on this platform, got {use_all!r}",
            field_name="use_all",
            value=use_all,
        )
    return UseAllMemory(mode=None)


def select_memory_target(
    memory_to_monitor: Optional[int],
    use_all: UseAllSelector,
    capabilities: PlatformCapabilities,
) -> MemoryTarget:
    """
    Pick the memory target from the two mutually exclusive selectors.

    Raises:
        InvalidConfigurationError: If both or neither selector is set, or a
            selector has the wrong shape
    """
    use_all_target = _use_all_target(use_all, capabilities)

    if memory_to_monitor is not None and use_all_target is not None:
        raise InvalidConfigurationError(
            "memory_to_monitor and use_all are mutually exclusive, but both were given"
        )
    if use_all_target is not None:
        return use_all_target
    if memory_to_monitor is None:
        raise InvalidConfigurationError(
            "one of memory_to_monitor or use_all is required, but neither was given"
        )
    if isinstance(memory_to_monitor, bool) or not isinstance(memory_to_monitor, int) \
            or memory_to_monitor <= 0:
        raise InvalidConfigurationError(
            f"memory_to_monitor must be a positive byte count, got {memory_to_monitor!r}",
            field_name="memory_to_monitor",
            value=memory_to_monitor,
        )
    return ExplicitSize(byte_count=memory_to_monitor)


def assemble_config(
    memory_to_monitor: Optional[int] = None,
    use_all: UseAllSelector = None,
    delay_between_checks: Optional[timedelta] = None,
    parallel: bool = False,
    verbose: bool = False,
    capabilities: Optional[PlatformCapabilities] = None,
) -> MonitorConfig:
    """
    Build the detector configuration from parsed command-line values.

    Args:
        memory_to_monitor: Explicit byte count, from ``parse_size``
        use_all: An ``AllocationMode`` where the platform tells free and
            available memory apart, otherwise a bool
        delay_between_checks: Pause between checks; 30 seconds when None
        parallel: Run the integrity check in parallel
        verbose: Print extra information
        capabilities: Host capabilities; detected when None

    Returns:
        The immutable configuration

    Raises:
        InvalidConfigurationError: If the memory selectors break the
            exactly-one precondition
    """
    if capabilities is None:
        capabilities = detect_platform_capabilities()
    if delay_between_checks is None:
        delay_between_checks = timedelta(seconds=DEFAULT_DELAY_SECONDS)

    return MonitorConfig(
        memory_target=select_memory_target(memory_to_monitor, use_all, capabilities),
        delay_between_checks=delay_between_checks,
        parallel=bool(parallel),
        verbose=bool(verbose),
    )
