"""
Command-line interface for the flipmonitor bit-flip detector.

This module turns command-line arguments into a validated ``MonitorConfig``
and hands it to the detection loop. Argument values are parsed by the size
and delay parsers; a malformed value makes argparse print the parser's
message for that option and exit with status 2.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from ..config import assemble_config, load_defaults_file, validate_run_defaults
from ..models.config import DEFAULT_DELAY, AllocationMode, MonitorConfig, RunDefaults
from ..parsing import format_delay, format_size, parse_delay, parse_size
from ..system import PlatformCapabilities, detect_platform_capabilities, resolve_memory_budget
from ..validation import (
    DelayParseError,
    SizeParseError,
    ValidationError,
    handle_cli_error,
    validate_enum_choice,
)
from ..version import __version__

LOG_FORMAT = "%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)

Detector = Callable[[MonitorConfig], Optional[int]]


def _size_argument(value: str) -> int:
    try:
        return parse_size(value)
    except SizeParseError as e:
        raise argparse.ArgumentTypeError(str(e))


def _delay_argument(value: str):
    try:
        return parse_delay(value)
    except DelayParseError as e:
        raise argparse.ArgumentTypeError(str(e))


def _allocation_mode_argument(value: str) -> AllocationMode:
    try:
        choice = validate_enum_choice(
            value,
            choices=[mode.value for mode in AllocationMode],
            field_name="allocation mode",
            case_sensitive=False,
        )
    except ValidationError as e:
        raise argparse.ArgumentTypeError(str(e))
    return AllocationMode(choice)


def build_parser(capabilities: Optional[PlatformCapabilities] = None) -> argparse.ArgumentParser:
    """
    Build the argument parser.

    The shape of ``--use-all`` follows the platform: it takes an allocation
    mode where free and available memory differ, and is a plain flag
    elsewhere. ``--memory-to-monitor`` and ``--use-all`` form a required,
    mutually exclusive group.
    """
    if capabilities is None:
        capabilities = detect_platform_capabilities()

    parser = argparse.ArgumentParser(
        prog="flipmonitor",
        description=(
            "Monitors memory for bit-flips (won't work on ECC memory). "
            "The chance of detection scales with the physical size of your DRAM "
            "modules and the percentage of them you allocate to this program."
        ),
    )
    memory_group = parser.add_mutually_exclusive_group(required=True)
    memory_group.add_argument(
        "-m",
        "--memory-to-monitor",
        type=_size_argument,
        metavar="SIZE",
        help=(
            "The size of the memory to monitor for bit flips, understands e.g. "
            "200, 5kB, 2GB and 3Mb. Without a suffix the number is taken as a "
            "number of bytes."
        ),
    )
    if capabilities.distinguishes_free_memory:
        memory_group.add_argument(
            "--use-all",
            type=_allocation_mode_argument,
            metavar="ALLOCATION_MODE",
            help=(
                "Allocate as much memory as possible to the detector. 'free' "
                "allocates all currently unused memory, 'available' also tries to "
                "evict things that sit in memory but haven't been used in a while."
            ),
        )
    else:
        memory_group.add_argument(
            "--use-all",
            action="store_true",
            default=None,
            help="Allocate as much memory as possible to the detector.",
        )

    parser.add_argument(
        "-d",
        "--delay-between-checks",
        type=_delay_argument,
        default=None,
        metavar="DURATION",
        help=f"The delay in between each integrity check, e.g. 30s, 5min, 1h30m (default: {DEFAULT_DELAY}).",
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Run the integrity check in parallel.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print extra information.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="TOML file with defaults for the [monitor] options. Command-line values win.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )


def describe_config(config: MonitorConfig) -> str:
    """One-line summary of a configuration, for logs."""
    if config.use_all:
        mode = config.allocation_mode
        target = f"all {mode.value} memory" if mode else "all memory"
    else:
        target = format_size(config.memory_to_monitor)
    return (
        f"Monitoring {target} | delay={format_delay(config.delay_between_checks)} "
        f"parallel={'ON' if config.parallel else 'OFF'} "
        f"verbose={'ON' if config.verbose else 'OFF'}"
    )


def _load_run_defaults(config_path: Optional[Path]) -> RunDefaults:
    if config_path is None:
        return RunDefaults()
    try:
        return validate_run_defaults(load_defaults_file(config_path))
    except (FileNotFoundError, ValidationError) as e:
        handle_cli_error(
            error=e,
            context="defaults file loading",
            exit_code=1,
            logger=logger,
        )


def parse_cli(
    argv: Optional[Sequence[str]] = None,
    capabilities: Optional[PlatformCapabilities] = None,
) -> MonitorConfig:
    """
    Parse command-line arguments into a ``MonitorConfig``.

    Exits through argparse on malformed or conflicting arguments.
    """
    if capabilities is None:
        capabilities = detect_platform_capabilities()

    parser = build_parser(capabilities)
    args = parser.parse_args(list(argv) if argv is not None else None)

    defaults = _load_run_defaults(args.config)

    delay = args.delay_between_checks
    if delay is None:
        delay = defaults.delay_between_checks

    return assemble_config(
        memory_to_monitor=args.memory_to_monitor,
        use_all=args.use_all,
        delay_between_checks=delay,
        parallel=args.parallel or bool(defaults.parallel),
        verbose=args.verbose or bool(defaults.verbose),
        capabilities=capabilities,
    )


def main_cli(
    argv: Optional[Sequence[str]] = None,
    detector: Optional[Detector] = None,
) -> int:
    """
    Main command-line entry point.

    Builds the configuration, logs it, and passes it to ``detector`` when
    one is given.

    Returns:
        The detector's exit code, or 0 when no detector is attached.
    """
    configure_logging(verbose=False)
    config = parse_cli(argv)
    if config.verbose:
        configure_logging(verbose=True)

    logger.info(describe_config(config))
    logger.debug(f"Configuration: {config}")
    if config.verbose:
        budget = resolve_memory_budget(config.memory_target)
        logger.debug(f"Resolved memory budget: {format_size(budget)}")

    if detector is None:
        logger.info("No detector attached, configuration is valid.")
        return 0
    return int(detector(config) or 0)


if __name__ == "__main__":
    sys.exit(main_cli())
