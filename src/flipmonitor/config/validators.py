"""
Validation of values read from the defaults file.
"""

import logging
from typing import Any, Dict

from ..models.config import RunDefaults
from ..parsing.delay import parse_delay
from ..validation import (
    ConfigFileError,
    DelayParseError,
    ValidationError,
    validate_boolean,
    validate_non_empty_string,
)

logger = logging.getLogger(__name__)

_KNOWN_KEYS = ("delay_between_checks", "parallel", "verbose")


def validate_run_defaults(monitor_data: Dict[str, Any]) -> RunDefaults:
    """
    Validate the ``[monitor]`` table of a defaults file.

    The memory selectors are deliberately not accepted here; they must come
    from the command line.

    Args:
        monitor_data: Raw ``[monitor]`` table from TOML

    Returns:
        Validated RunDefaults instance

    Raises:
        ConfigFileError: If a value has the wrong type or cannot be parsed
    """
    for key in monitor_data:
        if key not in _KNOWN_KEYS:
            logger.warning(f"Ignoring unknown key '{key}' in [monitor] section")

    try:
        delay = None
        if "delay_between_checks" in monitor_data:
            delay_string = validate_non_empty_string(
                monitor_data["delay_between_checks"],
                field_name="monitor.delay_between_checks",
            )
            delay = parse_delay(delay_string)

        parallel = None
        if "parallel" in monitor_data:
            parallel = validate_boolean(monitor_data["parallel"], field_name="monitor.parallel")

        verbose = None
        if "verbose" in monitor_data:
            verbose = validate_boolean(monitor_data["verbose"], field_name="monitor.verbose")
    except DelayParseError as e:
        raise ConfigFileError(
            f"monitor.delay_between_checks: {e}",
            field_name="monitor.delay_between_checks",
            value=e.value,
        ) from e
    except ValidationError as e:
        raise ConfigFileError(str(e), field_name=e.field_name, value=e.value) from e

    return RunDefaults(delay_between_checks=delay, parallel=parallel, verbose=verbose)
