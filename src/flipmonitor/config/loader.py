"""
Configuration file loading utilities.

Handles the low-level loading and parsing of the optional TOML defaults file.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict

from ..validation import ConfigFileError, ErrorSeverity, handle_config_error

logger = logging.getLogger(__name__)


def load_toml_file(file_path: Path, description: str = "configuration file") -> Dict[str, Any]:
    """
    Load and parse a TOML file with error handling.

    Args:
        file_path: Path to the TOML file to load
        description: Human-readable description for error messages

    Returns:
        Parsed TOML data as a dictionary

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigFileError: If the file is malformed or cannot be read
    """
    logger.info(f"Loading {description} from: {file_path}")

    if not file_path.exists():
        logger.error(f"{description} not found: {file_path}")
        raise FileNotFoundError(f"{description} not found: {file_path}")

    try:
        with open(file_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise _config_file_error(
            f"{description} {file_path} is not valid TOML: {e}", file_path, description
        ) from e
    except UnicodeDecodeError as e:
        raise _config_file_error(
            f"{description} {file_path} is not valid UTF-8: {e}", file_path, description
        ) from e
    except OSError as e:
        raise _config_file_error(
            f"{description} {file_path} could not be read: {e}", file_path, description
        ) from e


def _config_file_error(message: str, file_path: Path, description: str) -> ConfigFileError:
    error = ConfigFileError(message, field_name=str(file_path))
    handle_config_error(
        error=error,
        context=f"parsing {description}",
        severity=ErrorSeverity.CRITICAL,
        reraise=False,
        logger=logger
    )
    return error


def load_defaults_file(config_path: Path) -> Dict[str, Any]:
    """
    Load the ``[monitor]`` table of a defaults file.

    Returns:
        The table's contents, or an empty dict if the file has none
    """
    data = load_toml_file(config_path, "defaults file")
    monitor_data = data.get("monitor", {})
    if not isinstance(monitor_data, dict):
        raise ConfigFileError(
            f"[monitor] in {config_path} must be a table",
            field_name="monitor",
            value=monitor_data,
        )
    return monitor_data
