"""
Configuration management for the flipmonitor package.

Assembles the detector configuration from parsed command-line values and
loads optional run defaults from a TOML file.
"""

from .assembler import assemble_config, select_memory_target
from .loader import load_defaults_file, load_toml_file
from .validators import validate_run_defaults

__all__ = [
    "assemble_config",
    "select_memory_target",
    "load_defaults_file",
    "load_toml_file",
    "validate_run_defaults",
]
