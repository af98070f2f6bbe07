"""Configuration loading and discovery."""

from archrule.infrastructure.config.loader import load_config, parse_config, read_config
from archrule.infrastructure.config.locator import (
    CONFIG_FILE_NAME,
    config_locations,
    find_config_file,
    resolve_config_location,
    write_default_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "config_locations",
    "find_config_file",
    "load_config",
    "parse_config",
    "read_config",
    "resolve_config_location",
    "write_default_config",
]
