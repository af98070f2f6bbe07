"""Configuration file discovery and default materialization."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from archrule.domain.model.configuration import RuleConfig

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "arch-config.json"

# Searched in order, relative to the project directory
_CONFIG_LOCATIONS: tuple[tuple[str, ...], ...] = (
    (CONFIG_FILE_NAME,),
    (".archrule", CONFIG_FILE_NAME),
    (".config", CONFIG_FILE_NAME),
)


def config_locations(project_dir: Path) -> tuple[Path, ...]:
    """Standard configuration locations under project_dir, in search order."""
    return tuple(project_dir.joinpath(*parts) for parts in _CONFIG_LOCATIONS)


def find_config_file(project_dir: Path) -> Path | None:
    """Find existing configuration file.

    Args:
        project_dir: Project root to search

    Returns:
        First existing standard location, None if none exists
    """
    for location in config_locations(project_dir):
        if location.is_file():
            logger.info("Using configuration file at %s", location)
            return location
    return None


def write_default_config(target: Path, *, overwrite: bool = False) -> bool:
    """Write built-in configuration as JSON.

    Args:
        target: File to create
        overwrite: Replace existing file

    Returns:
        True if file was written, False if it already existed

    Raises:
        OSError: If file cannot be written
    """
    if target.exists() and not overwrite:
        return False

    target.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(RuleConfig.default().to_dict(), indent=4)
    target.write_text(content + "\n", encoding="utf-8")
    return True


def resolve_config_location(project_dir: Path, work_dir: Path) -> Path:
    """Find configuration or materialize the default one.

    Args:
        project_dir: Project root to search
        work_dir: Directory for the generated default file

    Returns:
        Path of the configuration file to use

    Raises:
        OSError: If default file cannot be written
    """
    existing = find_config_file(project_dir)
    if existing is not None:
        return existing

    target = work_dir / CONFIG_FILE_NAME
    if write_default_config(target):
        logger.info("No configuration file found. Created default configuration at %s", target)
        logger.info(
            "Custom configuration can be placed at: %s",
            ", ".join(str(p) for p in config_locations(project_dir)),
        )
    return target
