"""JSON configuration loading.

Schema:
    {"modelTypes": ["Entity", ...], "exemptionMarkers": ["Response", ...]}

`exemptionMarkers` is optional; a malformed value falls back to the default
markers only. Any other problem with the file falls back to the built-in
configuration; a broken config file never aborts a run.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from archrule.domain.exceptions.configuration import ConfigurationError
from archrule.domain.model.configuration import DEFAULT_EXEMPTION_MARKERS, RuleConfig

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

MODEL_TYPES_KEY = "modelTypes"
EXEMPTION_MARKERS_KEY = "exemptionMarkers"


def load_config(path: Path | None) -> RuleConfig:
    """Load configuration, falling back to defaults on any error.

    Args:
        path: Configuration file, or None for defaults

    Returns:
        Loaded configuration, or RuleConfig.default()
    """
    if path is None:
        logger.info("No configuration file given, using default model types")
        return RuleConfig.default()

    try:
        config = read_config(path)
    except ConfigurationError as e:
        logger.info("%s; using default configuration", e)
        return RuleConfig.default()

    logger.info("Loaded configuration from %s", path)
    return config


def read_config(path: Path) -> RuleConfig:
    """Load configuration strictly.

    Args:
        path: Configuration file

    Returns:
        Configuration exactly as written (order and duplicates preserved)

    Raises:
        ConfigurationError: If file is missing, unreadable or malformed
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigurationError(path, "file not found") from e
    except PermissionError as e:
        raise ConfigurationError(path, "permission denied") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(path, f"cannot read: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigurationError(path, f"malformed JSON: {e}") from e

    return parse_config(data, path)


def parse_config(data: object, path: Path) -> RuleConfig:
    """Build configuration from decoded JSON.

    Args:
        data: Decoded JSON document
        path: Source file (for error messages)

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If schema is not satisfied
    """
    if not isinstance(data, dict):
        raise ConfigurationError(path, "top-level value must be an object")

    model_types = _string_list(data.get(MODEL_TYPES_KEY), MODEL_TYPES_KEY, path)
    if not model_types:
        raise ConfigurationError(path, f"'{MODEL_TYPES_KEY}' must not be empty")

    exemption_markers = _exemption_markers(data.get(EXEMPTION_MARKERS_KEY), path)

    try:
        return RuleConfig(model_types=model_types, exemption_markers=exemption_markers)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(path, str(e)) from e


def _exemption_markers(value: object, path: Path) -> tuple[str, ...]:
    """Validated markers, defaults if absent or malformed.

    A bad markers entry does not discard valid model types.
    """
    if value is None:
        return DEFAULT_EXEMPTION_MARKERS
    try:
        return _string_list(value, EXEMPTION_MARKERS_KEY, path)
    except ConfigurationError as e:
        logger.info("%s; using default exemption markers", e)
        return DEFAULT_EXEMPTION_MARKERS


def _string_list(value: object, key: str, path: Path) -> tuple[str, ...]:
    """Validate JSON array of non-empty strings."""
    if value is None:
        raise ConfigurationError(path, f"missing '{key}'")
    if not isinstance(value, list):
        raise ConfigurationError(path, f"'{key}' must be an array")
    for item in value:
        if not isinstance(item, str) or not item:
            raise ConfigurationError(path, f"'{key}' must contain non-empty strings")
    return tuple(value)
