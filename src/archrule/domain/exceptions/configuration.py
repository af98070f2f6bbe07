"""Configuration exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from archrule.domain.exceptions.base import ArchRuleError

if TYPE_CHECKING:
    from pathlib import Path


class ConfigurationError(ArchRuleError):
    """Configuration file is missing, unreadable or malformed.

    The loader recovers from this by falling back to the default
    configuration; callers that need strict loading may let it propagate.

    Attributes:
        path: Configuration file path
        reason: Why the configuration was rejected
    """

    def __init__(self, path: Path, reason: str) -> None:
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Invalid configuration {path}: {reason}")
