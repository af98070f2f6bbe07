"""Per-file failures: the file is skipped and the run continues."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from archrule.domain.exceptions.base import ArchRuleError

if TYPE_CHECKING:
    from pathlib import Path


class SourceFileError(ArchRuleError):
    """One source file could not be processed.

    Attributes:
        path: Offending file
        reason: Failure detail, reused as diagnostic message
    """

    verb: ClassVar[str] = "process"

    def __init__(self, path: Path, reason: str) -> None:
        # FAIL-FIRST
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to {self.verb} {path}: {reason}")


class SourceReadError(SourceFileError):
    """File missing, unreadable or not valid UTF-8."""

    verb = "read"


class ParsingError(SourceFileError):
    """File text is not valid Python."""

    verb = "parse"
