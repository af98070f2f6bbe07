"""Skipped-file diagnostic."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from archrule.domain.model.enums import DiagnosticKind


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Record of a file that could not be analyzed.

    Attributes:
        path: Skipped file
        kind: Why it was skipped
        message: Error detail
    """

    path: Path
    kind: DiagnosticKind
    message: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if not self.message:
            raise ValueError("message must not be empty")

    def __str__(self) -> str:
        return f"{self.path}: [{self.kind.name}] {self.message}"
