"""Per-file analysis outcome."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from archrule.domain.model.candidate import Candidate
from archrule.domain.model.diagnostic import Diagnostic


@dataclass(frozen=True, slots=True)
class FileResult:
    """Candidates extracted from one file, or the reason it was skipped.

    Attributes:
        path: Analyzed file
        is_use_case: Whether the file was classified as use-case layer
        candidates: Candidates in traversal order (empty if not analyzed)
        diagnostic: Set when the file was skipped
    """

    path: Path
    is_use_case: bool
    candidates: tuple[Candidate, ...] = ()
    diagnostic: Diagnostic | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if self.candidates and not self.is_use_case:
            raise ValueError("only use-case files can produce candidates")
        if self.candidates and self.diagnostic is not None:
            raise ValueError("skipped file cannot produce candidates")

    @property
    def analyzed(self) -> bool:
        """Use-case file that was successfully parsed and walked."""
        return self.is_use_case and self.diagnostic is None
