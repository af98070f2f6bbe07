"""Check statistics for architecture analysis results."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CheckStats:
    """Statistics from architecture check.

    Immutable value object tracking analysis metrics.

    Attributes:
        files_scanned: Number of source files considered
        use_case_files_analyzed: Number of use-case files parsed and walked
        candidates_evaluated: Number of candidates run through the rules
        analysis_time_ms: Total analysis time in milliseconds
    """

    files_scanned: int
    use_case_files_analyzed: int
    candidates_evaluated: int
    analysis_time_ms: float = 0.0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.files_scanned < 0:
            raise ValueError(f"files_scanned must be >= 0, got {self.files_scanned}")
        if self.use_case_files_analyzed < 0:
            raise ValueError(
                f"use_case_files_analyzed must be >= 0, got {self.use_case_files_analyzed}"
            )
        if self.use_case_files_analyzed > self.files_scanned:
            raise ValueError(
                f"use_case_files_analyzed ({self.use_case_files_analyzed}) "
                f"must be <= files_scanned ({self.files_scanned})"
            )
        if self.candidates_evaluated < 0:
            raise ValueError(f"candidates_evaluated must be >= 0, got {self.candidates_evaluated}")
        if self.analysis_time_ms < 0:
            raise ValueError(f"analysis_time_ms must be >= 0, got {self.analysis_time_ms}")

    @classmethod
    def empty(cls) -> CheckStats:
        """Create empty check stats."""
        return cls(
            files_scanned=0,
            use_case_files_analyzed=0,
            candidates_evaluated=0,
            analysis_time_ms=0.0,
        )
