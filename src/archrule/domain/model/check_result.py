"""Check result aggregate for architecture analysis."""

from __future__ import annotations

from dataclasses import dataclass, replace

from archrule.domain.model.check_stats import CheckStats
from archrule.domain.model.diagnostic import Diagnostic
from archrule.domain.model.violation import Violation

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Outcome of one run, handed to reporters.

    Diagnostics never fail a run; only violations do.

    Attributes:
        violations: All violations found, in analysis order
        diagnostics: Files skipped because of read or parse errors
        stats: Analysis statistics
    """

    violations: tuple[Violation, ...]
    diagnostics: tuple[Diagnostic, ...]
    stats: CheckStats

    @property
    def passed(self) -> bool:
        """Check if analysis passed (no violations)."""
        return len(self.violations) == 0

    @property
    def violation_count(self) -> int:
        """Number of violations."""
        return len(self.violations)

    @property
    def exit_code(self) -> int:
        """Process status: 0 when passed, 1 when violations found."""
        return EXIT_OK if self.passed else EXIT_VIOLATIONS

    def with_elapsed(self, analysis_time_ms: float) -> CheckResult:
        """Copy with timing filled in."""
        return replace(self, stats=replace(self.stats, analysis_time_ms=analysis_time_ms))

    @classmethod
    def empty(cls) -> CheckResult:
        """Create empty check result (passed, no violations)."""
        return cls(violations=(), diagnostics=(), stats=CheckStats.empty())
