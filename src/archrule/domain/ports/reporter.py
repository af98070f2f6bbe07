"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from archrule.domain.model.check_result import CheckResult


class ReporterProtocol(Protocol):
    """Protocol for check result reporters.

    Reporters decide output format and destination.
    """

    def report(self, result: CheckResult) -> None:
        """Report check results.

        Args:
            result: Complete check result with violations, diagnostics, stats
        """
        ...
