"""Common base for the bundled reporters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archrule.domain.model.check_result import CheckResult


class BaseReporter(ABC):
    """Satisfies ReporterProtocol by subclassing.

    Any object with a matching report() method works as a reporter;
    subclassing only adds the abstract-method check.

    Example:
        class CountReporter(BaseReporter):
            def report(self, result: CheckResult) -> None:
                print(result.violation_count)
    """

    @abstractmethod
    def report(self, result: CheckResult) -> None:
        """Render one check result.

        Args:
            result: Violations, diagnostics and stats of a run
        """
