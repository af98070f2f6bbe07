"""Violation aggregation across files."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from archrule.domain.model.check_result import CheckResult
from archrule.domain.model.check_stats import CheckStats

if TYPE_CHECKING:
    from archrule.domain.model.configuration import RuleConfig
    from archrule.domain.model.diagnostic import Diagnostic
    from archrule.domain.model.file_result import FileResult
    from archrule.domain.model.violation import Violation
    from archrule.domain.ports.rule import RuleProtocol


class ViolationAggregator:
    """Folds per-file results into one CheckResult.

    Files in given order, candidates in traversal order, rules in
    registry order. No deduplication: identical-looking violations from
    distinct methods are all kept.
    """

    def __init__(self, rules: Sequence[RuleProtocol], config: RuleConfig) -> None:
        """Initialize aggregator.

        Args:
            rules: Rules to evaluate per candidate
            config: Rule configuration
        """
        self._rules = tuple(rules)
        self._config = config

    def aggregate(self, file_results: Iterable[FileResult]) -> CheckResult:
        """Evaluate every candidate and collect violations.

        Args:
            file_results: Per-file results in analysis order

        Returns:
            CheckResult (analysis_time_ms left at 0)
        """
        violations: list[Violation] = []
        diagnostics: list[Diagnostic] = []
        files_scanned = 0
        use_case_files = 0
        candidates_evaluated = 0

        for file_result in file_results:
            files_scanned += 1

            if file_result.diagnostic is not None:
                diagnostics.append(file_result.diagnostic)
            if file_result.analyzed:
                use_case_files += 1

            for candidate in file_result.candidates:
                candidates_evaluated += 1
                for rule in self._rules:
                    violation = rule.evaluate(candidate, self._config)
                    if violation is not None:
                        violations.append(violation)

        return CheckResult(
            violations=tuple(violations),
            diagnostics=tuple(diagnostics),
            stats=CheckStats(
                files_scanned=files_scanned,
                use_case_files_analyzed=use_case_files,
                candidates_evaluated=candidates_evaluated,
            ),
        )
