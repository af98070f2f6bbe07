"""Plain text reporter for terminals and CI logs."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from archrule.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from archrule.domain.model.check_result import CheckResult
    from archrule.domain.model.violation import Violation

_RULE_WIDTH = 70


class PlainTextReporter(BaseReporter):
    """Renders a result as numbered, indented text.

    The whole report is written to the stream in one call.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Target stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, result: CheckResult) -> None:
        lines = [*self._summary(result)]

        if result.violations:
            lines.extend(self._violations(result.violations))

        if result.diagnostics:
            lines.append("")
            lines.append(f"Skipped files ({len(result.diagnostics)}):")
            lines.extend(f"  {diagnostic}" for diagnostic in result.diagnostics)

        lines.extend(
            [
                "",
                "=" * _RULE_WIDTH,
                f"Result: {'PASSED' if result.passed else 'FAILED'}",
                "=" * _RULE_WIDTH,
            ]
        )

        self._output.write("\n".join(lines) + "\n")

    @staticmethod
    def _summary(result: CheckResult) -> list[str]:
        stats = result.stats
        return [
            "=" * _RULE_WIDTH,
            "Architecture Rule Check Results",
            "=" * _RULE_WIDTH,
            "",
            "Summary:",
            f"  Files scanned: {stats.files_scanned}",
            f"  Use-case files analyzed: {stats.use_case_files_analyzed}",
            f"  Violations: {result.violation_count}",
            f"  Skipped files: {len(result.diagnostics)}",
            f"  Status: {'PASS' if result.passed else 'FAIL'}",
        ]

    @staticmethod
    def _violations(violations: tuple[Violation, ...]) -> list[str]:
        lines = ["", "-" * _RULE_WIDTH, f"Violations ({len(violations)}):", "-" * _RULE_WIDTH]
        for number, violation in enumerate(violations, start=1):
            lines.append("")
            lines.append(f"{number}. [{violation.kind.name}] {violation.message}")
            if violation.location is not None:
                lines.append(f"   at {violation.location}")
            if violation.return_signature:
                lines.append(f"   Returns: {violation.return_signature}")
        return lines
