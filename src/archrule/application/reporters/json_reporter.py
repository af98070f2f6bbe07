"""JSON reporter for CI pipelines and other tools."""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, Any, TextIO

from archrule.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from archrule.domain.model.check_result import CheckResult
    from archrule.domain.model.diagnostic import Diagnostic
    from archrule.domain.model.location import Location
    from archrule.domain.model.violation import Violation


class JSONReporter(BaseReporter):
    """Writes one JSON document per result.

    Top-level keys: passed, summary, violations, diagnostics.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Target stream (default: sys.stdout)
            indent: Indentation, None for a single line
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: CheckResult) -> None:
        self._output.write(json.dumps(result_to_dict(result), indent=self._indent))
        self._output.write("\n")


def result_to_dict(result: CheckResult) -> dict[str, Any]:
    """JSON-ready view of a check result."""
    stats = result.stats
    return {
        "passed": result.passed,
        "summary": {
            "files_scanned": stats.files_scanned,
            "use_case_files_analyzed": stats.use_case_files_analyzed,
            "candidates_evaluated": stats.candidates_evaluated,
            "violation_count": result.violation_count,
            "skipped_count": len(result.diagnostics),
            "analysis_time_ms": stats.analysis_time_ms,
        },
        "violations": [_violation(v) for v in result.violations],
        "diagnostics": [_diagnostic(d) for d in result.diagnostics],
    }


def _violation(violation: Violation) -> dict[str, Any]:
    return {
        "kind": violation.kind.name,
        "use_case": violation.use_case_name,
        "method": violation.method_name,
        "exposed_type": violation.exposed_type,
        "return_signature": violation.return_signature,
        "message": violation.message,
        "location": _location(violation.location),
    }


def _location(location: Location | None) -> dict[str, Any] | None:
    if location is None:
        return None
    return {"file": str(location.file), "line": location.line, "column": location.column}


def _diagnostic(diagnostic: Diagnostic) -> dict[str, Any]:
    return {
        "file": str(diagnostic.path),
        "kind": diagnostic.kind.name,
        "message": diagnostic.message,
    }
