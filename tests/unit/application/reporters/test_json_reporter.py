"""Tests for reporters/json_reporter.py."""

import io
import json
from pathlib import Path

from archrule.application.reporters.json_reporter import JSONReporter
from archrule.domain.model.check_result import CheckResult
from archrule.domain.model.check_stats import CheckStats
from archrule.domain.model.diagnostic import Diagnostic
from archrule.domain.model.enums import DiagnosticKind
from archrule.domain.model.violation import Violation
from tests.factories import make_violation


def report(result: CheckResult, **kwargs: object) -> str:
    output = io.StringIO()
    JSONReporter(output, **kwargs).report(result)  # type: ignore[arg-type]
    return output.getvalue()


class TestJSONReporter:
    """Tests for JSONReporter."""

    def test_passed_result(self) -> None:
        data = json.loads(report(CheckResult.empty()))
        assert data["passed"] is True
        assert data["violations"] == []
        assert data["diagnostics"] == []
        assert data["summary"]["violation_count"] == 0

    def test_violation_fields(self) -> None:
        result = CheckResult(
            violations=(make_violation(line=3),),
            diagnostics=(),
            stats=CheckStats(files_scanned=1, use_case_files_analyzed=1, candidates_evaluated=1),
        )

        data = json.loads(report(result))

        assert data["passed"] is False
        assert data["violations"] == [
            {
                "kind": "EXPOSED_MODEL",
                "use_case": "GetUserUseCase",
                "method": "execute",
                "exposed_type": "UserEntity",
                "return_signature": "UserEntity",
                "message": (
                    "UseCase 'GetUserUseCase' exposes model object 'UserEntity' in method 'execute'"
                ),
                "location": {"file": "/test/get_user_use_case.py", "line": 3, "column": 4},
            }
        ]

    def test_violation_without_location(self) -> None:
        result = CheckResult(
            violations=(Violation("GetUserUseCase", "execute", "UserEntity"),),
            diagnostics=(),
            stats=CheckStats.empty(),
        )
        data = json.loads(report(result))
        assert data["violations"][0]["location"] is None

    def test_diagnostics(self) -> None:
        diagnostic = Diagnostic(Path("x_use_case.py"), DiagnosticKind.READ_ERROR, "permission denied")
        result = CheckResult(violations=(), diagnostics=(diagnostic,), stats=CheckStats.empty())

        data = json.loads(report(result))

        assert data["summary"]["skipped_count"] == 1
        assert data["diagnostics"] == [
            {"file": "x_use_case.py", "kind": "READ_ERROR", "message": "permission denied"}
        ]

    def test_compact_output(self) -> None:
        text = report(CheckResult.empty(), indent=None)
        assert text.count("\n") == 1
