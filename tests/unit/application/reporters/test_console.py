"""Tests for reporters/console.py."""

import io
from pathlib import Path

import pytest
from rich.console import Console

from archrule.application.reporters.console import ConsoleConfig, ConsoleReporter
from archrule.domain.model.check_result import CheckResult
from archrule.domain.model.check_stats import CheckStats
from archrule.domain.model.diagnostic import Diagnostic
from archrule.domain.model.enums import DiagnosticKind
from tests.factories import make_violation


def render(result: CheckResult, config: ConsoleConfig | None = None) -> str:
    output = io.StringIO()
    console = Console(file=output, width=200, no_color=True)
    ConsoleReporter(console, config).report(result)
    return output.getvalue()


def failed_result(count: int = 1) -> CheckResult:
    return CheckResult(
        violations=tuple(make_violation(method_name=f"m{i}", line=i + 1) for i in range(count)),
        diagnostics=(Diagnostic(Path("broken_use_case.py"), DiagnosticKind.PARSE_ERROR, "bad"),),
        stats=CheckStats(files_scanned=2, use_case_files_analyzed=2, candidates_evaluated=count),
    )


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_defaults(self) -> None:
        config = ConsoleConfig()
        assert config.show_signature is True
        assert config.show_diagnostics is True
        assert config.max_violations is None

    def test_negative_max_raises(self) -> None:
        with pytest.raises(ValueError, match="max_violations must be >= 0"):
            ConsoleConfig(max_violations=-1)


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_passed(self) -> None:
        text = render(CheckResult.empty())
        assert "ARCHITECTURE RULE CHECK" in text
        assert "PASSED" in text

    def test_failed_table(self) -> None:
        text = render(failed_result())
        assert "Exposed model objects" in text
        assert "GetUserUseCase" in text
        assert "UserEntity" in text
        assert "FAILED" in text
        assert "1 violation(s)" in text

    def test_diagnostics_shown(self) -> None:
        text = render(failed_result())
        assert "SKIPPED FILES" in text
        assert "[PARSE_ERROR] broken_use_case.py: bad" in text

    def test_diagnostics_hidden(self) -> None:
        text = render(failed_result(), ConsoleConfig(show_diagnostics=False))
        assert "SKIPPED FILES" not in text

    def test_max_violations(self) -> None:
        text = render(failed_result(count=3), ConsoleConfig(max_violations=1))
        assert "m0" in text
        assert "m2" not in text
        assert "2 more violation(s) not shown" in text
