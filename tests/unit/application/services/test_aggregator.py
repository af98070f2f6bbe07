"""Tests for application/services/aggregator.py."""

from pathlib import Path

from archrule.application.rules import rules_from_config
from archrule.application.services.aggregator import ViolationAggregator
from archrule.domain.model.check_result import CheckResult
from archrule.domain.model.configuration import RuleConfig
from archrule.domain.model.diagnostic import Diagnostic
from archrule.domain.model.enums import DiagnosticKind
from archrule.domain.model.file_result import FileResult
from tests.factories import SCENARIO_MODEL_TYPES, make_candidate

CONFIG = RuleConfig(model_types=SCENARIO_MODEL_TYPES)


def aggregate(*file_results: FileResult) -> CheckResult:
    return ViolationAggregator(rules_from_config(CONFIG), CONFIG).aggregate(file_results)


class TestViolationAggregator:
    """Folding per-file results."""

    def test_no_files(self) -> None:
        result = aggregate()
        assert result.passed is True
        assert result.stats.files_scanned == 0

    def test_order_preserved(self) -> None:
        first = FileResult(
            path=Path("a_use_case.py"),
            is_use_case=True,
            candidates=(
                make_candidate("UserEntity", method_name="one"),
                make_candidate("ProductResponse", method_name="two"),
                make_candidate("MoneyValueObject", method_name="three"),
            ),
        )
        second = FileResult(
            path=Path("b_use_case.py"),
            is_use_case=True,
            candidates=(make_candidate("Result[OrderEntity, Error]", method_name="four"),),
        )

        result = aggregate(first, second)

        assert [v.method_name for v in result.violations] == ["one", "three", "four"]
        assert [v.exposed_type for v in result.violations] == [
            "UserEntity",
            "MoneyValueObject",
            "OrderEntity",
        ]

    def test_no_deduplication(self) -> None:
        candidate = make_candidate("UserEntity")
        file_result = FileResult(Path("a_use_case.py"), True, candidates=(candidate, candidate))
        assert aggregate(file_result).violation_count == 2

    def test_stats(self) -> None:
        analyzed = FileResult(Path("a_use_case.py"), True, candidates=(make_candidate("int"),))
        other = FileResult(Path("entity.py"), False)
        broken = FileResult(
            Path("b_use_case.py"),
            True,
            diagnostic=Diagnostic(Path("b_use_case.py"), DiagnosticKind.PARSE_ERROR, "bad"),
        )

        result = aggregate(analyzed, other, broken)

        assert result.stats.files_scanned == 3
        assert result.stats.use_case_files_analyzed == 1
        assert result.stats.candidates_evaluated == 1
        assert len(result.diagnostics) == 1
        assert result.passed is True
