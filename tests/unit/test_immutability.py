"""Value objects are immutable and validated on construction."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from archrule.domain.model.candidate import Candidate
from archrule.domain.model.check_result import CheckResult
from archrule.domain.model.check_stats import CheckStats
from archrule.domain.model.configuration import RuleConfig
from archrule.domain.model.diagnostic import Diagnostic
from archrule.domain.model.enums import DiagnosticKind
from archrule.domain.model.file_result import FileResult
from archrule.domain.model.location import Location
from archrule.domain.model.source_unit import SourceUnit
from archrule.domain.model.violation import Violation
from tests.factories import make_candidate, make_violation

VALUE_OBJECTS = [
    Location(file=Path("a.py"), line=1),
    SourceUnit(path=Path("a.py"), text=""),
    make_candidate("UserEntity"),
    make_violation(),
    Diagnostic(Path("a.py"), DiagnosticKind.PARSE_ERROR, "bad"),
    RuleConfig.default(),
    FileResult(path=Path("a.py"), is_use_case=False),
    CheckStats.empty(),
    CheckResult.empty(),
]


class TestImmutability:
    """Every domain value object is a frozen, slotted dataclass."""

    @pytest.mark.parametrize("obj", VALUE_OBJECTS, ids=lambda o: type(o).__name__)
    def test_frozen(self, obj: object) -> None:
        field_name = dataclasses.fields(obj)[0].name  # type: ignore[arg-type]
        with pytest.raises(dataclasses.FrozenInstanceError):
            setattr(obj, field_name, None)

    @pytest.mark.parametrize(
        "cls",
        [Location, SourceUnit, Candidate, Violation, Diagnostic, RuleConfig, FileResult, CheckStats, CheckResult],
    )
    def test_slots(self, cls: type) -> None:
        assert hasattr(cls, "__slots__")


class TestFileResultValidation:
    """FileResult invariants."""

    def test_candidates_require_use_case(self) -> None:
        with pytest.raises(ValueError, match="only use-case files can produce candidates"):
            FileResult(Path("a.py"), False, candidates=(make_candidate("X"),))

    def test_skipped_file_has_no_candidates(self) -> None:
        diagnostic = Diagnostic(Path("a_use_case.py"), DiagnosticKind.PARSE_ERROR, "bad")
        with pytest.raises(ValueError, match="skipped file cannot produce candidates"):
            FileResult(Path("a_use_case.py"), True, candidates=(make_candidate("X"),), diagnostic=diagnostic)

    def test_analyzed(self) -> None:
        assert FileResult(Path("a_use_case.py"), True).analyzed is True
        assert FileResult(Path("a.py"), False).analyzed is False
