"""Domain model: value objects and aggregates."""

from archrule.domain.model.candidate import Candidate
from archrule.domain.model.check_result import (
    EXIT_ERROR,
    EXIT_OK,
    EXIT_VIOLATIONS,
    CheckResult,
)
from archrule.domain.model.check_stats import CheckStats
from archrule.domain.model.configuration import (
    DEFAULT_EXEMPTION_MARKERS,
    DEFAULT_MODEL_TYPES,
    RuleConfig,
)
from archrule.domain.model.diagnostic import Diagnostic
from archrule.domain.model.enums import DiagnosticKind, ViolationKind
from archrule.domain.model.file_result import FileResult
from archrule.domain.model.location import Location
from archrule.domain.model.source_unit import SourceUnit
from archrule.domain.model.violation import Violation

__all__ = [
    # Enums
    "ViolationKind",
    "DiagnosticKind",
    # Value objects
    "Location",
    "SourceUnit",
    "Candidate",
    "Diagnostic",
    "RuleConfig",
    "DEFAULT_MODEL_TYPES",
    "DEFAULT_EXEMPTION_MARKERS",
    # Entities / aggregates
    "Violation",
    "FileResult",
    "CheckStats",
    "CheckResult",
    # Exit status
    "EXIT_OK",
    "EXIT_VIOLATIONS",
    "EXIT_ERROR",
]
