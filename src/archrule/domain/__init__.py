"""archrule domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, ast, dataclasses, enum, pathlib, collections.abc
"""

from archrule.domain.exceptions import (
    ArchitectureViolationError,
    ArchRuleError,
    ConfigurationError,
    ExecutionError,
    ParsingError,
    SourceReadError,
)
from archrule.domain.model import (
    Candidate,
    CheckResult,
    CheckStats,
    Diagnostic,
    DiagnosticKind,
    FileResult,
    Location,
    RuleConfig,
    SourceUnit,
    Violation,
    ViolationKind,
)
from archrule.domain.ports import ReporterProtocol, RuleProtocol, SourceParserPort

__all__ = [
    # Exceptions
    "ArchRuleError",
    "ParsingError",
    "SourceReadError",
    "ConfigurationError",
    "ExecutionError",
    "ArchitectureViolationError",
    # Enums
    "ViolationKind",
    "DiagnosticKind",
    # Value objects
    "Location",
    "SourceUnit",
    "Candidate",
    "Diagnostic",
    "RuleConfig",
    # Aggregates
    "Violation",
    "FileResult",
    "CheckStats",
    "CheckResult",
    # Ports
    "SourceParserPort",
    "RuleProtocol",
    "ReporterProtocol",
]
