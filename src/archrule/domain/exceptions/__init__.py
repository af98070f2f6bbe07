"""Domain exceptions."""

from archrule.domain.exceptions.base import ArchRuleError
from archrule.domain.exceptions.configuration import ConfigurationError
from archrule.domain.exceptions.execution import ExecutionError
from archrule.domain.exceptions.parsing import ParsingError, SourceFileError, SourceReadError
from archrule.domain.exceptions.violation import ArchitectureViolationError

__all__ = [
    "ArchRuleError",
    "SourceFileError",
    "ParsingError",
    "SourceReadError",
    "ConfigurationError",
    "ExecutionError",
    "ArchitectureViolationError",
]
