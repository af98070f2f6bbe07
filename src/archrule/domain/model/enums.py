"""Domain enumerations."""

from __future__ import annotations

from enum import Enum, auto


class ViolationKind(Enum):
    """Kind of architecture rule a violation belongs to.

    One member per rule. New rules add a member here; aggregation and
    reporting dispatch on the tag, not on the rule class.
    """

    EXPOSED_MODEL = auto()  # use case returns a domain model type


class DiagnosticKind(Enum):
    """Why a source file was skipped."""

    READ_ERROR = auto()  # file could not be read
    PARSE_ERROR = auto()  # file text is not valid Python
