"""Architecture violation exception."""

from __future__ import annotations

from typing import TYPE_CHECKING

from archrule.domain.exceptions.base import ArchRuleError

if TYPE_CHECKING:
    from archrule.domain.model.violation import Violation


class ArchitectureViolationError(ArchRuleError):
    """Use cases expose model objects.

    Raised only by assert_no_exposed_models(); the message lists one
    violation per line.

    Attributes:
        violations: Every reported violation, in report order
    """

    def __init__(self, violations: tuple[Violation, ...]) -> None:
        if not violations:
            raise ValueError("ArchitectureViolationError requires at least one violation")

        self.violations = violations

        header = f"Found {len(violations)} architecture violation(s):"
        super().__init__("\n".join([header, *map(str, violations)]))
