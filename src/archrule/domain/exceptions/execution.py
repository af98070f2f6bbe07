"""Fatal execution exceptions."""

from __future__ import annotations

from archrule.domain.exceptions.base import ArchRuleError


class ExecutionError(ArchRuleError):
    """Run cannot proceed at all.

    Raised for infrastructure-level failures such as a missing or
    non-traversable source root. No partial report is produced.

    Attributes:
        reason: What went wrong (must not be empty)
    """

    def __init__(self, reason: str) -> None:
        if not reason:
            raise ValueError("reason must not be empty")

        self.reason = reason
        super().__init__(reason)
