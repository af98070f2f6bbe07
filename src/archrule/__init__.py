"""archrule - keep domain model objects behind the use-case boundary."""

__version__ = "0.1.0"

from archrule.application.services import ArchRuleChecker
from archrule.domain.model import CheckResult, RuleConfig, SourceUnit, Violation

__all__ = [
    "ArchRuleChecker",
    "CheckResult",
    "RuleConfig",
    "SourceUnit",
    "Violation",
    "__version__",
]
