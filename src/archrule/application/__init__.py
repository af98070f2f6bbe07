"""Application layer for architecture analysis.

Components:
- discovery: Source discovery and use-case layer classification
- rules: Architecture rules (model exposure)
- services: Per-file analyzer, aggregator, main facade (ArchRuleChecker)
- reporters: Output formatting (PlainText, JSON, rich Console)
"""

from archrule.application.discovery import (
    discover_sources,
    is_use_case_file,
    is_use_case_path,
    read_source,
)
from archrule.application.reporters import (
    BaseReporter,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from archrule.application.rules import (
    BaseRule,
    ModelExposureRule,
    find_exposed_type,
    rules_from_config,
)
from archrule.application.services import (
    ArchRuleChecker,
    UseCaseAnalyzer,
    ViolationAggregator,
)

__all__ = [
    # Discovery
    "discover_sources",
    "is_use_case_file",
    "is_use_case_path",
    "read_source",
    # Rules
    "BaseRule",
    "ModelExposureRule",
    "find_exposed_type",
    "rules_from_config",
    # Reporters
    "BaseReporter",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
    # Services
    "ArchRuleChecker",
    "UseCaseAnalyzer",
    "ViolationAggregator",
]
