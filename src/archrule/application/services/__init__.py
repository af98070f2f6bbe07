"""Application services: per-file analysis, aggregation, facade."""

from archrule.application.services.aggregator import ViolationAggregator
from archrule.application.services.analyzer import UseCaseAnalyzer
from archrule.application.services.arch_checker import ArchRuleChecker

__all__ = [
    "ArchRuleChecker",
    "UseCaseAnalyzer",
    "ViolationAggregator",
]
