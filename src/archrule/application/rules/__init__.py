"""Architecture rules evaluated against candidate methods."""

from archrule.application.rules._base import BaseRule
from archrule.application.rules._registry import rules_from_config
from archrule.application.rules.exposure import ModelExposureRule, find_exposed_type

__all__ = [
    "BaseRule",
    "ModelExposureRule",
    "find_exposed_type",
    "rules_from_config",
]
