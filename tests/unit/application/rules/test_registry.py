"""Tests for application/rules/_registry.py."""

from archrule.application.rules import rules_from_config
from archrule.application.rules.exposure import ModelExposureRule
from archrule.domain.model.configuration import RuleConfig


class TestRegistry:
    """Rule instantiation."""

    def test_rules_from_config(self) -> None:
        rules = rules_from_config(RuleConfig.default())
        assert [type(r) for r in rules] == [ModelExposureRule]
