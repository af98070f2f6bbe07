"""Rule registry.

Central registry of all rules with the config-driven factory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from archrule.application.rules._base import BaseRule
from archrule.application.rules.exposure import ModelExposureRule
from archrule.domain.ports.rule import RuleProtocol

if TYPE_CHECKING:
    from archrule.domain.model.configuration import RuleConfig


# Order matters: rules are run in this order for every candidate
_ALL_RULES: tuple[type[BaseRule], ...] = (
    ModelExposureRule,  # Always enabled
)


def rules_from_config(config: RuleConfig) -> tuple[RuleProtocol, ...]:
    """Instantiate rules based on config.

    Rules are created using their from_config() factory method.
    If from_config() returns None, the rule is disabled.

    Args:
        config: Rule configuration

    Returns:
        Tuple of enabled rules
    """
    rules: list[RuleProtocol] = []

    for rule_cls in _ALL_RULES:
        rule = rule_cls.from_config(config)
        if rule is not None:
            rules.append(rule)

    return tuple(rules)
