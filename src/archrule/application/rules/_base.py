"""Base rule class for architecture rules.

Provides default implementation of RuleProtocol.
Concrete rules inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from archrule.domain.model.candidate import Candidate
    from archrule.domain.model.configuration import RuleConfig
    from archrule.domain.model.enums import ViolationKind
    from archrule.domain.model.violation import Violation


class BaseRule(ABC):
    """Base class for rules implementing RuleProtocol.

    Concrete rules must:
    1. Set `kind` class attribute
    2. Implement `evaluate()` method
    3. Optionally override `from_config()` for conditional activation
    """

    kind: ViolationKind
    """Tag carried by every violation this rule produces."""

    @abstractmethod
    def evaluate(
        self,
        candidate: Candidate,
        config: RuleConfig,
    ) -> Violation | None:
        """Evaluate candidate and return violation if rule is broken.

        Args:
            candidate: Method declaration with return signature
            config: Rule configuration

        Returns:
            Violation, or None if candidate complies
        """

    @classmethod
    def from_config(cls, config: RuleConfig) -> Self | None:
        """Create rule from config.

        Default: always enabled (returns new instance).

        Args:
            config: Rule configuration

        Returns:
            Rule instance if enabled, None if disabled
        """
        return cls()
