"""Rule protocol for architecture rules.

Users extend archrule by implementing this Protocol.
Rules evaluate one candidate at a time against configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self

if TYPE_CHECKING:
    from archrule.domain.model.candidate import Candidate
    from archrule.domain.model.configuration import RuleConfig
    from archrule.domain.model.enums import ViolationKind
    from archrule.domain.model.violation import Violation


class RuleProtocol(Protocol):
    """Contract for rules.

    Rules are stateless and check a single Candidate against config.

    Key pattern: from_config() returns None if rule should be disabled.

    Example:
        class MyRule:
            kind = ViolationKind.EXPOSED_MODEL

            def evaluate(
                self,
                candidate: Candidate,
                config: RuleConfig,
            ) -> Violation | None:
                ...

            @classmethod
            def from_config(cls, config: RuleConfig) -> Self | None:
                return cls()
    """

    kind: ViolationKind
    """Tag carried by every violation this rule produces."""

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
        ...

    @classmethod
    def from_config(cls, config: RuleConfig) -> Self | None:
        """Create rule from config.

        Args:
            config: Rule configuration

        Returns:
            Rule instance if enabled, None if disabled
        """
        ...
