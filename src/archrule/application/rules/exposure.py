"""Model exposure rule.

A use-case method must not return a domain model type. Signatures are
unwrapped so that `Result[OrderEntity, Error]` is caught, and exemption
markers (`Response`, `DTO`) only clear the sub-signature they occur in.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from archrule.application.rules._base import BaseRule
from archrule.domain.model.enums import ViolationKind
from archrule.domain.model.violation import Violation
from archrule.infrastructure.analyzers.type_signature import (
    ends_with_word,
    signature_identifiers,
)

if TYPE_CHECKING:
    from archrule.domain.model.candidate import Candidate
    from archrule.domain.model.configuration import RuleConfig


def find_exposed_type(
    signature: str,
    model_types: Sequence[str],
    exemption_markers: Sequence[str],
) -> str | None:
    """Find the model type a return signature exposes.

    Algorithm:
        1. Expand signature into the outer expression plus every nested
           type argument (pre-order), each with the type identifiers it
           references
        2. For each candidate, find the first identifier denoting a model
           type (model types in configured order, identifiers in text order)
        3. If the same candidate contains an exemption marker, skip it
        4. First unsuppressed match wins

    Args:
        signature: Return annotation text
        model_types: Configured model-type names
        exemption_markers: Tokens marking data-transfer types

    Returns:
        Exposed identifier (e.g. "UserEntity"), None if no exposure

    Example:
        >>> find_exposed_type("Result[UserEntity, ErrorResponse]", ["Entity"], ["Response"])
        'UserEntity'
        >>> find_exposed_type("ProductResponse", ["Entity"], ["Response"])
    """
    for identifiers in signature_identifiers(signature):
        exposed = _first_model_identifier(identifiers, model_types)
        if exposed is None:
            continue

        if _has_marker(identifiers, exemption_markers):
            continue

        return exposed

    return None


def _first_model_identifier(
    identifiers: Sequence[str],
    model_types: Sequence[str],
) -> str | None:
    for model_type in model_types:
        for identifier in identifiers:
            if ends_with_word(identifier, model_type):
                return identifier
    return None


def _has_marker(identifiers: Sequence[str], markers: Sequence[str]) -> bool:
    return any(ends_with_word(identifier, marker) for identifier in identifiers for marker in markers)


class ModelExposureRule(BaseRule):
    """Use case returns a domain model object instead of a DTO.

    Stateless - configuration is passed to evaluate().
    """

    kind = ViolationKind.EXPOSED_MODEL

    def evaluate(
        self,
        candidate: Candidate,
        config: RuleConfig,
    ) -> Violation | None:
        exposed = find_exposed_type(
            candidate.return_signature,
            config.model_types,
            config.exemption_markers,
        )
        if exposed is None:
            return None

        return Violation(
            use_case_name=candidate.enclosing_type,
            method_name=candidate.method_name,
            exposed_type=exposed,
            return_signature=candidate.return_signature,
            location=candidate.location,
            kind=self.kind,
        )
