"""Method declaration selected for rule evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archrule.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class Candidate:
    """Method of a use-case class with a declared return type.

    Attributes:
        enclosing_type: Innermost enclosing class name
        method_name: Function/method name
        return_signature: Return annotation as source text, stripped
        location: Position of the method definition
    """

    enclosing_type: str
    method_name: str
    return_signature: str
    location: Location

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.enclosing_type:
            raise ValueError("enclosing_type must not be empty")
        if not self.method_name:
            raise ValueError("method_name must not be empty")
        if not self.return_signature:
            raise ValueError("return_signature must not be empty")

    def __str__(self) -> str:
        """Format as Class.method -> signature."""
        return f"{self.enclosing_type}.{self.method_name} -> {self.return_signature}"
