"""Rule violation entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from archrule.domain.model.enums import ViolationKind

if TYPE_CHECKING:
    from archrule.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class Violation:
    """Use case exposing a model type through its return signature.

    Equality is structural over kind, use case, method and exposed type.
    Location and full signature are carried for reporting only.

    Attributes:
        use_case_name: Enclosing use-case class name
        method_name: Offending method name
        exposed_type: Identifier of the exposed model type
        return_signature: Full return annotation text
        location: Method definition position
        kind: Rule kind tag
    """

    use_case_name: str
    method_name: str
    exposed_type: str
    return_signature: str = field(default="", compare=False)
    location: Location | None = field(default=None, compare=False)
    kind: ViolationKind = ViolationKind.EXPOSED_MODEL

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.use_case_name:
            raise ValueError("use_case_name must not be empty")
        if not self.method_name:
            raise ValueError("method_name must not be empty")
        if not self.exposed_type:
            raise ValueError("exposed_type must not be empty")
        if not isinstance(self.kind, ViolationKind):
            raise TypeError(f"kind must be ViolationKind, got {type(self.kind).__name__}")

    @property
    def message(self) -> str:
        """Human-readable description."""
        match self.kind:
            case ViolationKind.EXPOSED_MODEL:
                return (
                    f"UseCase '{self.use_case_name}' exposes model object "
                    f"'{self.exposed_type}' in method '{self.method_name}'"
                )

    def __str__(self) -> str:
        """Format violation for display."""
        if self.location is None:
            return self.message
        return f"{self.location}: {self.message}"
