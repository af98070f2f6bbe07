"""Rule configuration.

Model-type names to protect and exemption markers that identify
data-transfer types. Loaded once per run, immutable afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MODEL_TYPES: tuple[str, ...] = (
    "Entity",
    "AggregateRoot",
    "ValueObject",
    "Model",
    "Domain",
)

DEFAULT_EXEMPTION_MARKERS: tuple[str, ...] = ("Response", "DTO")


@dataclass(frozen=True, slots=True)
class RuleConfig:
    """Immutable rule configuration with FAIL-FIRST validation.

    Order of model_types is significant: when a signature could match
    several names, the first configured one wins. No deduplication.

    Attributes:
        model_types: Model-type names (non-empty)
        exemption_markers: Tokens marking a data-transfer type
    """

    model_types: tuple[str, ...] = DEFAULT_MODEL_TYPES
    exemption_markers: tuple[str, ...] = DEFAULT_EXEMPTION_MARKERS

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.model_types, tuple):
            raise TypeError(f"model_types must be tuple, got {type(self.model_types).__name__}")
        if not isinstance(self.exemption_markers, tuple):
            raise TypeError(
                f"exemption_markers must be tuple, got {type(self.exemption_markers).__name__}"
            )
        if not self.model_types:
            raise ValueError("model_types must not be empty")
        for name in self.model_types:
            if not isinstance(name, str) or not name:
                raise ValueError(f"model type names must be non-empty strings, got {name!r}")
        for marker in self.exemption_markers:
            if not isinstance(marker, str) or not marker:
                raise ValueError(f"exemption markers must be non-empty strings, got {marker!r}")

    @classmethod
    def default(cls) -> RuleConfig:
        """Built-in configuration."""
        return cls()

    @property
    def is_default(self) -> bool:
        """Check if configuration equals the built-in one."""
        return self == RuleConfig()

    def to_dict(self) -> dict[str, list[str]]:
        """Serialize to the JSON file schema."""
        return {
            "modelTypes": list(self.model_types),
            "exemptionMarkers": list(self.exemption_markers),
        }
