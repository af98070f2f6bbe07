"""Source file handed to the engine."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class SourceUnit:
    """Raw text of one source file plus its path.

    Attributes:
        path: File path (name and directory segments feed layer classification)
        text: Full file contents
    """

    path: Path
    text: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if self.text is None:
            raise TypeError("text must not be None")

    @property
    def file_name(self) -> str:
        """Last path component."""
        return self.path.name

    @property
    def segments(self) -> tuple[str, ...]:
        """All path components, file name included."""
        return self.path.parts
