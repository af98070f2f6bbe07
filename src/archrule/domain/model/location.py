"""Position of a declaration in a source file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Location:
    """Where a method declaration starts.

    Attributes:
        file: Source file
        line: 1-based line of the `def`
        column: 0-based offset of the `def`
    """

    file: Path
    line: int
    column: int = 0

    def __post_init__(self) -> None:
        """FAIL-FIRST: reject positions the parser can never produce."""
        if self.file is None:
            raise TypeError("file must not be None")
        if self.line < 1:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")

    def __str__(self) -> str:
        """Editor-style `file:line:column`."""
        return f"{self.file}:{self.line}:{self.column}"
