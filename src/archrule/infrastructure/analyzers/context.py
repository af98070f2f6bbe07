"""Class scope stack used while walking a module tree."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class AnalysisContext:
    """Stack of open class scopes.

    The walker pushes on entering a class and pops on leaving it,
    so after a nested class is left the enclosing class is current again.
    Mutable, one instance per walk.
    """

    _classes: list[str] = field(default_factory=list)

    def push(self, name: str) -> None:
        """Open a class scope.

        Raises:
            ValueError: If name is empty (FAIL-FIRST)
        """
        if not name:
            raise ValueError("class context requires name")
        self._classes.append(name)

    def pop(self) -> str:
        """Close the innermost class scope and return its name.

        Raises:
            IndexError: If no scope is open
        """
        if not self._classes:
            raise IndexError("cannot pop from empty context stack")
        return self._classes.pop()

    @property
    def current_class(self) -> str | None:
        """Innermost open class, None at module level."""
        return self._classes[-1] if self._classes else None
