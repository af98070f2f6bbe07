"""Use-case layer classification from file name and path."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

# File-name tokens marking a use-case module (CamelCase and snake_case)
USE_CASE_NAME_TOKENS: tuple[str, ...] = ("UseCase", "use_case")

# Both a core segment and a use-cases segment must appear in the path
CORE_SEGMENTS: frozenset[str] = frozenset({"Core", "core"})
USE_CASES_SEGMENTS: frozenset[str] = frozenset({"UseCases", "use_cases"})


def is_use_case_file(file_name: str, path_segments: Iterable[str]) -> bool:
    """Decide whether a file belongs to the use-case layer.

    True if the file name contains a use-case token, or the path holds
    both a core segment and a use-cases segment (in any order).
    Heuristic: false positives/negatives are accepted.

    Args:
        file_name: Last path component
        path_segments: Directory (and file) components of the path

    Returns:
        True if declarations in the file are subject to the rules

    Example:
        >>> is_use_case_file("LoginUseCase.py", ())
        True
        >>> is_use_case_file("auth.py", ("Core", "UseCases", "auth.py"))
        True
        >>> is_use_case_file("auth.py", ("Core", "auth.py"))
        False
    """
    if any(token in file_name for token in USE_CASE_NAME_TOKENS):
        return True

    segments = frozenset(path_segments)
    return bool(segments & CORE_SEGMENTS) and bool(segments & USE_CASES_SEGMENTS)


def is_use_case_path(path: Path) -> bool:
    """Classify a path. Convenience wrapper over is_use_case_file()."""
    return is_use_case_file(path.name, path.parts)
