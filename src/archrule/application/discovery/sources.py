"""Source file discovery and reading."""

from __future__ import annotations

import fnmatch
import logging
from collections.abc import Sequence
from pathlib import Path

from archrule.domain.exceptions.execution import ExecutionError
from archrule.domain.exceptions.parsing import SourceReadError
from archrule.domain.model.source_unit import SourceUnit

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".py"


def discover_sources(root: Path, exclude: Sequence[str] = ()) -> tuple[Path, ...]:
    """Find analyzable source files under root.

    Recursively collects *.py files, skipping hidden entries (dot-prefixed),
    __pycache__ and paths matching any exclude pattern. Sorted so that
    the analysis order is reproducible.

    Args:
        root: Source root directory
        exclude: fnmatch patterns matched against the root-relative path

    Returns:
        Sorted tuple of file paths

    Raises:
        ExecutionError: If root does not exist or is not a directory
    """
    if not root.exists():
        raise ExecutionError(f"source path does not exist: {root}")
    if not root.is_dir():
        raise ExecutionError(f"source path is not a directory: {root}")

    try:
        found = sorted(root.rglob(f"*{SOURCE_SUFFIX}"))
    except OSError as e:
        raise ExecutionError(f"cannot traverse source path {root}: {e}") from e

    files: list[Path] = []
    for path in found:
        relative = path.relative_to(root)

        if any(part.startswith(".") or part == "__pycache__" for part in relative.parts):
            continue
        if not path.is_file():
            continue
        if exclude and any(fnmatch.fnmatch(relative.as_posix(), p) for p in exclude):
            logger.debug("Excluded %s", relative)
            continue

        files.append(path)

    logger.info("Discovered %d source file(s) under %s", len(files), root)
    return tuple(files)


def read_source(path: Path) -> SourceUnit:
    """Read a source file.

    Args:
        path: File to read

    Returns:
        SourceUnit with the file text

    Raises:
        SourceReadError: If the file cannot be read or decoded
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise SourceReadError(path, "file not found") from e
    except PermissionError as e:
        raise SourceReadError(path, "permission denied") from e
    except UnicodeDecodeError as e:
        raise SourceReadError(path, f"encoding error: {e}") from e
    except OSError as e:
        raise SourceReadError(path, str(e) or type(e).__name__) from e

    return SourceUnit(path=path, text=text)
