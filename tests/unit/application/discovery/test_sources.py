"""Tests for application/discovery/sources.py."""

from pathlib import Path

import pytest

from archrule.application.discovery.sources import discover_sources, read_source
from archrule.domain.exceptions.execution import ExecutionError
from archrule.domain.exceptions.parsing import SourceReadError
from tests.factories import write_source


class TestDiscoverSources:
    """Tests for discover_sources."""

    def test_sorted_recursive(self, tmp_path: Path) -> None:
        write_source(tmp_path, "b.py", "")
        write_source(tmp_path, "a/z.py", "")
        write_source(tmp_path, "a/y.py", "")
        write_source(tmp_path, "notes.txt", "")

        found = discover_sources(tmp_path)

        assert [p.relative_to(tmp_path).as_posix() for p in found] == ["a/y.py", "a/z.py", "b.py"]

    def test_hidden_and_cache_skipped(self, tmp_path: Path) -> None:
        write_source(tmp_path, ".venv/lib/x_use_case.py", "")
        write_source(tmp_path, "__pycache__/cached.py", "")
        write_source(tmp_path, "pkg/.hidden.py", "")
        write_source(tmp_path, "pkg/mod.py", "")

        found = discover_sources(tmp_path)

        assert [p.name for p in found] == ["mod.py"]

    def test_exclude_patterns(self, tmp_path: Path) -> None:
        write_source(tmp_path, "app/main.py", "")
        write_source(tmp_path, "tests/test_main.py", "")

        found = discover_sources(tmp_path, exclude=("tests/*",))

        assert [p.name for p in found] == ["main.py"]

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert discover_sources(tmp_path) == ()

    def test_missing_root_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ExecutionError, match="source path does not exist"):
            discover_sources(tmp_path / "missing")

    def test_file_root_raises(self, tmp_path: Path) -> None:
        path = write_source(tmp_path, "a.py", "")
        with pytest.raises(ExecutionError, match="source path is not a directory"):
            discover_sources(path)


class TestReadSource:
    """Tests for read_source."""

    def test_reads_text(self, tmp_path: Path) -> None:
        path = write_source(tmp_path, "get_user_use_case.py", "class A:\n    pass\n")
        unit = read_source(path)
        assert unit.path == path
        assert unit.text == "class A:\n    pass\n"

    def test_missing_raises(self, tmp_path: Path) -> None:
        with pytest.raises(SourceReadError, match="file not found"):
            read_source(tmp_path / "missing_use_case.py")

    def test_invalid_encoding_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "bad_use_case.py"
        path.write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(SourceReadError, match="encoding error"):
            read_source(path)
