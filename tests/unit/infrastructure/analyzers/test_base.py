"""Tests for infrastructure/analyzers/base.py."""

import ast
from pathlib import Path

import pytest

from archrule.infrastructure.analyzers.base import (
    is_void_annotation,
    make_location,
    unparse_node,
)


def _returns(code: str) -> ast.expr:
    func = ast.parse(code).body[0]
    assert isinstance(func, ast.FunctionDef)
    assert func.returns is not None
    return func.returns


class TestMakeLocation:
    """Tests for make_location function."""

    def test_valid_node(self) -> None:
        node = ast.parse("x = 1").body[0]
        loc = make_location(node, Path("test.py"))
        assert loc.file == Path("test.py")
        assert loc.line == 1
        assert loc.column == 0

    def test_indented_node(self) -> None:
        tree = ast.parse("class A:\n    def f(self): pass\n")
        cls = tree.body[0]
        assert isinstance(cls, ast.ClassDef)
        loc = make_location(cls.body[0], Path("test.py"))
        assert loc.line == 2
        assert loc.column == 4


class TestUnparseNode:
    """Tests for unparse_node function."""

    def test_generic(self) -> None:
        assert unparse_node(_returns("def f() -> list[UserEntity]: pass")) == "list[UserEntity]"

    def test_string_annotation(self) -> None:
        assert unparse_node(_returns("def f() -> 'UserEntity': pass")) == "'UserEntity'"


class TestIsVoidAnnotation:
    """Tests for is_void_annotation function."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("def f() -> None: pass", True),
            ("def f() -> 'None': pass", True),
            ("def f() -> UserEntity: pass", False),
            ("def f() -> UserEntity | None: pass", False),
            ("def f() -> Optional[None]: pass", False),
        ],
    )
    def test_void(self, code: str, expected: bool) -> None:
        assert is_void_annotation(_returns(code)) is expected
