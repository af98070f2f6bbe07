"""Base utilities for AST analyzers."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from archrule.domain.model.location import Location

if TYPE_CHECKING:
    from pathlib import Path


def make_location(node: ast.stmt | ast.expr, path: Path) -> Location:
    """Create Location from AST node.

    Args:
        node: AST node with position info (statement or expression)
        path: Source file path

    Returns:
        Location pointing to node
    """
    return Location(file=path, line=node.lineno, column=node.col_offset)


def unparse_node(node: ast.expr) -> str:
    """Convert AST expression to source string.

    Args:
        node: AST expression node

    Returns:
        Source code representation
    """
    return ast.unparse(node)


def is_void_annotation(node: ast.expr) -> bool:
    """Check if return annotation declares no value (`-> None`).

    Both the bare constant and its string form count.
    """
    match node:
        case ast.Constant(value=None):
            return True
        case ast.Constant(value="None"):
            return True
    return False
