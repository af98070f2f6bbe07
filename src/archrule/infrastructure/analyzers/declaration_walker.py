"""Declaration walker: syntax tree -> candidates."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from archrule.domain.model.candidate import Candidate
from archrule.infrastructure.analyzers.base import (
    is_void_annotation,
    make_location,
    unparse_node,
)
from archrule.infrastructure.analyzers.context import AnalysisContext

if TYPE_CHECKING:
    from pathlib import Path


class DeclarationWalker:
    """Extracts candidate methods from a module syntax tree.

    Stateless walker - no state between walk() calls.
    """

    def walk(self, tree: ast.Module, path: Path) -> tuple[Candidate, ...]:
        """Traverse tree depth-first, pre-order, without pruning.

        A function yields a Candidate when it is nested in at least one
        class and declares a non-None return annotation. The innermost
        class is the enclosing type. Module-level functions are skipped.

        Args:
            tree: Parsed module
            path: Source file path (for locations)

        Returns:
            Candidates in traversal order

        Raises:
            TypeError: If tree is not an ast.Module (FAIL-FIRST)
        """
        if not isinstance(tree, ast.Module):
            raise TypeError(f"tree must be ast.Module, got {type(tree).__name__}")

        visitor = _CandidateVisitor(path)
        visitor.visit(tree)
        return tuple(visitor.candidates)


class _CandidateVisitor(ast.NodeVisitor):
    """Single-use visitor holding the class stack for one walk."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._context = AnalysisContext()
        self.candidates: list[Candidate] = []

    def visit_ClassDef(self, node: ast.ClassDef) -> None:
        self._context.push(node.name)
        self.generic_visit(node)
        self._context.pop()

    def visit_FunctionDef(self, node: ast.FunctionDef | ast.AsyncFunctionDef) -> None:
        self._record(node)
        self.generic_visit(node)

    visit_AsyncFunctionDef = visit_FunctionDef

    def _record(self, node: ast.FunctionDef | ast.AsyncFunctionDef) -> None:
        enclosing = self._context.current_class
        if enclosing is None or node.returns is None:
            return
        if is_void_annotation(node.returns):
            return

        signature = unparse_node(node.returns).strip()
        if not signature:
            return

        self.candidates.append(
            Candidate(
                enclosing_type=enclosing,
                method_name=node.name,
                return_signature=signature,
                location=make_location(node, self._path),
            )
        )
