"""AST-based source parser adapter.

Implements SourceParserPort using Python AST.
"""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from archrule.domain.exceptions.parsing import ParsingError
from archrule.domain.ports.source_parser import SourceParserPort

if TYPE_CHECKING:
    from archrule.domain.model.source_unit import SourceUnit


class ASTSourceParser(SourceParserPort):
    """Parser using Python AST.

    Stateless between parse() calls.

    FAIL-FIRST: raises ParsingError on any parsing issue.
    """

    def parse(self, source: SourceUnit) -> ast.Module:
        """Parse source text into module tree.

        Args:
            source: File text and path

        Returns:
            Parsed ast.Module

        Raises:
            ParsingError: If text has syntax errors or null bytes
        """
        try:
            return ast.parse(source.text, filename=str(source.path))
        except SyntaxError as e:
            raise ParsingError(source.path, f"syntax error: {e}") from e
        except ValueError as e:
            # null bytes in source on older interpreters
            raise ParsingError(source.path, str(e) or "invalid source") from e
