"""Source parser port (interface)."""

from __future__ import annotations

import ast
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archrule.domain.model.source_unit import SourceUnit


class SourceParserPort(ABC):
    """Port for parsing source code.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def parse(self, source: SourceUnit) -> ast.Module:
        """Parse source text into a syntax tree.

        Args:
            source: File text and path

        Returns:
            Module syntax tree

        Raises:
            ParsingError: If text is not valid source
        """
        ...
