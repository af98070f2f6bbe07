"""Per-file analysis: classify, parse, walk.

Read and parse failures are recovered here: the file is skipped with a
warning and a Diagnostic, and the run continues.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from archrule.application.discovery.layers import is_use_case_file, is_use_case_path
from archrule.application.discovery.sources import read_source
from archrule.domain.exceptions.parsing import ParsingError, SourceReadError
from archrule.domain.model.diagnostic import Diagnostic
from archrule.domain.model.enums import DiagnosticKind
from archrule.domain.model.file_result import FileResult
from archrule.infrastructure.adapters.ast_parser import ASTSourceParser
from archrule.infrastructure.analyzers.declaration_walker import DeclarationWalker

if TYPE_CHECKING:
    from pathlib import Path

    from archrule.domain.model.source_unit import SourceUnit
    from archrule.domain.ports.source_parser import SourceParserPort

logger = logging.getLogger(__name__)


class UseCaseAnalyzer:
    """Turns one source file into a FileResult.

    Stateless between calls; safe to share across worker threads.
    """

    def __init__(
        self,
        parser: SourceParserPort | None = None,
        walker: DeclarationWalker | None = None,
    ) -> None:
        """Initialize analyzer.

        Args:
            parser: Source parser (default: ASTSourceParser)
            walker: Declaration walker (default: DeclarationWalker)
        """
        self._parser = parser if parser is not None else ASTSourceParser()
        self._walker = walker if walker is not None else DeclarationWalker()

    def analyze_source(self, source: SourceUnit) -> FileResult:
        """Analyze in-memory source.

        Non-use-case files are returned unanalyzed (never parsed).

        Args:
            source: File text and path

        Returns:
            FileResult with candidates, or with a PARSE_ERROR diagnostic
        """
        if not is_use_case_file(source.file_name, source.segments):
            return FileResult(path=source.path, is_use_case=False)

        try:
            tree = self._parser.parse(source)
        except ParsingError as e:
            logger.warning("Skipping %s: %s", source.path, e.reason)
            return FileResult(
                path=source.path,
                is_use_case=True,
                diagnostic=Diagnostic(source.path, DiagnosticKind.PARSE_ERROR, e.reason),
            )

        candidates = self._walker.walk(tree, source.path)
        logger.debug("%s: %d candidate(s)", source.path, len(candidates))
        return FileResult(path=source.path, is_use_case=True, candidates=candidates)

    def analyze_path(self, path: Path) -> FileResult:
        """Analyze a file on disk.

        Only use-case files are read.

        Args:
            path: Source file

        Returns:
            FileResult, with a READ_ERROR diagnostic if reading failed
        """
        if not is_use_case_path(path):
            return FileResult(path=path, is_use_case=False)

        try:
            source = read_source(path)
        except SourceReadError as e:
            logger.warning("Skipping %s: %s", path, e.reason)
            return FileResult(
                path=path,
                is_use_case=True,
                diagnostic=Diagnostic(path, DiagnosticKind.READ_ERROR, e.reason),
            )

        return self.analyze_source(source)
