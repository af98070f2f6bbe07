"""Main facade for architecture checking.

ArchRuleChecker is the primary entry point for running the analysis.
Composition-based: accepts configuration, rules and reporter.
"""

from __future__ import annotations

import concurrent.futures
import logging
import time
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Self

from archrule.application.discovery.sources import discover_sources
from archrule.application.rules import rules_from_config
from archrule.application.services.aggregator import ViolationAggregator
from archrule.application.services.analyzer import UseCaseAnalyzer
from archrule.domain.model.configuration import RuleConfig
from archrule.infrastructure.config.loader import load_config

if TYPE_CHECKING:
    from pathlib import Path

    from archrule.domain.model.check_result import CheckResult
    from archrule.domain.model.file_result import FileResult
    from archrule.domain.model.source_unit import SourceUnit
    from archrule.domain.ports.reporter import ReporterProtocol
    from archrule.domain.ports.rule import RuleProtocol

logger = logging.getLogger(__name__)


class ArchRuleChecker:
    """Main facade for architecture checking.

    Runs the per-file analyzer over sources, then the aggregator over
    the per-file results. Results are reported if a reporter is set.

    Example:
        checker = ArchRuleChecker.from_config_file(Path("arch-config.json"))
        result = checker.check(Path("src/myapp"))
        if not result.passed:
            print(f"Violations: {result.violation_count}")
    """

    def __init__(
        self,
        config: RuleConfig | None = None,
        *,
        rules: Sequence[RuleProtocol] | None = None,
        analyzer: UseCaseAnalyzer | None = None,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize checker with dependencies.

        Args:
            config: Rule configuration (default: built-in)
            rules: Rules to run (default: enabled by config)
            analyzer: Per-file analyzer
            reporter: Optional reporter for output
        """
        self._config = config if config is not None else RuleConfig.default()
        self._rules = tuple(rules) if rules is not None else rules_from_config(self._config)
        self._analyzer = analyzer if analyzer is not None else UseCaseAnalyzer()
        self._reporter = reporter

    @classmethod
    def from_config_file(
        cls,
        path: Path | None,
        *,
        reporter: ReporterProtocol | None = None,
    ) -> Self:
        """Create checker from a configuration file.

        Missing or malformed files fall back to the default configuration.

        Args:
            path: JSON configuration file, None for defaults
            reporter: Optional reporter

        Returns:
            ArchRuleChecker with loaded configuration
        """
        return cls(load_config(path), reporter=reporter)

    @property
    def config(self) -> RuleConfig:
        """Active configuration."""
        return self._config

    def check(
        self,
        root: Path,
        *,
        exclude: Sequence[str] = (),
        jobs: int = 1,
    ) -> CheckResult:
        """Discover and analyze all sources under root.

        With jobs > 1 files are analyzed on a thread pool; results are
        collected in discovery order, so output is identical to a
        sequential run.

        Args:
            root: Source root directory
            exclude: fnmatch patterns for root-relative paths to skip
            jobs: Worker count (1 = sequential)

        Returns:
            CheckResult with violations, diagnostics and stats

        Raises:
            ExecutionError: If root is missing or not a directory
            ValueError: If jobs < 1
        """
        if jobs < 1:
            raise ValueError(f"jobs must be >= 1, got {jobs}")

        start_time = time.perf_counter()

        paths = discover_sources(root, exclude)
        file_results = self._analyze_paths(paths, jobs)

        return self._finish(file_results, start_time)

    def check_sources(self, sources: Iterable[SourceUnit]) -> CheckResult:
        """Analyze in-memory sources in the given order.

        Args:
            sources: Source units (already read)

        Returns:
            CheckResult with violations, diagnostics and stats
        """
        start_time = time.perf_counter()
        file_results = [self._analyzer.analyze_source(source) for source in sources]
        return self._finish(file_results, start_time)

    def _analyze_paths(self, paths: Sequence[Path], jobs: int) -> list[FileResult]:
        if jobs == 1 or len(paths) <= 1:
            return [self._analyzer.analyze_path(path) for path in paths]

        logger.debug("Analyzing %d file(s) with %d worker(s)", len(paths), jobs)
        with concurrent.futures.ThreadPoolExecutor(max_workers=jobs) as executor:
            # map() yields in submission order regardless of completion order
            return list(executor.map(self._analyzer.analyze_path, paths))

    def _finish(self, file_results: Iterable[FileResult], start_time: float) -> CheckResult:
        aggregator = ViolationAggregator(self._rules, self._config)
        result = aggregator.aggregate(file_results)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        result = result.with_elapsed(elapsed_ms)

        logger.info(
            "Scanned %d file(s), analyzed %d use-case file(s), found %d violation(s)",
            result.stats.files_scanned,
            result.stats.use_case_files_analyzed,
            result.violation_count,
        )

        if self._reporter is not None:
            self._reporter.report(result)

        return result
