"""Console reporter: CheckResult → rich formatted output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from archrule.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from archrule.domain.model.check_result import CheckResult
    from archrule.domain.model.diagnostic import Diagnostic
    from archrule.domain.model.violation import Violation


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_signature: Add the full return signature column.
        show_diagnostics: Show skipped-files section.
        max_violations: Max violations to display. None = unlimited.
    """

    show_signature: bool = True
    show_diagnostics: bool = True
    max_violations: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_violations is not None and self.max_violations < 0:
            raise ValueError(f"max_violations must be >= 0, got {self.max_violations}")


class ConsoleReporter(BaseReporter):
    """Console reporter: tables and colors via rich.

    Writes to the given Console; caller decides terminal or capture.
    """

    def __init__(
        self,
        console: Console | None = None,
        config: ConsoleConfig | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            console: Rich console (default: stdout console)
            config: Reporter configuration. Uses defaults if None.
        """
        self._console = console if console is not None else Console()
        self._config = config or ConsoleConfig()

    def report(self, result: CheckResult) -> None:
        """Render check result.

        Args:
            result: Complete check result
        """
        self._render_header(result)

        if result.violations:
            self._render_violations(result.violations)

        if self._config.show_diagnostics and result.diagnostics:
            self._render_diagnostics(result.diagnostics)

        self._render_footer(result)

    def _render_header(self, result: CheckResult) -> None:
        stats = result.stats
        self._console.print()
        self._console.rule("[bold]ARCHITECTURE RULE CHECK[/bold]")
        self._console.print()
        self._console.print(
            f"[bold]Files:[/bold] {stats.files_scanned}  "
            f"[bold]Use cases:[/bold] {stats.use_case_files_analyzed}  "
            f"[bold]Violations:[/bold] {result.violation_count}  "
            f"[dim]({stats.analysis_time_ms:.1f} ms)[/dim]"
        )
        self._console.print()

    def _render_violations(self, violations: tuple[Violation, ...]) -> None:
        shown = violations
        if self._config.max_violations is not None:
            shown = violations[: self._config.max_violations]

        table = Table(title="Exposed model objects", title_justify="left")
        table.add_column("Location", style="dim")
        table.add_column("Use case", style="cyan")
        table.add_column("Method", style="cyan")
        table.add_column("Exposed type", style="bold red")
        if self._config.show_signature:
            table.add_column("Returns")

        for violation in shown:
            location = str(violation.location) if violation.location is not None else "?"
            row = [location, violation.use_case_name, violation.method_name, violation.exposed_type]
            if self._config.show_signature:
                row.append(violation.return_signature)
            table.add_row(*row)

        self._console.print(table)

        hidden = len(violations) - len(shown)
        if hidden:
            self._console.print(f"[dim]... {hidden} more violation(s) not shown[/dim]")
        self._console.print()

    def _render_diagnostics(self, diagnostics: tuple[Diagnostic, ...]) -> None:
        self._console.print(f"[bold yellow]SKIPPED FILES[/bold yellow] ({len(diagnostics)})")
        for diagnostic in diagnostics:
            self._console.print(
                f"  [{diagnostic.kind.name}] {diagnostic.path}: {diagnostic.message}",
                markup=False,
            )
        self._console.print()

    def _render_footer(self, result: CheckResult) -> None:
        if result.passed:
            self._console.print("[bold green]PASSED[/bold green]")
        else:
            self._console.print(f"[bold red]FAILED[/bold red] ({result.violation_count} violation(s))")
