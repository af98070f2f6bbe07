"""Command-line interface (thin adapter over ArchRuleChecker).

Exit status:
    0: no violations
    1: violations found
    2: execution error (bad source path, unexpected failure)
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from archrule import __version__
from archrule.application.reporters import ConsoleReporter, JSONReporter, PlainTextReporter
from archrule.application.reporters._base import BaseReporter
from archrule.application.services import ArchRuleChecker
from archrule.domain.exceptions import ArchRuleError
from archrule.domain.model.check_result import EXIT_ERROR
from archrule.infrastructure.config import (
    CONFIG_FILE_NAME,
    find_config_file,
    load_config,
    resolve_config_location,
    write_default_config,
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="archrule",
    help="Check that use cases never return domain model objects directly.",
    add_completion=False,
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """Report format for the check command."""

    TEXT = "text"
    JSON = "json"
    RICH = "rich"


def configure_logging(verbose: bool, console: Console | None = None) -> None:
    """Route archrule logs to stderr through rich.

    Args:
        verbose: INFO level when True, WARNING otherwise
        console: Target console (default: stderr)
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger("archrule")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(logging.INFO if verbose else logging.WARNING)
    package_logger.propagate = False


def make_reporter(output_format: OutputFormat) -> BaseReporter:
    """Reporter for the requested format."""
    match output_format:
        case OutputFormat.JSON:
            return JSONReporter()
        case OutputFormat.RICH:
            return ConsoleReporter()
        case _:
            return PlainTextReporter()


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"archrule {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """archrule: use-case boundary checker."""


@app.command()
def check(
    source_path: Path = typer.Option(
        Path("."),
        "--source-path",
        "-s",
        help="Directory containing the source code to analyze.",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config-path",
        "-c",
        help=f"Configuration file (default: search {CONFIG_FILE_NAME} locations).",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format",
        "-f",
        case_sensitive=False,
        help="Report format.",
    ),
    jobs: int = typer.Option(1, "--jobs", "-j", min=1, help="Parallel worker count."),
    exclude: list[str] = typer.Option(
        [],
        "--exclude",
        "-e",
        help="Glob for source-relative paths to skip (repeatable).",
    ),
    work_dir: Path | None = typer.Option(
        None,
        "--work-dir",
        "-w",
        help=f"Directory where a default {CONFIG_FILE_NAME} is created when none is found.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress."),
) -> None:
    """Analyze SOURCE_PATH and report use cases exposing model types."""
    configure_logging(verbose)

    if config_path is None:
        config_path = _locate_config(work_dir)

    checker = ArchRuleChecker(load_config(config_path), reporter=make_reporter(output_format))

    try:
        result = checker.check(source_path, exclude=tuple(exclude), jobs=jobs)
    except ArchRuleError as e:
        logger.error("%s", e)
        raise typer.Exit(EXIT_ERROR) from e

    raise typer.Exit(result.exit_code)


def _locate_config(work_dir: Path | None) -> Path | None:
    """Existing configuration, or the default one written to work_dir."""
    if work_dir is None:
        return find_config_file(Path.cwd())

    try:
        return resolve_config_location(Path.cwd(), work_dir)
    except OSError as e:
        logger.error("Cannot write default configuration to %s: %s", work_dir, e)
        raise typer.Exit(EXIT_ERROR) from e


@app.command("init-config")
def init_config(
    directory: Path = typer.Option(
        Path("."),
        "--directory",
        "-d",
        help="Directory to write the configuration file into.",
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file."),
) -> None:
    """Write the default configuration file."""
    configure_logging(verbose=False)
    target = directory / CONFIG_FILE_NAME

    try:
        written = write_default_config(target, overwrite=force)
    except OSError as e:
        logger.error("Cannot write %s: %s", target, e)
        raise typer.Exit(EXIT_ERROR) from e

    if written:
        typer.echo(f"Created default configuration at {target}")
    else:
        typer.echo(f"Configuration already exists at {target} (use --force to overwrite)")


def main() -> None:
    """Console script entry point."""
    try:
        app()
    except ArchRuleError as e:
        logger.error("%s", e)
        raise SystemExit(EXIT_ERROR) from e
    except Exception as e:
        # exit 1 is reserved for findings
        logger.exception("Unexpected failure")
        raise SystemExit(EXIT_ERROR) from e
