from __future__ import annotations
import logging
from pathlib import Path

import typer
from rich.console import Console

from . import __version__
from .config import Settings
from .checks.default import default_checks
from .process import ProcessRunner
from .reporter import Reporter
from .runner import CheckRunner

app = typer.Typer(add_completion=False)


def _settings(cwd: Path | None, strict: bool, no_color: bool, verbose: bool) -> Settings:
    return Settings(cwd=cwd, strict=strict, color=not no_color, verbose=verbose)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger("precommit_check").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _version(value: bool) -> None:
    if value:
        typer.echo(f"precommit-check {__version__}")
        raise typer.Exit()


@app.command()
def main(
    cwd: Path | None = typer.Option(
        None, "--cwd", exists=True, file_okay=False, dir_okay=True, help="Directory to run every check in."
    ),
    strict: bool = typer.Option(False, "--strict", help="Exit 1 if any concurrent check failed, too."),
    list_only: bool = typer.Option(False, "--list", help="Print the configured checks and exit."),
    show_summary: bool = typer.Option(False, "--summary", help="Print a summary panel after the run."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log spawned commands to stderr."),
    version: bool = typer.Option(False, "--version", callback=_version, is_eager=True),
):
    """Run the formatter and compile gates, then the remaining checks concurrently."""
    settings = _settings(cwd, strict, no_color, verbose)
    _configure_logging(settings.verbose)
    console = Console(no_color=not settings.color, highlight=False)
    reporter = Reporter(console)
    sequential, concurrent = default_checks()

    if list_only:
        reporter.listing(sequential, concurrent)
        raise typer.Exit(code=0)

    runner = CheckRunner(ProcessRunner(settings), reporter, strict=settings.strict)
    outcome = runner.run(sequential, concurrent)
    if show_summary:
        reporter.summary(outcome)
    raise typer.Exit(code=outcome.exit_code)


if __name__ == "__main__":
    app()
