"""Global options shared by every command."""

from pathlib import Path
from typing import Optional

import typer

from ..logging_config import setup_logging
from . import app
from ._common import console, domain_errors, resolve_settings


def _show_version(value: bool) -> None:
    if value:
        from .. import __version__

        console.print(f"[bold cyan]aoc-runner[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    path: Optional[Path] = typer.Option(
        None,
        "-C",
        "--path",
        help="Puzzle workspace root (default: current directory)",
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every decision the runner makes",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_show_version,
        is_eager=True,
    ),
):
    """
    Resolve the puzzle you are working on, gate it on its specs, run it on
    the real input and submit the answer.

    Without a command, [bold]run[/bold] is assumed.

    [bold cyan]Examples:[/bold cyan]

      aoc

      aoc 2023 5 --spec

      aoc bootstrap 2024

      aoc progress
    """
    ctx.ensure_object(dict)
    if "workspace" in ctx.obj:
        return

    with domain_errors():
        settings = resolve_settings(config=config, path=path, verbose=verbose, quiet=quiet)
    setup_logging(settings.verbosity)
    ctx.obj["settings"] = settings
