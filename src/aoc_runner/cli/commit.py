"""Commit command: record a finished puzzle."""

from typing import Optional

import typer

from . import app
from ._common import console, domain_errors, get_workspace


@app.command()
def commit(
    ctx: typer.Context,
    year: Optional[str] = typer.Argument(None, help="Puzzle year (4 or 2 digits)"),
    day: Optional[str] = typer.Argument(None, help="Puzzle day; requires YEAR"),
):
    """
    Commit the puzzle's solution, spec, input and instructions files.
    """
    workspace = get_workspace(ctx)

    with domain_errors():
        puzzle = workspace.locator.resolve(year, day, prefer_untracked_or_most_recently_done=True)

    if not workspace.repository.has_pending_changes():
        console.print("[yellow]Nothing to commit.[/yellow]")
        raise typer.Exit(0)

    root = workspace.settings.root
    paths = [p.relative_to(root) for p in workspace.layout.puzzle_files(puzzle)]
    message = f"{puzzle.year} day {puzzle.day:02d}"
    workspace.backend.commit(message, paths)
    console.print(f"Committed [bold]{message}[/bold]")
