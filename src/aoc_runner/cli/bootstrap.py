"""Bootstrap command: start the next puzzle."""

from typing import Optional

import typer

from . import app
from ._common import console, domain_errors, get_workspace


@app.command()
def bootstrap(
    ctx: typer.Context,
    year: Optional[str] = typer.Argument(None, help="Puzzle year (4 or 2 digits)"),
    day: Optional[str] = typer.Argument(None, help="Puzzle day; requires YEAR"),
):
    """
    Create solution and spec stubs for the next puzzle and fetch its
    instructions and input.

    [bold cyan]Examples:[/bold cyan]

      aoc bootstrap

      aoc bootstrap 2024

      aoc bootstrap 2024 3
    """
    workspace = get_workspace(ctx)

    with domain_errors():
        puzzle = workspace.locator.resolve(year, day, prefer_untracked_or_most_recently_done=False)
        if workspace.repository.has_pending_changes():
            console.print(
                "[yellow]Uncommitted changes in the workspace.[/yellow] "
                "Run [bold]aoc commit[/bold] when the previous puzzle is done."
            )

        created = workspace.scaffolder.bootstrap(puzzle)
        workspace.fetcher.fetch_instructions(puzzle)
        workspace.fetcher.fetch_input(puzzle)

    root = workspace.settings.root
    console.print(f"[bold cyan]{puzzle}[/bold cyan] is ready")
    for path in created:
        console.print(f"  created {path.relative_to(root)}", highlight=False)
    instructions = workspace.layout.instructions_path(puzzle)
    console.print(f"  instructions: {instructions.relative_to(root)}", highlight=False)
