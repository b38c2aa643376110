"""Progress command: committed solutions per year."""

import typer

from ..progress import collect_progress, progress_table
from . import app
from ._common import console, get_workspace


@app.command()
def progress(ctx: typer.Context):
    """
    Show which days have a committed solution, per year.
    """
    workspace = get_workspace(ctx)
    committed = workspace.repository.committed_days_by_year()
    rows = collect_progress(committed, workspace.clock())
    console.print(progress_table(rows))
