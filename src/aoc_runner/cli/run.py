"""Run command: specs, real input, submission."""

from typing import Optional

import typer

from ..ledger import AnswerLedger
from ..models import AnswerState, RunAnswers, RunFlags
from ..orchestrator import SolutionFile
from . import app
from ._common import console, domain_errors, get_workspace


@app.command()
def run(
    ctx: typer.Context,
    year: Optional[str] = typer.Argument(None, help="Puzzle year (4 or 2 digits)"),
    day: Optional[str] = typer.Argument(None, help="Puzzle day; requires YEAR"),
    spec: bool = typer.Option(False, "--spec", help="Only run the specs, verbosely"),
    real_part_1: bool = typer.Option(
        False, "--real-part-1", help="Run part one on the real input regardless of state"
    ),
    real_part_2: bool = typer.Option(
        False, "--real-part-2", help="Run part two on the real input regardless of state"
    ),
):
    """
    Run the current puzzle: specs first, then the real input, then submit.

    Without arguments the puzzle is the untracked solution you are working
    on, or else the most recently committed one.

    [bold cyan]Examples:[/bold cyan]

      aoc run

      aoc run 2023 5 --real-part-2

      aoc run --spec
    """
    workspace = get_workspace(ctx)

    with domain_errors():
        flags = RunFlags(spec_only=spec, force_part_one=real_part_1, force_part_two=real_part_2)
        puzzle = workspace.locator.resolve(year, day, prefer_untracked_or_most_recently_done=True)
        console.print(f"[bold cyan]{puzzle}[/bold cyan]")

        if flags.spec_only:
            known = AnswerState()
        else:
            known = AnswerLedger.load(workspace.fetcher.fetch_instructions(puzzle))

        solution = SolutionFile(workspace.layout.solution_path(puzzle), puzzle)
        answers = workspace.orchestrator.orchestrate(puzzle, flags, known, solution)

        if answers.empty:
            return
        _print_answers(answers, known)

        part, candidate = answers.submission_target(known)
        workspace.coordinator.submit_if_confirmed(puzzle, part, candidate, known)


def _print_answers(answers: RunAnswers, known: AnswerState) -> None:
    for part, value in ((1, answers.answer_one), (2, answers.answer_two)):
        if value is None:
            continue
        confirmed = known.answer(part)
        if confirmed is None:
            note = ""
        elif confirmed == value:
            note = " [green](correct)[/green]"
        else:
            note = f" [red](expected {confirmed})[/red]"
        console.print(f"Part {part}: [bold]{value}[/bold]{note}", highlight=False)
