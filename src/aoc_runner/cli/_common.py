"""Shared CLI helpers."""

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import Settings, load_settings
from ..exceptions import ConfigError, InputError
from ..layout import PuzzleLayout
from ..locator import PuzzleLocator
from ..logging_config import get_logger
from ..orchestrator import RunOrchestrator
from ..puzzle_calendar import Clock, puzzle_today
from ..repository import GitBackend, RepositoryState, VersionControl
from ..scaffold import Scaffolder
from ..service import AdventClient, PuzzleFetcher
from ..specs import PytestEngine, SpecEngine, SpecRunner
from ..submission import SubmissionCoordinator

console = Console()
logger = get_logger(__name__)


def resolve_settings(
    config: Optional[Path] = None,
    path: Optional[Path] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> Settings:
    """Build settings from CLI options."""
    overrides = {}
    if path is not None:
        overrides["root"] = path.resolve()
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_settings(config_file=config, **overrides)


@dataclass
class Workspace:
    """Every collaborator a command needs, wired from one Settings object."""

    settings: Settings
    layout: PuzzleLayout
    backend: VersionControl
    repository: RepositoryState
    locator: PuzzleLocator
    fetcher: PuzzleFetcher
    spec_runner: SpecRunner
    orchestrator: RunOrchestrator
    coordinator: SubmissionCoordinator
    scaffolder: Scaffolder
    clock: Clock


def build_workspace(
    settings: Settings,
    backend: Optional[VersionControl] = None,
    engine: Optional[SpecEngine] = None,
    client_factory=None,
    clock: Clock = puzzle_today,
    **interaction,
) -> Workspace:
    """Wire collaborators; tests pass fakes for the outward-facing ones.

    ``interaction`` may carry ``prompt`` (locator) and ``confirm`` (coordinator).
    """
    layout = PuzzleLayout(settings)
    backend = backend or GitBackend(settings.root, timeout=settings.git_timeout)
    repository = RepositoryState(backend, layout)

    if client_factory is None:

        def client_factory() -> AdventClient:
            return AdventClient(
                settings.require_session(),
                base_url=settings.base_url,
                user_agent=settings.user_agent,
                timeout=settings.http_timeout,
            )

    fetcher = PuzzleFetcher(client_factory, layout)
    spec_runner = SpecRunner(engine or PytestEngine(settings.root), layout)

    locator_kwargs = {"prompt": interaction["prompt"]} if "prompt" in interaction else {}
    coordinator_kwargs = {"confirm": interaction["confirm"]} if "confirm" in interaction else {}

    return Workspace(
        settings=settings,
        layout=layout,
        backend=backend,
        repository=repository,
        locator=PuzzleLocator(repository, layout, clock=clock, **locator_kwargs),
        fetcher=fetcher,
        spec_runner=spec_runner,
        orchestrator=RunOrchestrator(spec_runner, fetcher.fetch_input),
        coordinator=SubmissionCoordinator(
            lambda: fetcher.client, fetcher, spec_runner, console, **coordinator_kwargs
        ),
        scaffolder=Scaffolder(layout),
        clock=clock,
    )


def get_workspace(ctx: typer.Context) -> Workspace:
    root = ctx.find_root()
    root.ensure_object(dict)
    if "workspace" not in root.obj:
        root.obj["workspace"] = build_workspace(root.obj["settings"])
    workspace = root.obj["workspace"]
    if not root.obj.get("fetcher_closes"):
        root.call_on_close(workspace.fetcher.close)
        root.obj["fetcher_closes"] = True
    return workspace


@contextmanager
def domain_errors() -> Iterator[None]:
    """Turn user-facing errors into a message and exit status 1.

    Anything else (network, test engine, filesystem) propagates unchanged.
    """
    try:
        yield
    except (InputError, ConfigError) as e:
        logger.debug("%s: %s", e.__class__.__name__, e)
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(130)
