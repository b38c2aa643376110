"""CLI entry point: registers all subcommands."""

import typer
from typer.core import TyperGroup


class DefaultCommandGroup(TyperGroup):
    """Falls back to ``run`` when no subcommand is named.

    ``aoc``, ``aoc 2023 5`` and ``aoc --spec`` all mean ``aoc run ...``.
    Global options may still come first: ``aoc -v 2023 5``.
    """

    default_command = "run"

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        return super().parse_args(ctx, self._with_default_command(ctx, args))

    def _global_options(self, ctx: typer.Context) -> tuple[set[str], set[str]]:
        """Names of the group's own options, split into flags and valued options."""
        flags: set[str] = set()
        valued: set[str] = set()
        for param in self.get_params(ctx):
            if getattr(param, "param_type_name", None) != "option":
                continue
            names = [*param.opts, *param.secondary_opts]
            is_flag = getattr(param, "is_flag", False) or getattr(param, "count", False)
            (flags if is_flag else valued).update(names)
        return flags, valued

    def _with_default_command(self, ctx: typer.Context, args: list[str]) -> list[str]:
        flags, valued = self._global_options(ctx)

        index = 0
        while index < len(args):
            arg = args[index]
            if arg in flags:
                index += 1
            elif arg in valued:
                index += 2
            elif arg.startswith("--") and arg.split("=", 1)[0] in valued:
                index += 1
            else:
                break

        if index < len(args) and args[index] in self.commands:
            return args
        return [*args[:index], self.default_command, *args[index:]]


app = typer.Typer(
    name="aoc",
    cls=DefaultCommandGroup,
    help="aoc-runner - resolve, test, run and submit the current daily puzzle",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .main import main as _main_callback  # noqa: F401, E402
from .run import run as _run  # noqa: F401, E402
from .bootstrap import bootstrap as _bootstrap  # noqa: F401, E402
from .progress import progress as _progress  # noqa: F401, E402
from .commit import commit as _commit  # noqa: F401, E402


def main() -> None:
    app()
