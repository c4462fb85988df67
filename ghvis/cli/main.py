"""CLI entrypoint that wires subcommands into a Typer app."""

from __future__ import annotations

import typer
from typer.core import TyperGroup

from .commands.change import app as change_app
from .commands.repos import app as repos_app

# Click's exit status for usage errors
_CLICK_USAGE_EXIT = 2


class _Group(TyperGroup):
    def resolve_command(self, ctx, args):
        # unknown command: show usage and exit 0
        name = args[0] if args else None
        if name and not name.startswith("-") and self.get_command(ctx, name) is None:
            typer.echo(ctx.get_help())
            ctx.exit(0)
        return super().resolve_command(ctx, args)


app = typer.Typer(
    cls=_Group,
    add_completion=False,
    pretty_exceptions_enable=False,
    help="List GitHub repositories and change their visibility.",
)


@app.callback()
def _root(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr"),
):
    ctx.obj = {"verbose": verbose}


app.add_typer(repos_app, help="List a user's repositories with visibility status")
app.add_typer(change_app, help="Change visibility of repositories")


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code (usage errors exit 1)."""
    try:
        app(args=argv, prog_name="ghvis")
    except SystemExit as e:
        code = e.code
        if code is None:
            return 0
        if not isinstance(code, int):
            typer.echo(str(code), err=True)
            return 1
        return 1 if code == _CLICK_USAGE_EXIT else code
    return 0
