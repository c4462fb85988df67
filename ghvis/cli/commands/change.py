"""CLI: batch-change repository visibility."""

from __future__ import annotations

from typing import List

import typer

from ...core.errors import GitHubError, UsageError, ValidationError
from ...services.visibility import change_visibility, parse_change_request
from ..common import build_client, fail, load_settings
from ..render import format_change_result, format_planned_change

app = typer.Typer(add_completion=False)


@app.command()
def change(
    ctx: typer.Context,
    login: str = typer.Argument(..., help="GitHub user login (owner of the repositories)"),
    requests: List[str] = typer.Argument(None, metavar="NAME:VISIBILITY...", help="e.g. my-repo:private"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Validate and print planned changes without calling the API"),
    strict: bool = typer.Option(False, "--strict", help="Exit 1 if any change failed"),
):
    """
    Set the visibility of one or more of LOGIN's repositories.
    Examples:
      ghvis change octocat hello-world:private
      ghvis change octocat a:public b:private --dry-run
    """
    if not requests:
        fail(UsageError("change needs at least one NAME:VISIBILITY argument"))

    if dry_run:
        bad = 0
        for token in requests:
            try:
                typer.echo(format_planned_change(parse_change_request(token)))
            except ValidationError as e:
                bad += 1
                typer.echo(f"[fail] {token}: {e}", err=True)
        if strict and bad:
            raise typer.Exit(code=1)
        return

    try:
        s = load_settings(ctx)
        client = build_client(s, login)
    except GitHubError as e:
        fail(e)

    results = change_visibility(client, login, requests)
    ok = 0
    for r in results:
        if r.succeeded:
            ok += 1
            typer.echo(format_change_result(r))
        else:
            typer.echo(format_change_result(r), err=True)
    typer.echo(f"Done. {ok}/{len(results)} succeeded.")

    if strict and ok < len(results):
        raise typer.Exit(code=1)
