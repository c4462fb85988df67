"""CLI: list a user's repositories with their visibility."""

from __future__ import annotations

import typer

from ...core.errors import GitHubError
from ...services.listing import fetch_all
from ..common import build_client, fail, load_settings
from ..render import format_repo_table

app = typer.Typer(add_completion=False)


@app.command()
def repos(
    ctx: typer.Context,
    login: str = typer.Argument(..., help="GitHub user login"),
    page_size: int | None = typer.Option(None, "--page-size", min=1, max=100, help="Repositories per request"),
    max_pages: int | None = typer.Option(None, "--max-pages", min=1, help="Give up after this many pages"),
):
    """List LOGIN's repositories with visibility and description."""
    try:
        s = load_settings(ctx)
        client = build_client(s, login)
        records = fetch_all(
            client,
            login,
            page_size=page_size or s.page_size,
            max_pages=max_pages or s.max_pages,
        )
    except GitHubError as e:
        fail(e)

    for line in format_repo_table(records):
        typer.echo(line)
    typer.echo(f"{len(records)} repositories")
