"""Helpers shared by the CLI commands."""

from __future__ import annotations

from typing import NoReturn

import typer

from ..config.settings import Settings, get_settings
from ..core.github_client import GitHubClient
from ..logging import configure_logging
from .render import format_error_chain


def load_settings(ctx: typer.Context) -> Settings:
    """Read settings and configure logging (`--verbose` wins over GHVIS_LOG_LEVEL)."""
    s = get_settings()
    verbose = bool((ctx.obj or {}).get("verbose"))
    configure_logging("DEBUG" if verbose else s.log_level)
    return s


def build_client(s: Settings, login: str) -> GitHubClient:
    return GitHubClient(
        s.credentials(login),
        graphql_endpoint=s.graphql_endpoint,
        api_base=s.api_base,
        timeout=s.http_timeout,
    )


def fail(exc: BaseException) -> NoReturn:
    for line in format_error_chain(exc):
        typer.echo(line, err=True)
    raise typer.Exit(code=1)
