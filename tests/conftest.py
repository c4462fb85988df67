import logging

import pytest

from ghvis.core.types import Credentials

TOKEN_VARS = ("GHVIS_TOKEN", "GITHUB_AUTH_TOKEN", "GITHUB_TOKEN")


@pytest.fixture(autouse=True)
def _reset_ghvis_logging():
    yield
    logger = logging.getLogger("ghvis")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def clean_env(monkeypatch):
    """No token and no GHVIS_* overrides in the environment."""
    for name in TOKEN_VARS:
        monkeypatch.delenv(name, raising=False)
    for name in ("PAGE_SIZE", "MAX_PAGES", "HTTP_TIMEOUT", "GRAPHQL_ENDPOINT", "API_BASE", "LOG_LEVEL"):
        monkeypatch.delenv(f"GHVIS_{name}", raising=False)
    return monkeypatch


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(identity="octocat", token="s3cret-token")
