from __future__ import annotations

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import (
    API_BASE,
    DEFAULT_MAX_PAGES,
    DEFAULT_PAGE_SIZE,
    GRAPHQL_ENDPOINT,
    HTTP_TIMEOUT_SEC,
    MAX_PAGE_SIZE,
)
from ..core.errors import ConfigError
from ..core.types import Credentials

# Load .env once, early
load_dotenv()

TOKEN_ENV_VARS = ("GHVIS_TOKEN", "GITHUB_AUTH_TOKEN", "GITHUB_TOKEN")


class Settings(BaseSettings):
    """Application config (env or .env)."""

    model_config = SettingsConfigDict(env_prefix="GHVIS_", env_file=None, extra="ignore", populate_by_name=True)

    github_token: str | None = Field(default=None, validation_alias=AliasChoices(*TOKEN_ENV_VARS), repr=False)
    graphql_endpoint: str = Field(default=GRAPHQL_ENDPOINT)
    api_base: str = Field(default=API_BASE)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    max_pages: int = Field(default=DEFAULT_MAX_PAGES, ge=1)
    http_timeout: float = Field(default=HTTP_TIMEOUT_SEC, gt=0)
    log_level: str = Field(default="WARNING")

    def credentials(self, login: str) -> Credentials:
        """Credentials for `login`; raises ConfigError when no token is configured."""
        if not self.github_token:
            raise ConfigError(f"no access token: set one of {', '.join(TOKEN_ENV_VARS)}")
        return Credentials(identity=login, token=self.github_token)


def get_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e
