"""Small types and Enums used by ghvis."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Visibility(str, Enum):
    """Repository visibility as reported by the API."""

    public = "public"
    private = "private"
    internal = "internal"


# visibilities a change request may ask for
CHANGEABLE = (Visibility.public, Visibility.private)


class _Wire(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class RepositoryRecord(_Wire):
    name: str = Field(min_length=1)
    visibility: Visibility
    description: str | None = None

    @field_validator("visibility", mode="before")
    @classmethod
    def _lower(cls, v):
        # GraphQL reports PUBLIC / PRIVATE / INTERNAL
        return v.lower() if isinstance(v, str) else v


class PageInfo(_Wire):
    has_next_page: bool
    end_cursor: str | None = None


class RepositoryPage(_Wire):
    """One page of `user.repositories` from the GraphQL API."""

    total_count: int = 0
    nodes: list[RepositoryRecord | None]  # GitHub may return null entries
    page_info: PageInfo


class VisibilityUpdate(_Wire):
    """Shape returned by the REST repository update endpoint."""

    name: str
    private: bool


class VisibilityChangeRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    repository_name: str
    desired_visibility: Visibility

    def __str__(self) -> str:
        return f"{self.repository_name}:{self.desired_visibility.value}"


class VisibilityChangeResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    repository_name: str
    succeeded: bool
    is_private: bool | None = None
    error: str | None = None


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    identity: str
    token: str = Field(repr=False)
