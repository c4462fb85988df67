"""Service: parse `name:visibility` tokens and apply visibility changes one by one."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from ..core.errors import TransportError, ValidationError
from ..core.types import (
    CHANGEABLE,
    Visibility,
    VisibilityChangeRequest,
    VisibilityChangeResult,
    VisibilityUpdate,
)
from ..logging import get_logger

logger = get_logger("visibility")


class VisibilityUpdater(Protocol):
    def update_visibility(self, login: str, repo_name: str, visibility: Visibility) -> VisibilityUpdate: ...


def parse_change_request(token: str) -> VisibilityChangeRequest:
    """
    Parse `repo:public` / `repo:private` (visibility is case-insensitive).

    The split happens on the last ':'. Raises ValidationError for anything else.
    """
    name, sep, vis = token.rpartition(":")
    if not sep:
        raise ValidationError(token, "expected NAME:VISIBILITY")
    name, vis = name.strip(), vis.strip().lower()
    if not name:
        raise ValidationError(token, "repository name is empty")
    if not vis:
        raise ValidationError(token, "visibility is empty")
    allowed = [v.value for v in CHANGEABLE]
    if vis not in allowed:
        raise ValidationError(token, f"visibility must be one of {', '.join(allowed)}")
    return VisibilityChangeRequest(repository_name=name, desired_visibility=Visibility(vis))


def apply_one(client: VisibilityUpdater, login: str, request: VisibilityChangeRequest) -> VisibilityChangeResult:
    name = request.repository_name
    try:
        updated = client.update_visibility(login, name, request.desired_visibility)
    except TransportError as e:
        logger.warning("visibility change for %s/%s failed: %s", login, name, e)
        return VisibilityChangeResult(repository_name=name, succeeded=False, error=str(e))
    return VisibilityChangeResult(repository_name=name, succeeded=True, is_private=updated.private)


def apply_all(
    client: VisibilityUpdater,
    login: str,
    requests: Iterable[VisibilityChangeRequest],
) -> list[VisibilityChangeResult]:
    """Apply each request in order; a failed item never stops the ones after it."""
    return [apply_one(client, login, r) for r in requests]


def change_visibility(client: VisibilityUpdater, login: str, tokens: Sequence[str]) -> list[VisibilityChangeResult]:
    """Parse and apply raw tokens; a malformed token becomes a failed result for that item only."""
    results: list[VisibilityChangeResult] = []
    for token in tokens:
        try:
            request = parse_change_request(token)
        except ValidationError as e:
            logger.warning("%s", e)
            results.append(VisibilityChangeResult(repository_name=token, succeeded=False, error=str(e)))
            continue
        results.append(apply_one(client, login, request))
    return results
