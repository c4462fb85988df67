"""Text rendering for listings and change results."""

from __future__ import annotations

from collections.abc import Sequence

from ..core.constants import DESCRIPTION_WIDTH, VISIBILITY_WIDTH
from ..core.types import RepositoryRecord, VisibilityChangeRequest, VisibilityChangeResult

_NAME_HEADER = "repo_name"


def _fit(text: str, width: int) -> str:
    text = " ".join(text.split())
    if len(text) > width:
        text = text[: width - 3] + "..."
    return f"{text:<{width}}"


def format_repo_table(records: Sequence[RepositoryRecord]) -> list[str]:
    """Fixed-width table: header, rule, one row per repository (header and rule only when empty)."""
    nw = max([len(_NAME_HEADER)] + [len(r.name) for r in records])
    vw, dw = VISIBILITY_WIDTH, DESCRIPTION_WIDTH

    lines = [
        f" {_NAME_HEADER:<{nw}} {'visibility':<{vw}} {'description':<{dw}}",
        f"-{'=' * nw}-{'=' * vw}-{'=' * dw}-",
    ]
    for r in records:
        lines.append(f"|{r.name:<{nw}}|{r.visibility.value:<{vw}}|{_fit(r.description or '', dw)}")
    return lines


def format_change_result(result: VisibilityChangeResult) -> str:
    if result.succeeded:
        state = "private" if result.is_private else "public"
        return f"[ok] {result.repository_name} -> {state}"
    return f"[fail] {result.repository_name}: {result.error}"


def format_planned_change(request: VisibilityChangeRequest) -> str:
    return f"[dry-run] {request.repository_name} -> {request.desired_visibility.value}"


def format_error_chain(exc: BaseException) -> list[str]:
    """`error: ...` followed by one `  caused by: ...` line per __cause__ link."""
    lines = [f"error: {exc}"]
    seen = {id(exc)}
    cause = exc.__cause__
    while cause is not None and id(cause) not in seen:
        seen.add(id(cause))
        lines.append(f"  caused by: {cause}")
        cause = cause.__cause__
    return lines
