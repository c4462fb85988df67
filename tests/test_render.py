"""Tests for table and result rendering."""

from ghvis.cli.render import (
    format_change_result,
    format_error_chain,
    format_planned_change,
    format_repo_table,
)
from ghvis.core.constants import DESCRIPTION_WIDTH
from ghvis.core.errors import ConnectionFailure
from ghvis.core.types import RepositoryRecord, Visibility, VisibilityChangeRequest, VisibilityChangeResult


def _rec(name, vis="public", desc=None) -> RepositoryRecord:
    return RepositoryRecord(name=name, visibility=vis, description=desc)


def test_empty_listing_renders_header_only() -> None:
    lines = format_repo_table([])

    assert len(lines) == 2
    assert lines[0].split() == ["repo_name", "visibility", "description"]
    assert set(lines[1]) == {"-", "="}


def test_rows_align_to_longest_name() -> None:
    lines = format_repo_table([_rec("a-very-long-repository-name", "private", "x"), _rec("b")])

    width = len("a-very-long-repository-name")
    assert lines[2].startswith("|a-very-long-repository-name|private   |x")
    assert lines[3].startswith("|b" + " " * (width - 1) + "|public    |")
    assert len(lines[2]) == len(lines[3])


def test_long_description_is_truncated() -> None:
    (row,) = format_repo_table([_rec("r", desc="d" * 80)])[2:]

    desc = row.split("|")[3]
    assert len(desc) == DESCRIPTION_WIDTH
    assert desc.endswith("...")


def test_description_newlines_are_flattened() -> None:
    (row,) = format_repo_table([_rec("r", desc="line one\nline two")])[2:]

    assert "line one line two" in row


def test_change_result_lines() -> None:
    ok = VisibilityChangeResult(repository_name="a", succeeded=True, is_private=True)
    bad = VisibilityChangeResult(repository_name="b", succeeded=False, error="HTTP 404: Not Found")

    assert format_change_result(ok) == "[ok] a -> private"
    assert format_change_result(bad) == "[fail] b: HTTP 404: Not Found"


def test_planned_change_line() -> None:
    req = VisibilityChangeRequest(repository_name="a", desired_visibility=Visibility.public)

    assert format_planned_change(req) == "[dry-run] a -> public"


def test_error_chain_lists_causes() -> None:
    try:
        try:
            raise OSError("connection refused")
        except OSError as e:
            raise ConnectionFailure("request to https://api.github.com/graphql failed") from e
    except ConnectionFailure as exc:
        lines = format_error_chain(exc)

    assert lines == [
        "error: request to https://api.github.com/graphql failed",
        "  caused by: connection refused",
    ]
