"""GraphQL query construction for the repository listing."""

from __future__ import annotations

import json
from string import Template
from typing import Any

_LIST_REPOS_QUERY = Template("""
query {
  user(login: $login) {
    login
    repositories($pagination) {
      totalCount
      nodes {
        name
        visibility
        description
      }
      pageInfo {
        hasNextPage
        endCursor
      }
    }
  }
}
""")


def graphql_string(value: str) -> str:
    """
    Render `value` as a GraphQL string literal.

    JSON string escapes are a subset of GraphQL's, and json.dumps escapes quotes,
    backslashes, control characters and (with ensure_ascii) everything non-ASCII,
    so nothing in `value` can terminate the literal.
    """
    return json.dumps(value, ensure_ascii=True)


def build_list_query(login: str, page_size: int, cursor: str | None = None) -> dict[str, Any]:
    """Build the `{"query": ...}` payload for one page of a user's repositories."""
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
        raise ValueError(f"page_size must be a positive integer, got {page_size!r}")

    pagination = f"first: {page_size}"
    if cursor is not None:
        pagination += f", after: {graphql_string(cursor)}"

    # Template substitutes in one pass, so values are never rescanned for placeholders
    text = _LIST_REPOS_QUERY.substitute(login=graphql_string(login), pagination=pagination)
    return {"query": text}
