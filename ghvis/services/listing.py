"""Service: walk the paginated repository listing to completion."""

from __future__ import annotations

from typing import Protocol

from ..core.constants import DEFAULT_MAX_PAGES, DEFAULT_PAGE_SIZE
from ..core.errors import DecodeError, PaginationLimitError
from ..core.types import RepositoryPage, RepositoryRecord
from ..logging import get_logger

logger = get_logger("listing")


class PageFetcher(Protocol):
    def fetch_repositories_page(self, login: str, page_size: int, cursor: str | None = None) -> RepositoryPage: ...


def fetch_all(
    client: PageFetcher,
    login: str,
    page_size: int = DEFAULT_PAGE_SIZE,
    max_pages: int = DEFAULT_MAX_PAGES,
) -> list[RepositoryRecord]:
    """
    Fetch every repository of `login`, in server page order.

    Any error from the client propagates immediately and nothing fetched so far
    is returned. Raises PaginationLimitError if the server still reports a next
    page after `max_pages` pages.
    """
    if max_pages < 1:
        raise ValueError(f"max_pages must be >= 1, got {max_pages!r}")

    records: list[RepositoryRecord] = []
    cursor: str | None = None
    pages = 0
    while True:
        page = client.fetch_repositories_page(login, page_size=page_size, cursor=cursor)
        pages += 1
        records.extend(node for node in page.nodes if node is not None)
        logger.debug(
            "page %d for %s: %d nodes (total so far %d of %d), has_next=%s",
            pages, login, len(page.nodes), len(records), page.total_count, page.page_info.has_next_page,
        )

        if not page.page_info.has_next_page:
            return records
        if pages >= max_pages:
            raise PaginationLimitError(max_pages)
        # end_cursor is only read once has_next_page is known to be true
        cursor = page.page_info.end_cursor
        if cursor is None:
            raise DecodeError(f"page {pages} reports a next page but no endCursor")
