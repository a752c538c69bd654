"""SQL LIMIT/OFFSET helpers.

Repositories often work in pages (e.g., 100 rows/page). Keep the conversion
here so callers don't re-implement offset calculations differently.
"""

from __future__ import annotations

from app.pageset.core.pagination_set import Page


def page_to_limit_offset(*, page: int, page_size: int) -> tuple[int, int]:
    """Convert a 1-based page number to (limit, offset) without a known total."""

    if page <= 0:
        raise ValueError("page must be >= 1")
    if page_size <= 0:
        raise ValueError("page_size must be > 0")

    limit = int(page_size)
    offset = int((page - 1) * page_size)
    return limit, offset


def limit_offset_for(page: Page) -> tuple[int, int]:
    """(limit, offset) for a page already resolved by a PaginationSet.

    The limit is the page's actual length, so the final partial page does not
    ask the database for rows past the end of the collection.
    """
    return page.length, page.begin
