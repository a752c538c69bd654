"""Caller-side policies for out-of-range page requests.

PaginationSet reports a missing page as None. These helpers are for callers
that explicitly want a safe default or a clamped page number instead.
"""

from __future__ import annotations

from typing import Optional

from app.pageset.core.pagination_set import Page


EMPTY_PAGE = Page(begin=0, length=0)


def page_or_empty(page: Optional[Page]) -> Page:
    """Return ``page``, or an empty page at offset 0 when it is None."""
    return EMPTY_PAGE if page is None else page


def clamp_page_number(n: int, page_count: int) -> int:
    """Clamp a 1-based page number into [1, max(page_count, 1)]."""
    return min(max(n, 1), max(page_count, 1))
