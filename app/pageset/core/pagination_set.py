"""Page boundary math over a fixed-size collection.

A PaginationSet only reasons about counts and offsets. It never sees the items
themselves, so callers slice their own sequences (or build LIMIT/OFFSET
queries) from the Page values it returns.

Out-of-range page numbers produce None. Substituting an empty page is a caller
decision, see app.pageset.core.fallback.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Iterator, Optional

from app.pageset.core.errors import InvalidConfiguration


@dataclass(frozen=True)
class Page:
    """Slice boundaries of one page within the full collection.

    begin: zero-based offset of the first item on the page.
    length: number of items actually on the page.
    """

    begin: int
    length: int

    @property
    def stop(self) -> int:
        return self.begin + self.length

    def is_empty(self) -> bool:
        return self.length == 0

    def as_slice(self) -> slice:
        return slice(self.begin, self.stop)


@dataclass(frozen=True)
class PaginationSet:
    total_items: int
    page_size: int
    _page_count: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        total_items = operator.index(self.total_items)
        page_size = operator.index(self.page_size)

        if total_items < 0:
            raise InvalidConfiguration("total_items", total_items, ">= 0")
        if page_size <= 0:
            raise InvalidConfiguration("page_size", page_size, "> 0")

        object.__setattr__(self, "total_items", total_items)
        object.__setattr__(self, "page_size", page_size)
        # Ceil division without going through float.
        object.__setattr__(self, "_page_count", -(-total_items // page_size))

    def page_count(self) -> int:
        return self._page_count

    def to_page_number(self, n: int) -> Optional[Page]:
        """Return the 1-based page ``n``, or None when no such page exists."""

        n = operator.index(n)
        if n < 1 or n > self._page_count:
            return None

        begin = (n - 1) * self.page_size
        remaining = self.total_items - begin
        return Page(begin=begin, length=min(self.page_size, remaining))

    def to_page_index(self, index: int) -> Optional[Page]:
        """Zero-based variant of to_page_number."""
        return self.to_page_number(operator.index(index) + 1)

    def first_page(self) -> Optional[Page]:
        return self.to_page_number(1)

    def last_page(self) -> Optional[Page]:
        if self._page_count == 0:
            return None
        return self.to_page_number(self._page_count)

    def pages(self) -> Iterator[Page]:
        """Yield every page in order. An empty collection yields nothing."""
        for n in range(1, self._page_count + 1):
            page = self.to_page_number(n)
            assert page is not None
            yield page

    def __iter__(self) -> Iterator[Page]:
        return self.pages()

    def __len__(self) -> int:
        return self._page_count
