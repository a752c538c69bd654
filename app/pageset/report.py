"""Console rendering of page boundaries for the CLI."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

from rich.console import Console
from rich.table import Table

from app.pageset.core.pagination_set import Page, PaginationSet

logger = logging.getLogger(__name__)


def build_pages_table(pageset: PaginationSet, pages: Iterable[Tuple[int, Page]]) -> Table:
    """Create a table with one row per (page_number, page).

    Page number 0 marks a fallback page that does not exist in the set.
    """
    title = f"{pageset.total_items} items / {pageset.page_size} per page / {pageset.page_count()} pages"
    table = Table(
        title=title,
        # Keep the summary title on one line.
        min_width=len(title) + 4,
        show_header=True,
        header_style="bold",
    )
    table.add_column("Page", justify="right")
    table.add_column("Begin", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Stop", justify="right")

    rows = 0
    for number, page in pages:
        label = str(number) if number > 0 else "-"
        table.add_row(label, str(page.begin), str(page.length), str(page.stop))
        rows += 1

    logger.debug("Built pages table with %d rows", rows)
    return table


def render_pages(
    pageset: PaginationSet,
    pages: Iterable[Tuple[int, Page]],
    console: Optional[Console] = None,
) -> None:
    console = console or Console()
    console.print(build_pages_table(pageset, pages))
