from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from rich.console import Console

from app.pageset.config import ConfigError, load_settings
from app.pageset.core.errors import InvalidConfiguration
from app.pageset.core.fallback import page_or_empty
from app.pageset.core.pagination_set import Page, PaginationSet
from app.pageset.logging_config import setup_logging
from app.pageset.report import render_pages

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ABSENT = 1
EXIT_INVALID = 2


def build_parser(default_page_size: int, default_log_level: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pageset",
        description="Compute page boundaries (offset and length) for a collection",
    )
    parser.add_argument("total_items", type=int, help="Number of items in the collection")
    parser.add_argument(
        "--page-size",
        type=int,
        default=default_page_size,
        help=f"Items per page (default: {default_page_size})",
    )
    query = parser.add_mutually_exclusive_group()
    query.add_argument("--page", type=int, help="1-based page number to resolve")
    query.add_argument("--last", action="store_true", help="Resolve the last page")
    query.add_argument("--all", action="store_true", help="List every page (default)")
    parser.add_argument(
        "--empty-fallback",
        action="store_true",
        default=None,
        help="Report an empty page at offset 0 instead of failing when the page does not exist",
    )
    parser.add_argument("--log-level", default=default_log_level, help="Logging level")
    parser.add_argument("--log-file", default=None, help="Write logs to this file instead of stderr")
    return parser


def resolve_pages(
    pageset: PaginationSet,
    *,
    page: Optional[int] = None,
    last: bool = False,
    empty_fallback: bool = False,
) -> Optional[List[Tuple[int, Page]]]:
    """Resolve the requested pages as (page_number, page) rows.

    Returns None when a single page was requested, it does not exist and no
    fallback was asked for. A fallback row uses page number 0.
    """
    if page is None and not last:
        return list(enumerate(pageset.pages(), start=1))

    number = pageset.page_count() if last else page
    found = pageset.last_page() if last else pageset.to_page_number(number)
    if found is not None:
        return [(number, found)]

    logger.debug("No page %s in a set of %d pages", number, pageset.page_count())
    if not empty_fallback:
        return None
    return [(0, page_or_empty(found))]


def run(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    err = Console(stderr=True)
    try:
        settings = load_settings()
    except ConfigError as e:
        err.print(f"[red]Configuration error:[/red] {e}")
        return EXIT_INVALID

    parser = build_parser(settings.default_page_size, settings.log_level)
    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    empty_fallback = settings.empty_fallback if args.empty_fallback is None else args.empty_fallback

    try:
        pageset = PaginationSet(args.total_items, args.page_size)
    except InvalidConfiguration as e:
        logger.error("Invalid pagination configuration: %s", e)
        err.print(f"[red]Invalid configuration:[/red] {e}")
        return EXIT_INVALID

    rows = resolve_pages(pageset, page=args.page, last=args.last, empty_fallback=empty_fallback)
    if rows is None:
        requested = "last page" if args.last else f"page {args.page}"
        err.print(f"No {requested}: the collection has {pageset.page_count()} pages")
        return EXIT_ABSENT

    render_pages(pageset, rows, console=console)
    return EXIT_OK


def main() -> None:
    raise SystemExit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
