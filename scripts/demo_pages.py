#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.pageset.core.fallback import clamp_page_number
from app.pageset.core.pagination_set import PaginationSet
from app.pageset.db.pagination import limit_offset_for


def main() -> None:
    parser = argparse.ArgumentParser(description="Demo: slice a list of generated items into pages")
    parser.add_argument("--items", type=int, default=53, help="Number of demo items")
    parser.add_argument("--page-size", type=int, default=10)
    parser.add_argument("--page", type=int, default=1, help="Requested page (clamped into range)")
    args = parser.parse_args()

    items = [f"item-{i:04d}" for i in range(args.items)]
    pageset = PaginationSet(len(items), args.page_size)

    n = clamp_page_number(args.page, pageset.page_count())
    page = pageset.to_page_number(n)
    if page is None:
        print("No items to page through")
        return

    limit, offset = limit_offset_for(page)
    print(f"Page {n} of {pageset.page_count()} (LIMIT {limit} OFFSET {offset})")
    for it in items[page.as_slice()]:
        print(f"- {it}")


if __name__ == "__main__":
    main()
