"""
Listing paginator - page window and navigation links from a total count.
Pure arithmetic; the caller supplies how a page number becomes a URL.
"""

import math
from collections.abc import Callable

from bloglist.schemas.listing import Pager


def normalize_page(page: int | None) -> int:
    """Missing or non-positive page numbers mean the first page."""
    if page is None or page <= 0:
        return 1
    return page


def count_pages(total_items: int, page_size: int) -> int:
    """An empty listing still has one (empty) page."""
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    if total_items <= 0:
        return 1
    return math.ceil(total_items / page_size)


def page_offset(page: int, page_size: int) -> int:
    """Items to skip before the given 1-based page."""
    return (normalize_page(page) - 1) * page_size


def build_pager(
    total_items: int,
    page: int | None,
    page_size: int,
    link_for: Callable[[int], str],
) -> Pager | None:
    """
    Pager for the requested page, or None when the page lies beyond the last
    one (the caller redirects to the unpaged listing instead of rendering).
    """
    page = normalize_page(page)
    total_pages = count_pages(total_items, page_size)
    if total_pages < page:
        return None

    has_next = total_items > page * page_size
    has_previous = page > 1
    return Pager(
        page_size=page_size,
        current_page_index=page - 1,
        total_items=total_items,
        total_pages=total_pages,
        next_url=link_for(page + 1) if has_next else None,
        previous_url=link_for(page - 1) if has_previous else None,
    )
