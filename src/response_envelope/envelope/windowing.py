"""Windowing over a fully materialized list.

The visible slice and its metadata are derived from four values only: the
full data, the page (0 when pagination is off), the display limit (-1 when
unlimited) and the base URI used to link neighbouring pages. Nothing from a
previous computation is carried over, so the result is the same no matter in
which order those values were set.

``count`` means different things depending on the branch:

* not paginated and limited: the requested limit, even if fewer items exist
* paginated and limited: the total number of items across all pages
* otherwise: the number of visible items
"""

import math
from collections.abc import Sequence
from typing import Any

from .schemas import PageLink, PaginationInfo, Results

__all__ = ["UNLIMITED", "build_page_uri", "compute_window", "default_results"]


UNLIMITED = -1


def default_results(count: int = 0) -> Results:
    """Results of an envelope that has not been windowed yet."""
    return Results(count=count)


def build_page_uri(base_uri: str, page: int, placeholder: str = "??") -> str | None:
    """Substitute the page number into the base URI.

    Args:
        base_uri: URI template holding the placeholder, or an empty string.
        page: Page number to insert.
        placeholder: Token marking where the page number goes.

    Returns:
        The URI for the page, or None when no base URI is set.
    """
    if not base_uri:
        return None
    return base_uri.replace(placeholder, str(page), 1)


def compute_window(
    full_data: Sequence[Any],
    page: int = 0,
    limit: int = UNLIMITED,
    base_uri: str = "",
    placeholder: str = "??",
) -> tuple[list[Any], Results]:
    """Derive the visible data and its metadata.

    Args:
        full_data: Complete dataset the window is taken from.
        page: Current page, 0 when pagination is disabled.
        limit: Items per window, -1 for unlimited.
        base_uri: URI template for previous/next links, may be empty.
        placeholder: Token in ``base_uri`` replaced by the page number.

    Returns:
        A fresh list with the visible items and the matching results.
    """
    total = len(full_data)
    results = default_results()
    results.display_limit = limit

    if not page:
        if limit == UNLIMITED:
            results.count = total
            return list(full_data), results
        results.count = limit
        return list(full_data[:limit]), results

    results.pagination = PaginationInfo(paginated=True, total_pages=1, page=page)

    if limit == UNLIMITED:
        if page == 1:
            results.count = total
            return list(full_data), results
        results.out_of_range = True
        return [], results

    total_pages = math.ceil(total / limit)
    results.pagination.total_pages = total_pages
    results.count = total

    if page > total_pages:
        results.out_of_range = True
        return [], results

    start_index = (page - 1) * limit
    end_index = page * limit

    if start_index > 0:
        results.previous_page = PageLink(
            page=page - 1,
            count=limit,
            uri=build_page_uri(base_uri, page - 1, placeholder),
        )

    if page < total_pages:
        results.next_page = PageLink(
            page=page + 1,
            count=min(limit, total - end_index),
            uri=build_page_uri(base_uri, page + 1, placeholder),
        )

    return list(full_data[start_index:end_index]), results
