"""Pagination metadata for top-level comment pages."""

import math

from pydantic import BaseModel, ConfigDict


class Pagination(BaseModel):
    """Page position and navigation flags."""

    model_config = ConfigDict(frozen=True)

    current_page: int
    total_pages: int
    total_count: int
    limit: int
    offset: int
    has_next_page: bool
    has_prev_page: bool


def page_offset(page: int, limit: int) -> int:
    """Number of top-level rows to skip for a 1-based page."""
    return (page - 1) * limit


def paginate(total_count: int, page: int, limit: int) -> Pagination:
    """Compute pagination metadata.

    ``total_count`` is whatever count the caller reports. For comment
    threads it is the whole-thread count while only top-level comments are
    paged, so ``total_pages`` can overstate the number of top-level pages.

    Args:
        total_count: Number of items reported to the client
        page: 1-based page number
        limit: Page size

    Returns:
        Pagination metadata
    """
    if page < 1:
        raise ValueError("Page must be a positive integer")
    if limit < 1:
        raise ValueError("Limit must be a positive integer")

    total_pages = math.ceil(total_count / limit)
    return Pagination(
        current_page=page,
        total_pages=total_pages,
        total_count=total_count,
        limit=limit,
        offset=page_offset(page, limit),
        has_next_page=page < total_pages,
        has_prev_page=page > 1,
    )
