"""Offset pagination shared by the listing endpoints.

Query strings are parsed leniently: a missing, non-numeric or non-positive
page/limit falls back to the endpoint default instead of failing the request.
"""

import math
from dataclasses import dataclass

from pydantic import BaseModel

DEFAULT_PAGE = 1


def coerce_positive_int(value: str | int | None, default: int) -> int:
    """Parse value as a positive integer, returning default otherwise."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value if value > 0 else default
    try:
        parsed = int(value.strip())
    except ValueError:
        return default
    return parsed if parsed > 0 else default


@dataclass(frozen=True)
class PageRequest:
    """A normalized (page, limit) pair."""

    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def is_past_end(self, total_count: int) -> bool:
        """True when the page starts at or beyond the last of total_count rows."""
        return self.offset >= total_count

    @classmethod
    def from_query(
        cls,
        page: str | int | None,
        limit: str | int | None,
        *,
        default_limit: int,
        max_limit: int,
    ) -> "PageRequest":
        return cls(
            page=coerce_positive_int(page, DEFAULT_PAGE),
            limit=min(coerce_positive_int(limit, default_limit), max_limit),
        )


class Pagination(BaseModel):
    """Pagination metadata returned alongside a page of results."""

    current_page: int
    total_pages: int
    total_count: int
    has_next_page: bool
    has_prev_page: bool
    limit: int

    @classmethod
    def build(cls, page_request: PageRequest, total_count: int) -> "Pagination":
        total_pages = math.ceil(total_count / page_request.limit)
        return cls(
            current_page=page_request.page,
            total_pages=total_pages,
            total_count=total_count,
            has_next_page=page_request.page < total_pages,
            has_prev_page=page_request.page > 1,
            limit=page_request.limit,
        )
