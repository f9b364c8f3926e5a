"""Offset pagination over in-memory result sequences."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


@dataclass(slots=True)
class Page(Generic[T]):
    """One slice of a filtered, sorted result set plus its paging metadata."""

    page: int
    page_size: int
    total_count: int
    items: list[T] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)


def clamp_page(page: int | None) -> int:
    if page is None:
        return DEFAULT_PAGE
    return max(1, page)


def clamp_page_size(page_size: int | None) -> int:
    if page_size is None or page_size < 1:
        return DEFAULT_PAGE_SIZE
    return min(page_size, MAX_PAGE_SIZE)


def paginate(items: Sequence[T], page: int | None, page_size: int | None) -> Page[T]:
    """Slice ``items`` into the requested page after clamping the paging inputs.

    ``page`` is clamped to at least 1. A ``page_size`` below 1 falls back to
    the default of 10 and larger sizes are capped at 100.
    Pages past the end of ``items`` are returned empty with the real
    ``total_count``.
    """
    page = clamp_page(page)
    page_size = clamp_page_size(page_size)
    start = (page - 1) * page_size
    return Page(
        page=page,
        page_size=page_size,
        total_count=len(items),
        items=list(items[start : start + page_size]),
    )
