from __future__ import annotations

from typing import Callable, Generic, TypeVar

from .base import CamelModel
from ..domain.pagination import Page

T = TypeVar("T")
D = TypeVar("D")


class PaginatedResponse(CamelModel, Generic[T]):
    """Envelope for one page of list results."""

    page: int
    page_size: int
    total_count: int
    total_pages: int
    data: list[T]

    @classmethod
    def from_page(cls, page: Page[D], mapper: Callable[[D], T]) -> "PaginatedResponse[T]":
        return cls(
            page=page.page,
            page_size=page.page_size,
            total_count=page.total_count,
            total_pages=page.total_pages,
            data=[mapper(item) for item in page.items],
        )
