"""Pagination value objects.

Stores page with ``limit``/``offset``; lifecycle managers accept a
``PageRequest`` (zero-based page number and size) and return a ``Page``.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

MAX_PAGE_SIZE = 100


@dataclass(frozen=True, slots=True, kw_only=True)
class PageRequest:
    """Zero-based page request.

    Raises:
        ValueError: If page is negative or size is outside 1..MAX_PAGE_SIZE.
    """

    page: int = 0
    size: int = 20

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError("page must be >= 0")
        if not 1 <= self.size <= MAX_PAGE_SIZE:
            raise ValueError(f"size must be between 1 and {MAX_PAGE_SIZE}")

    @property
    def limit(self) -> int:
        return self.size

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True, slots=True, kw_only=True)
class Page(Generic[T]):
    """One page of results plus totals."""

    items: list[T]
    page: int
    size: int
    total: int

    @property
    def total_pages(self) -> int:
        return (self.total + self.size - 1) // self.size

    @property
    def is_first(self) -> bool:
        return self.page == 0

    @property
    def is_last(self) -> bool:
        return self.page + 1 >= self.total_pages

    @classmethod
    def of(cls, items: list[T], total: int, request: PageRequest) -> "Page[T]":
        return cls(items=items, page=request.page, size=request.size, total=total)
