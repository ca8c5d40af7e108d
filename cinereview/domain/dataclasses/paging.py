# cinereview/domain/dataclasses/paging.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, List, TypeVar

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def _positive_int(value: Any, default: int) -> int:
    """Parse a query value into an int >= 1; anything unparseable -> default."""
    if value is None or isinstance(value, bool):
        return default
    try:
        n = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return max(1, n)


@dataclass(frozen=True)
class PageRequest:
    """
    Typed, validated pagination request. Build it with `parse()` from raw
    query-string values; the engine only ever sees clamped numbers.
    """
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    def __post_init__(self):
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if self.limit < 1:
            raise ValueError("limit must be >= 1")

    @classmethod
    def parse(
        cls,
        page: Any = None,
        limit: Any = None,
        *,
        default_limit: int = DEFAULT_LIMIT,
    ) -> "PageRequest":
        return cls(
            page=_positive_int(page, DEFAULT_PAGE),
            limit=_positive_int(limit, default_limit),
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def end(self) -> int:
        return self.offset + self.limit


@dataclass
class Page(Generic[T]):
    items: List[T] = field(default_factory=list)
    current_page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    total_pages: int = 0
    total_count: int = 0
    has_next_page: bool = False
    has_prev_page: bool = False

    def map(self, fn) -> "Page":
        """Same window, transformed items."""
        return Page(
            items=[fn(x) for x in self.items],
            current_page=self.current_page,
            limit=self.limit,
            total_pages=self.total_pages,
            total_count=self.total_count,
            has_next_page=self.has_next_page,
            has_prev_page=self.has_prev_page,
        )
