"""Length-aware pagination of query results."""

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

MAX_PAGE = 2**31 - 1


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results.

    Attributes:
        items: Records on this page.
        total: Number of records across all pages.
        per_page: Page size.
        current_page: 1-based number of this page.
    """

    items: list[T]
    total: int
    per_page: int
    current_page: int

    @property
    def last_page(self) -> int:
        """Number of the last page (1 when there are no records)."""
        return max(1, math.ceil(self.total / self.per_page))

    @property
    def has_pages(self) -> bool:
        return self.last_page > 1

    @property
    def has_more_pages(self) -> bool:
        return self.current_page < self.last_page

    @property
    def first_item(self) -> int | None:
        """1-based position of the first record on this page."""
        if not self.items:
            return None
        return (self.current_page - 1) * self.per_page + 1

    @property
    def last_item(self) -> int | None:
        if not self.items:
            return None
        return (self.first_item or 0) + len(self.items) - 1

    def page_numbers(self) -> range:
        return range(1, self.last_page + 1)

    def url(self, base: str, page: int) -> str:
        """Link to another page of the same listing."""
        return f"{base}?page={page}"

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


def normalize_page(page: int | str | None) -> int:
    """Turn a raw page number into a valid 1-based page number."""
    try:
        number = int(page) if page is not None else 1
    except (TypeError, ValueError):
        return 1
    return min(max(1, number), MAX_PAGE)
