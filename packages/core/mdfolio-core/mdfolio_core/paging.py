"""In-memory pagination over a sequence of items.

Page numbers are 1-based.  Row indexes are 0-based and inclusive.

Example::

    pager = Pager(documents, page_size=10)
    page = pager.get_page(2)
    for doc in page.rows:
        ...
    if page.has_next:
        next_page = pager.get_page(page.next_page)
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of rows plus navigation details."""

    rows: list[T]
    current_page: int
    total_pages: int
    prev_page: int | None
    next_page: int | None
    start_index: int
    end_index: int

    @property
    def has_next(self) -> bool:
        return self.next_page is not None

    @property
    def has_prev(self) -> bool:
        return self.prev_page is not None


@dataclass(frozen=True)
class PagerMetadata:
    total_items: int
    page_size: int
    total_pages: int
    is_empty: bool


class Pager(Generic[T]):
    """Split a sequence into fixed-size pages.

    The items are copied on construction, so later changes to the source
    sequence do not affect the pager.

    Args:
        items: The rows to paginate.
        page_size: Rows per page; must be a positive integer.

    Raises:
        TypeError: If *items* is not a sequence.
        ValueError: If *page_size* is not a positive integer.
    """

    def __init__(self, items: Sequence[T], page_size: int) -> None:
        if not isinstance(items, Sequence) or isinstance(items, (str, bytes)):
            raise TypeError("items must be a sequence")
        if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
            raise ValueError("page_size must be a positive integer")

        self._items: list[T] = list(items)
        self.row_count = len(self._items)
        self.page_size = page_size
        self.total_pages = -(-self.row_count // page_size)

    def __repr__(self) -> str:
        return f"Pager({self.row_count} rows, page_size={self.page_size})"

    def is_valid_page(self, page_number: int) -> bool:
        return 1 <= page_number <= self.total_pages

    def has_next_page(self, page_number: int) -> bool:
        return page_number < self.total_pages

    def has_prev_page(self, page_number: int) -> bool:
        return page_number > 1

    def get_bounding_rows(self, page_number: int) -> tuple[int, int]:
        """Return the ``(first, last)`` row indexes of a page.

        The last index of the final page is clamped to the last row.

        Raises:
            IndexError: If *page_number* is out of range.
        """
        self._check_page(page_number)
        last = page_number * self.page_size - 1
        first = last - self.page_size + 1
        return first, min(last, self.row_count - 1)

    def get_page(self, page_number: int) -> Page[T]:
        """Return the rows and navigation details for *page_number*.

        Raises:
            IndexError: If *page_number* is out of range.
        """
        first, last = self.get_bounding_rows(page_number)
        return Page(
            rows=self._items[first : last + 1],
            current_page=page_number,
            total_pages=self.total_pages,
            prev_page=page_number - 1 if self.has_prev_page(page_number) else None,
            next_page=page_number + 1 if self.has_next_page(page_number) else None,
            start_index=first,
            end_index=last,
        )

    def get_page_range(self, current_page: int, span: int = 2) -> list[int]:
        """Return page numbers within *span* pages either side of *current_page*.

        Useful for rendering numbered page links.

        Raises:
            IndexError: If *current_page* is out of range.
            ValueError: If *span* is negative.
        """
        self._check_page(current_page)
        if span < 0:
            raise ValueError("span must be a non-negative integer")
        start = max(1, current_page - span)
        end = min(self.total_pages, current_page + span)
        return list(range(start, end + 1))

    def get_all_pages(self) -> list[Page[T]]:
        return [self.get_page(number) for number in range(1, self.total_pages + 1)]

    @property
    def metadata(self) -> PagerMetadata:
        return PagerMetadata(
            total_items=self.row_count,
            page_size=self.page_size,
            total_pages=self.total_pages,
            is_empty=self.row_count == 0,
        )

    def _check_page(self, page_number: int) -> None:
        if not self.is_valid_page(page_number):
            raise IndexError(f"Page number must be between 1 and {self.total_pages}")
