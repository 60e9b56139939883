"""Pagination state over an opaque collection."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Callable, Generic, TypeVar

from pagerkit.counter import BoundedCounter
from pagerkit.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")

LengthFn = Callable[[T], int]
SliceFn = Callable[[int, int, T], T]


def compute_total_pages(total_items: int, items_per_page: int) -> int:
    """Compute the number of pages, never less than one."""
    if total_items <= 0:
        return 1
    return math.ceil(total_items / items_per_page)


@dataclass(frozen=True)
class PaginationState(Generic[T]):
    """A collection paired with a page size and a clamped current page.

    The collection is never inspected directly; callers pass a length
    function when the page count must be recomputed and a slice function
    when the current page is read. All operations return a new state.
    """

    items: T
    items_per_page: int
    counter: BoundedCounter

    @classmethod
    def create(
        cls, length_fn: LengthFn[T], items_per_page: int, items: T
    ) -> PaginationState[T]:
        """Build a state positioned on page 1.

        Args:
            length_fn: Returns the number of items in the collection
            items_per_page: Page size; values below 1 become 1
            items: The collection to paginate

        Returns:
            A new PaginationState
        """
        if items_per_page < 1:
            logger.debug("items_per_page_coerced", requested=items_per_page)
            items_per_page = 1

        total_pages = compute_total_pages(length_fn(items), items_per_page)
        return cls(
            items=items,
            items_per_page=items_per_page,
            counter=BoundedCounter.between(1, total_pages),
        )

    # ------------------------------------------------------------------ #
    # Accessors
    # ------------------------------------------------------------------ #

    @property
    def current_page(self) -> int:
        return self.counter.value

    @property
    def total_pages(self) -> int:
        return self.counter.upper_bound

    @property
    def is_first(self) -> bool:
        return self.counter.value == 1

    @property
    def is_last(self) -> bool:
        return self.counter.value == self.total_pages

    # ------------------------------------------------------------------ #
    # Navigation
    # ------------------------------------------------------------------ #

    def go_to(self, page: int) -> PaginationState[T]:
        """Move to ``page``, clamped to [1, total_pages]."""
        counter = self.counter.set(page)
        if counter.value != page:
            logger.debug(
                "page_clamped",
                requested=page,
                page=counter.value,
                total_pages=self.total_pages,
            )
        return replace(self, counter=counter)

    def next_page(self) -> PaginationState[T]:
        return replace(self, counter=self.counter.increment())

    def prev_page(self) -> PaginationState[T]:
        return replace(self, counter=self.counter.decrement())

    def first(self) -> PaginationState[T]:
        return self.go_to(1)

    def last(self) -> PaginationState[T]:
        return self.go_to(self.total_pages)

    # ------------------------------------------------------------------ #
    # Structural changes
    # ------------------------------------------------------------------ #

    def transform(
        self, length_fn: LengthFn[T], func: Callable[[T], T]
    ) -> PaginationState[T]:
        """Apply ``func`` to the collection and keep the current page number.

        If the new collection has fewer pages, the state lands on the new
        last page.
        """
        rebuilt = PaginationState.create(length_fn, self.items_per_page, func(self.items))
        logger.debug(
            "pagination_rebuilt",
            reason="transform",
            total_pages=rebuilt.total_pages,
            previous_page=self.current_page,
        )
        return rebuilt.go_to(self.current_page)

    map = transform

    def change_items_per_page(
        self, length_fn: LengthFn[T], items_per_page: int
    ) -> PaginationState[T]:
        """Change the page size and keep the current page number where valid."""
        rebuilt = PaginationState.create(length_fn, items_per_page, self.items)
        logger.debug(
            "pagination_rebuilt",
            reason="items_per_page",
            items_per_page=rebuilt.items_per_page,
            total_pages=rebuilt.total_pages,
            previous_page=self.current_page,
        )
        return rebuilt.go_to(self.current_page)

    # ------------------------------------------------------------------ #
    # Reading
    # ------------------------------------------------------------------ #

    def page_range(self) -> tuple[int, int]:
        """Return start/end offsets of the current page (end exclusive)."""
        start = (self.current_page - 1) * self.items_per_page
        return start, start + self.items_per_page

    def page(self, slice_fn: SliceFn[T]) -> T:
        """Return the items on the current page.

        ``slice_fn`` receives (start, end, items) and must truncate ``end``
        to the collection length itself.
        """
        start, end = self.page_range()
        return slice_fn(start, end, self.items)

    def reduce(self, func: Callable[[T], R]) -> R:
        """Unwrap the collection through ``func``."""
        return func(self.items)
