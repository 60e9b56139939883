"""Length and slice helpers for built-in collection types."""

from __future__ import annotations

from itertools import islice
from typing import Iterable, Sequence, TypeVar

from pagerkit.config import settings
from pagerkit.state import PaginationState

T = TypeVar("T")


def sequence_length(items: Sequence[T]) -> int:
    return len(items)


def sequence_slice(start: int, end: int, items: Sequence[T]) -> Sequence[T]:
    """Slice a sequence; out-of-range ends are truncated by slicing itself."""
    return items[start:end]


def iterable_length(items: Iterable[T]) -> int:
    """Count items in a re-iterable collection without indexing it.

    Generators are exhausted by counting; paginate them with
    ``from_iterable`` instead.
    """
    return sum(1 for _ in items)


def iterable_slice(start: int, end: int, items: Iterable[T]) -> list[T]:
    """Collect items [start, end) from a re-iterable collection."""
    return list(islice(items, start, end))


def from_sequence(
    items: Sequence[T], items_per_page: int | None = None
) -> PaginationState[Sequence[T]]:
    """Paginate a list, tuple, range or other sized sequence.

    Args:
        items: The sequence to paginate
        items_per_page: Page size; defaults to settings.default_items_per_page

    Returns:
        A PaginationState on page 1
    """
    if items_per_page is None:
        items_per_page = settings.default_items_per_page
    return PaginationState.create(sequence_length, items_per_page, items)


def from_iterable(
    items: Iterable[T], items_per_page: int | None = None
) -> PaginationState[list[T]]:
    """Paginate a generator or other single-pass iterable.

    The items are collected into a list first, so the state can be sliced
    with ``sequence_slice`` any number of times.

    Args:
        items: The iterable to paginate
        items_per_page: Page size; defaults to settings.default_items_per_page

    Returns:
        A PaginationState over the materialised list, on page 1
    """
    return from_sequence(list(items), items_per_page)
