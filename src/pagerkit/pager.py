"""Page number sequences for rendering pagination controls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from pagerkit.counter import clamp
from pagerkit.state import PaginationState

V = TypeVar("V")

PageView = Callable[[int, bool], V]


def pager(view_fn: PageView[V], state: PaginationState[Any]) -> list[V]:
    """Render every page number from 1 to total_pages."""
    current = state.current_page
    return [view_fn(page, page == current) for page in range(1, state.total_pages + 1)]


@dataclass(frozen=True)
class ElidedPagerOptions(Generic[V]):
    """Window sizes and views for ``elided_pager``.

    Attributes:
        inner_window: Pages shown on each side of the current page
        outer_window: Pages always shown at the start and end
        page_view: Called as page_view(page_number, is_current)
        gap_view: Placed between non-adjacent runs of pages
    """

    inner_window: int
    outer_window: int
    page_view: PageView[V]
    gap_view: V

    def __post_init__(self) -> None:
        object.__setattr__(self, "inner_window", max(0, self.inner_window))
        object.__setattr__(self, "outer_window", max(0, self.outer_window))


def elided_page_numbers(
    inner_window: int, outer_window: int, state: PaginationState[Any]
) -> list[list[int]]:
    """Return the visible page numbers grouped into consecutive runs.

    For page 5 of 10 with both windows at 1 this is [[1], [4, 5, 6], [10]].
    A gap belongs between each pair of runs. Negative window sizes are
    treated as 0.
    """
    inner_window = max(0, inner_window)
    outer_window = max(0, outer_window)
    current = state.current_page
    total = state.total_pages

    visible: set[int] = set()
    if outer_window > 0:
        visible.update(range(1, min(total, outer_window) + 1))
        visible.update(range(max(1, total - outer_window + 1), total + 1))

    inner_start = clamp(current - inner_window, 1, current)
    inner_end = clamp(current + inner_window, current, total)
    visible.update(range(inner_start, inner_end + 1))

    runs: list[list[int]] = []
    for page in sorted(visible):
        if runs and page == runs[-1][-1] + 1:
            runs[-1].append(page)
        else:
            runs.append([page])
    return runs


def elided_pager(options: ElidedPagerOptions[V], state: PaginationState[Any]) -> list[V]:
    """Render a compact pager such as ``1 … 4 5 6 … 10``.

    Shows the outer window at both ends and the inner window around the
    current page, with a single ``gap_view`` wherever page numbers are
    skipped.
    """
    current = state.current_page
    result: list[V] = []
    for index, run in enumerate(
        elided_page_numbers(options.inner_window, options.outer_window, state)
    ):
        if index:
            result.append(options.gap_view)
        result.extend(options.page_view(page, page == current) for page in run)
    return result
