"""Plain text rendering of pagination state."""

from __future__ import annotations

from typing import Any

from pagerkit.config import settings
from pagerkit.pager import ElidedPagerOptions, elided_pager
from pagerkit.state import LengthFn, PaginationState


def page_label(page: int, is_current: bool) -> str:
    """Format a page number, bracketing the current page."""
    return f"[{page}]" if is_current else str(page)


def format_elided_pager(
    state: PaginationState[Any],
    inner_window: int | None = None,
    outer_window: int | None = None,
    gap: str | None = None,
    separator: str = " ",
) -> str:
    """Format an elided pager as a single line, e.g. ``1 … 4 [5] 6 … 10``.

    Args:
        state: Pagination state to render
        inner_window: Pages around the current one (default from settings)
        outer_window: Pages at each edge (default from settings)
        gap: Marker for skipped pages (default from settings)
        separator: Text placed between entries

    Returns:
        The rendered pager line
    """
    options = ElidedPagerOptions(
        inner_window=settings.inner_window if inner_window is None else inner_window,
        outer_window=settings.outer_window if outer_window is None else outer_window,
        page_view=page_label,
        gap_view=settings.gap_marker if gap is None else gap,
    )
    return separator.join(elided_pager(options, state))


def format_page_summary(state: PaginationState[Any], length_fn: LengthFn[Any]) -> str:
    """Format a summary line such as ``Page 5/10 (41-50 of 100)``."""
    total_items = state.reduce(length_fn)
    header = f"Page {state.current_page}/{state.total_pages}"
    if total_items == 0:
        return f"{header} (0 of 0)"

    start, end = state.page_range()
    end = min(end, total_items)
    return f"{header} ({start + 1}-{end} of {total_items})"
