"""Pagination bookkeeping for arbitrary ordered collections."""

from pagerkit.counter import BoundedCounter, clamp
from pagerkit.formatting import format_elided_pager, format_page_summary, page_label
from pagerkit.pager import ElidedPagerOptions, elided_page_numbers, elided_pager, pager
from pagerkit.sequences import (
    from_iterable,
    from_sequence,
    iterable_length,
    iterable_slice,
    sequence_length,
    sequence_slice,
)
from pagerkit.state import PaginationState, compute_total_pages

__all__ = [
    "BoundedCounter",
    "clamp",
    "PaginationState",
    "compute_total_pages",
    "pager",
    "elided_pager",
    "elided_page_numbers",
    "ElidedPagerOptions",
    "from_sequence",
    "from_iterable",
    "sequence_length",
    "sequence_slice",
    "iterable_length",
    "iterable_slice",
    "page_label",
    "format_elided_pager",
    "format_page_summary",
]
