"""Shared fixtures for pagerkit tests."""

import pytest

from pagerkit import PaginationState, sequence_length


@pytest.fixture
def twenty_items() -> list[int]:
    return list(range(20))


@pytest.fixture
def ten_pages(twenty_items) -> PaginationState:
    """20 items, 2 per page."""
    return PaginationState.create(sequence_length, 2, twenty_items)
