"""Integer counter clamped into an inclusive range."""

from __future__ import annotations

from dataclasses import dataclass, replace


def clamp(value: int, low: int, high: int) -> int:
    """Clamp value into [low, high]."""
    return min(max(value, low), high)


@dataclass(frozen=True)
class BoundedCounter:
    """An integer that always satisfies lower_bound <= value <= upper_bound.

    Every operation returns a new counter. Out-of-range input is clamped,
    never rejected.
    """

    value: int
    lower_bound: int
    upper_bound: int

    def __post_init__(self) -> None:
        # Re-establish the invariant for directly constructed counters
        if self.upper_bound < self.lower_bound:
            object.__setattr__(self, "upper_bound", self.lower_bound)
        object.__setattr__(
            self, "value", clamp(self.value, self.lower_bound, self.upper_bound)
        )

    @classmethod
    def between(cls, low: int, high: int) -> BoundedCounter:
        """Create a counter at ``low`` bounded by [low, high].

        A degenerate range (high < low) collapses to [low, low].
        """
        return cls(value=low, lower_bound=low, upper_bound=high)

    def set(self, value: int) -> BoundedCounter:
        """Move to ``value``, clamped into the bounds."""
        return replace(self, value=clamp(value, self.lower_bound, self.upper_bound))

    def increment(self, step: int = 1) -> BoundedCounter:
        return self.set(self.value + step)

    def decrement(self, step: int = 1) -> BoundedCounter:
        return self.set(self.value - step)

    def with_upper_bound(self, high: int) -> BoundedCounter:
        """Rebuild with a new upper bound, keeping the value where it still fits."""
        return BoundedCounter(self.value, self.lower_bound, high)

    @property
    def is_at_lower(self) -> bool:
        return self.value == self.lower_bound

    @property
    def is_at_upper(self) -> bool:
        return self.value == self.upper_bound
