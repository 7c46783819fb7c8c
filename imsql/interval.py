"""Numeric intervals with configurable bound inclusion."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Tuple, Union

Number = Union[int, float]


class BoundType(enum.Enum):
    """Whether an interval bound includes its endpoint."""

    OPEN = "open"
    CLOSED = "closed"


@dataclass(frozen=True)
class Interval:
    """The span between ``lower`` and ``upper``."""

    lower: Number
    upper: Number

    def contains(
        self,
        value: Number,
        lower_bound: BoundType = BoundType.CLOSED,
        upper_bound: BoundType = BoundType.CLOSED,
    ) -> bool:
        """Tell whether ``value`` lies in the interval under the given bound types."""
        above_lower = value > self.lower if lower_bound is BoundType.OPEN else value >= self.lower
        below_upper = value < self.upper if upper_bound is BoundType.OPEN else value <= self.upper
        return above_lower and below_upper

    def below(self, value: Number) -> Interval:
        """The interval of width ``value`` that ends at this one's lower bound."""
        return Interval(self.lower - value, self.lower)

    def above(self, value: Number) -> Interval:
        """The interval of width ``value`` that starts at this one's upper bound."""
        return Interval(self.upper, self.upper + value)

    def length(self) -> Number:
        return self.upper - self.lower

    def is_empty(self) -> bool:
        return self.lower >= self.upper


def make_interval(bounds: Tuple[Number, Number]) -> Interval:
    """Build an interval from a ``(lower, upper)`` pair."""
    lower, upper = bounds
    return Interval(lower, upper)


def make_ending_interval(ending_at: Number, length: Number) -> Interval:
    """Build the interval of the given length that ends at ``ending_at``."""
    return Interval(ending_at - length, ending_at)


def make_starting_interval(starting_at: Number, length: Number) -> Interval:
    """Build the interval of the given length that starts at ``starting_at``."""
    return Interval(starting_at, starting_at + length)