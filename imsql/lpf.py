"""First-order low-pass filter driven by sample periods."""

from __future__ import annotations

import math
from datetime import timedelta
from typing import Union

Duration = Union[timedelta, int, float]


def _seconds(duration: Duration) -> float:
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    return float(duration)


class AlphaLpf:
    """Exponential smoothing whose weight follows from a cutoff period.

    Durations are ``timedelta`` objects or numbers of seconds.
    """

    def __init__(self, cutoff_period: Duration, initial: float = 0.0) -> None:
        self.cutoff_period = cutoff_period
        self._last_value = initial

    @property
    def last_value(self) -> float:
        return self._last_value

    def observe(self, sample_period: Duration, value: float) -> float:
        """Fold a new sample into the filter and return the filtered value."""
        weight = self.alpha(sample_period)
        self._last_value = weight * value + (1.0 - weight) * self._last_value
        return self._last_value

    def alpha(self, sample_period: Duration) -> float:
        """The smoothing weight for a sample taken after ``sample_period``."""
        ratio = _seconds(self.cutoff_period) / _seconds(sample_period)
        return 1.0 / (1.0 + ratio / (2.0 * math.pi))