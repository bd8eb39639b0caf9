from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator

from ...core.exceptions import ValidationError
from ..calendar_math import end_of_year
from .base import Bounds, PeriodStrategy


class FixedWindowStrategy(PeriodStrategy):
    """Back-to-back windows of `window_days` (weekly = 7, biweekly = 14).

    A window belongs to the year its end date falls in, so a window starting
    in late December of the prior year is included. Generation stops at the
    first window ending after December 31.
    """

    def __init__(self, window_days: int):
        if window_days <= 0:
            raise ValueError("window_days must be positive")
        self.window_days = int(window_days)

    def _first_end(self, cycle_start_date: date) -> date:
        return cycle_start_date + timedelta(days=self.window_days - 1)

    def validate_start(self, *, year: int, cycle_start_date: date) -> None:
        if self._first_end(cycle_start_date).year != year:
            raise ValidationError(f"the first period starting {cycle_start_date.isoformat()} must end in {year}")

    def iter_bounds(self, *, year: int, cycle_start_date: date) -> Iterator[Bounds]:
        last = end_of_year(year)
        step = timedelta(days=self.window_days)
        start = cycle_start_date
        end = self._first_end(start)
        while end <= last:
            yield start, end
            start += step
            end += step
