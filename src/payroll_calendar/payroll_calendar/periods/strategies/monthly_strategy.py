from __future__ import annotations

from datetime import date
from typing import Iterator

from ...core.exceptions import ValidationError
from ..calendar_math import last_day_of_month
from .base import Bounds, PeriodStrategy


class MonthlyStrategy(PeriodStrategy):
    """One period per calendar month, start month through December."""

    def validate_start(self, *, year: int, cycle_start_date: date) -> None:
        if cycle_start_date.year != year:
            raise ValidationError(f"cycleStartDate must fall in {year} for monthly pay groups")

    def iter_bounds(self, *, year: int, cycle_start_date: date) -> Iterator[Bounds]:
        for month in range(cycle_start_date.month, 13):
            yield date(year, month, 1), last_day_of_month(year, month)
