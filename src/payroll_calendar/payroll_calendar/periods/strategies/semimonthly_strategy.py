from __future__ import annotations

from datetime import date
from typing import Iterator

from ...core.exceptions import ValidationError
from ..calendar_math import last_day_of_month
from .base import Bounds, PeriodStrategy

MID_MONTH_DAY = 15


class SemiMonthlyStrategy(PeriodStrategy):
    """Two periods per month: 1-15 and 16-end of month.

    Starting after the 15th skips the first half of the start month so no
    already-elapsed period is produced.
    """

    def validate_start(self, *, year: int, cycle_start_date: date) -> None:
        if cycle_start_date.year != year:
            raise ValidationError(f"cycleStartDate must fall in {year} for semi-monthly pay groups")

    def iter_bounds(self, *, year: int, cycle_start_date: date) -> Iterator[Bounds]:
        for month in range(cycle_start_date.month, 13):
            skip_first_half = month == cycle_start_date.month and cycle_start_date.day > MID_MONTH_DAY
            if not skip_first_half:
                yield date(year, month, 1), date(year, month, MID_MONTH_DAY)
            yield date(year, month, MID_MONTH_DAY + 1), last_day_of_month(year, month)
