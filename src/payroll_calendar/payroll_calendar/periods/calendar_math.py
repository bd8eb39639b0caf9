"""Pure date arithmetic for pay calendars."""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import AbstractSet

from ..core.constants import MAX_BUSINESS_DAY_STEPS
from ..core.exceptions import CalendarExhaustedError

ONE_DAY = timedelta(days=1)


def last_day_of_month(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


def count_mondays(start: date, end: date) -> int:
    """Number of Mondays in the inclusive range [start, end]."""
    if end < start:
        return 0
    days = (end - start).days + 1
    # days from start to its first Monday
    lead = (7 - start.weekday()) % 7
    if lead >= days:
        return 0
    return 1 + (days - lead - 1) // 7


def is_weekend(d: date) -> bool:
    return d.weekday() >= 5


def is_business_day(d: date, holidays: AbstractSet[date]) -> bool:
    return not is_weekend(d) and d not in holidays


def step_back_to_business_day(d: date, holidays: AbstractSet[date], *, max_steps: int = MAX_BUSINESS_DAY_STEPS) -> date:
    """Move `d` earlier one day at a time until it is a business day."""
    current = d
    for _ in range(max_steps + 1):
        if is_business_day(current, holidays):
            return current
        current -= ONE_DAY
    raise CalendarExhaustedError(
        f"No business day within {max_steps} days before {d.isoformat()}; check holiday configuration"
    )


def end_of_year(year: int) -> date:
    return date(year, 12, 31)
