from __future__ import annotations

from datetime import date, timedelta
from typing import AbstractSet

from ..core.constants import MAX_PAY_DAY_OFFSET, MIN_PAY_DAY_OFFSET
from .calendar_math import step_back_to_business_day


class PayDateResolver:
    """Pay date = period end + offset, moved earlier to a business day.

    Pay dates never move later; paying early is the fixed policy.
    """

    def __init__(self, *, min_offset: int = MIN_PAY_DAY_OFFSET, max_offset: int = MAX_PAY_DAY_OFFSET):
        self._min_offset = int(min_offset)
        self._max_offset = int(max_offset)

    def resolve(self, period_end: date, offset_days: int, holidays: AbstractSet[date]) -> date:
        offset = max(self._min_offset, min(self._max_offset, int(offset_days)))
        raw = period_end + timedelta(days=offset)
        return step_back_to_business_day(raw, holidays)
