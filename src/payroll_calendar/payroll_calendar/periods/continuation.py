from __future__ import annotations

from datetime import date, timedelta
from typing import Sequence

from ..core.enums import PayFrequency
from .calendar_math import end_of_year
from .model import CycleContinuation, StoredPeriodRef


class CycleContinuationResolver:
    """Where the next generation batch for a pay group/year should start.

    Callers must persist each batch before asking again; the answer is derived
    only from what is stored.
    """

    def resolve(self, *, frequency: PayFrequency, year: int, stored: Sequence[StoredPeriodRef]) -> CycleContinuation:
        if not stored:
            return CycleContinuation(year=year, cycle=1, start_date=date(year, 1, 1))

        latest = max(stored, key=lambda p: p.cycle_number)
        if latest.cycle_number >= frequency.max_cycles:
            return CycleContinuation(year=year + 1, cycle=1, start_date=date(year + 1, 1, 1), rolled_over=True)

        next_start = latest.period_end + timedelta(days=1)
        if self._belongs_to_next_year(frequency, year, next_start):
            # Keep fixed windows contiguous across Jan 1 instead of restarting on the 1st.
            return CycleContinuation(year=year + 1, cycle=1, start_date=next_start, rolled_over=True)

        return CycleContinuation(year=year, cycle=latest.cycle_number + 1, start_date=next_start)

    @staticmethod
    def _belongs_to_next_year(frequency: PayFrequency, year: int, next_start: date) -> bool:
        last = end_of_year(year)
        if next_start > last:
            return True
        window = frequency.window_days
        return bool(window) and next_start + timedelta(days=window - 1) > last
