from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Holiday


class HolidayRepository(Protocol):
    def list_active(
        self,
        *,
        company_id: int,
        country_code: Optional[str],
        start: date,
        end: date,
    ) -> Sequence[Holiday]:
        """Active company holidays plus active country holidays in [start, end]."""

        raise NotImplementedError


def holiday_dates(holidays: Sequence[Holiday]) -> frozenset[date]:
    """Effective holiday set (company ∪ country)."""
    return frozenset(h.holiday_date for h in holidays)
