from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Iterator, Tuple

Bounds = Tuple[date, date]


class PeriodStrategy(ABC):
    """Strategy Pattern: how one pay frequency slices a year into periods."""

    @abstractmethod
    def validate_start(self, *, year: int, cycle_start_date: date) -> None:
        """Raise ValidationError if generation cannot start at this date."""
        raise NotImplementedError

    @abstractmethod
    def iter_bounds(self, *, year: int, cycle_start_date: date) -> Iterator[Bounds]:
        """Yield (period_start, period_end) in order for the rest of `year`."""
        raise NotImplementedError
