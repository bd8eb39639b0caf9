from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import PayFrequency
from .strategies.base import PeriodStrategy
from .strategies.fixed_window_strategy import FixedWindowStrategy
from .strategies.monthly_strategy import MonthlyStrategy
from .strategies.semimonthly_strategy import SemiMonthlyStrategy


@dataclass
class PeriodStrategyFactory:
    """Factory Pattern: choose the period strategy for a pay frequency."""

    def for_frequency(self, frequency: PayFrequency) -> PeriodStrategy:
        if frequency == PayFrequency.MONTHLY:
            return MonthlyStrategy()
        if frequency == PayFrequency.SEMIMONTHLY:
            return SemiMonthlyStrategy()
        if frequency.window_days:
            return FixedWindowStrategy(frequency.window_days)
        raise ValueError(f"Unsupported pay frequency: {frequency!r}")
