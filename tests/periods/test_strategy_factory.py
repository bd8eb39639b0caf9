from datetime import date

import pytest

from src.payroll_calendar.payroll_calendar.core.enums import PayFrequency
from src.payroll_calendar.payroll_calendar.core.exceptions import ValidationError
from src.payroll_calendar.payroll_calendar.periods.factory import PeriodStrategyFactory
from src.payroll_calendar.payroll_calendar.periods.strategies.fixed_window_strategy import FixedWindowStrategy
from src.payroll_calendar.payroll_calendar.periods.strategies.monthly_strategy import MonthlyStrategy
from src.payroll_calendar.payroll_calendar.periods.strategies.semimonthly_strategy import SemiMonthlyStrategy


def test_factory_picks_strategy_per_frequency():
    factory = PeriodStrategyFactory()

    assert isinstance(factory.for_frequency(PayFrequency.MONTHLY), MonthlyStrategy)
    assert isinstance(factory.for_frequency(PayFrequency.SEMIMONTHLY), SemiMonthlyStrategy)

    weekly = factory.for_frequency(PayFrequency.WEEKLY)
    biweekly = factory.for_frequency(PayFrequency.BIWEEKLY)
    assert isinstance(weekly, FixedWindowStrategy) and weekly.window_days == 7
    assert isinstance(biweekly, FixedWindowStrategy) and biweekly.window_days == 14


def test_fixed_window_stops_at_year_end():
    bounds = list(FixedWindowStrategy(7).iter_bounds(year=2025, cycle_start_date=date(2025, 12, 15)))

    assert bounds == [
        (date(2025, 12, 15), date(2025, 12, 21)),
        (date(2025, 12, 22), date(2025, 12, 28)),
    ]


def test_fixed_window_rejects_start_whose_first_window_ends_next_year():
    with pytest.raises(ValidationError):
        FixedWindowStrategy(14).validate_start(year=2025, cycle_start_date=date(2025, 12, 22))


def test_monthly_rejects_start_outside_year():
    with pytest.raises(ValidationError):
        MonthlyStrategy().validate_start(year=2025, cycle_start_date=date(2024, 12, 1))
