from datetime import date

from src.payroll_calendar.payroll_calendar.core.enums import PayFrequency
from src.payroll_calendar.payroll_calendar.periods.continuation import CycleContinuationResolver
from src.payroll_calendar.payroll_calendar.periods.model import StoredPeriodRef


def test_no_stored_periods_starts_at_cycle_one():
    result = CycleContinuationResolver().resolve(frequency=PayFrequency.MONTHLY, year=2025, stored=[])

    assert (result.year, result.cycle, result.start_date) == (2025, 1, date(2025, 1, 1))
    assert result.rolled_over is False


def test_exhausted_monthly_year_rolls_over():
    stored = [StoredPeriodRef(cycle_number=12, period_end=date(2025, 12, 31))]

    result = CycleContinuationResolver().resolve(frequency=PayFrequency.MONTHLY, year=2025, stored=stored)

    assert (result.year, result.cycle, result.start_date) == (2026, 1, date(2026, 1, 1))
    assert result.rolled_over is True


def test_continues_after_highest_stored_cycle():
    stored = [
        StoredPeriodRef(cycle_number=4, period_end=date(2025, 4, 30)),
        StoredPeriodRef(cycle_number=5, period_end=date(2025, 5, 31)),
        StoredPeriodRef(cycle_number=3, period_end=date(2025, 3, 31)),
    ]

    result = CycleContinuationResolver().resolve(frequency=PayFrequency.MONTHLY, year=2025, stored=stored)

    assert (result.year, result.cycle, result.start_date) == (2025, 6, date(2025, 6, 1))


def test_semimonthly_continues_from_second_half():
    stored = [StoredPeriodRef(cycle_number=5, period_end=date(2025, 3, 15))]

    result = CycleContinuationResolver().resolve(frequency=PayFrequency.SEMIMONTHLY, year=2025, stored=stored)

    assert (result.cycle, result.start_date) == (6, date(2025, 3, 16))


def test_weekly_window_crossing_year_end_rolls_over_contiguously():
    stored = [StoredPeriodRef(cycle_number=51, period_end=date(2025, 12, 28))]

    result = CycleContinuationResolver().resolve(frequency=PayFrequency.WEEKLY, year=2025, stored=stored)

    assert (result.year, result.cycle, result.start_date) == (2026, 1, date(2025, 12, 29))
    assert result.rolled_over is True


def test_weekly_window_inside_year_continues():
    stored = [StoredPeriodRef(cycle_number=50, period_end=date(2025, 12, 21))]

    result = CycleContinuationResolver().resolve(frequency=PayFrequency.WEEKLY, year=2025, stored=stored)

    assert (result.year, result.cycle, result.start_date) == (2025, 51, date(2025, 12, 22))
