from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

import pytest

from src.payroll_calendar.payroll_calendar.core.enums import HolidayScope, PayFrequency, PeriodStatus
from src.payroll_calendar.payroll_calendar.core.exceptions import PersistenceError
from src.payroll_calendar.payroll_calendar.holidays.model import Holiday
from src.payroll_calendar.payroll_calendar.pay_groups.model import PayGroup
from src.payroll_calendar.payroll_calendar.periods.coordinator import PeriodPersistenceCoordinator
from src.payroll_calendar.payroll_calendar.periods.model import PersistedPayPeriod, StoredPeriodRef
from src.payroll_calendar.payroll_calendar.periods.service import PayrollCalendarService
from src.payroll_calendar.payroll_calendar.schedules.model import PayPeriodSchedule


class InMemoryPayGroups:
    def __init__(self, *groups: PayGroup):
        self._by_id = {g.pay_group_id: g for g in groups}

    def get_by_id(self, pay_group_id: int) -> Optional[PayGroup]:
        return self._by_id.get(pay_group_id)


class InMemoryHolidays:
    def __init__(self, holidays=()):
        self._holidays = list(holidays)
        self.last_args = None

    def list_active(self, *, company_id, country_code, start, end):
        self.last_args = {"company_id": company_id, "country_code": country_code, "start": start, "end": end}
        return [h for h in self._holidays if start <= h.holiday_date <= end]


class InMemorySchedules:
    def __init__(self):
        self._by_pay_group: dict[int, PayPeriodSchedule] = {}
        self._next_id = 1
        self.ensure_calls = 0

    def get_for_pay_group(self, *, pay_group_id):
        return self._by_pay_group.get(pay_group_id)

    def ensure(self, new):
        self.ensure_calls += 1
        existing = self._by_pay_group.get(new.pay_group_id)
        if existing:
            return existing
        schedule = PayPeriodSchedule(
            schedule_id=self._next_id,
            company_id=new.company_id,
            pay_group_id=new.pay_group_id,
            code=new.code,
            name=new.name,
            frequency=new.frequency,
            cutoff_days_before_pay=new.cutoff_days_before_pay,
        )
        self._next_id += 1
        self._by_pay_group[new.pay_group_id] = schedule
        return schedule

    def list_for_company(self, *, company_id):
        return [s for s in self._by_pay_group.values() if s.company_id == company_id]

    def set_active(self, *, schedule_id, is_active):
        for pg_id, s in self._by_pay_group.items():
            if s.schedule_id == schedule_id:
                self._by_pay_group[pg_id] = replace(s, is_active=is_active)
                return True
        return False

    @property
    def count(self) -> int:
        return len(self._by_pay_group)


class InMemoryPayPeriods:
    """Mimics the store: replace() is all-or-nothing."""

    def __init__(self, *, fail_on_insert: bool = False):
        self.rows: dict[tuple[int, str], PersistedPayPeriod] = {}
        self._next_id = 1
        self.fail_on_insert = fail_on_insert
        self.replace_calls = 0

    def add(self, *, pay_group_id, year, cycle_number, period_start, period_end, pay_date, schedule_id=1, status=PeriodStatus.OPEN):
        key = f"{year}-{cycle_number:02d}"
        row = PersistedPayPeriod(
            pay_period_id=self._next_id,
            pay_group_id=pay_group_id,
            schedule_id=schedule_id,
            year=year,
            cycle_number=cycle_number,
            period_number=key,
            period_start=period_start,
            period_end=period_end,
            pay_date=pay_date,
            cutoff_date=None,
            monday_count=None,
            status=status,
        )
        self._next_id += 1
        self.rows[(pay_group_id, key)] = row
        return row

    def _for(self, pay_group_id, year):
        return [r for (pg, _), r in self.rows.items() if pg == pay_group_id and r.year == year]

    def list_refs(self, *, pay_group_id, year):
        rows = sorted(self._for(pay_group_id, year), key=lambda r: r.cycle_number, reverse=True)
        return [StoredPeriodRef(cycle_number=r.cycle_number, period_end=r.period_end) for r in rows]

    def find_by_keys(self, *, pay_group_id, year, period_numbers):
        keys = set(period_numbers)
        rows = [r for r in self._for(pay_group_id, year) if r.period_number in keys]
        return sorted(rows, key=lambda r: r.cycle_number)

    def replace(self, *, pay_group_id, year, delete_period_numbers, rows):
        self.replace_calls += 1
        if self.fail_on_insert:
            raise PersistenceError("insert failed")
        for key in delete_period_numbers:
            self.rows.pop((pay_group_id, key), None)
        for p in rows:
            row = PersistedPayPeriod(
                pay_period_id=self._next_id,
                pay_group_id=p.pay_group_id,
                schedule_id=p.schedule_id,
                year=p.year,
                cycle_number=p.cycle_number,
                period_number=p.period_number,
                period_start=p.period_start,
                period_end=p.period_end,
                pay_date=p.pay_date,
                cutoff_date=p.cutoff_date,
                monday_count=p.monday_count,
                status=p.status,
            )
            self._next_id += 1
            self.rows[(pay_group_id, p.period_number)] = row
        return len(rows)

    def list_periods(self, *, pay_group_id, year, status=None):
        rows = [r for r in self._for(pay_group_id, year) if status is None or r.status == status]
        return sorted(rows, key=lambda r: r.cycle_number)

    def get_by_id(self, pay_period_id):
        for r in self.rows.values():
            if r.pay_period_id == pay_period_id:
                return r
        return None

    def update_status(self, *, pay_period_id, status):
        for k, r in self.rows.items():
            if r.pay_period_id == pay_period_id:
                self.rows[k] = replace(r, status=status)
                return True
        return False


@pytest.fixture
def monthly_group() -> PayGroup:
    return PayGroup(
        pay_group_id=1,
        company_id=10,
        name="Salaried",
        code="sal",
        pay_frequency=PayFrequency.MONTHLY,
        uses_national_insurance=True,
        country_code="GB",
    )


@pytest.fixture
def weekly_group() -> PayGroup:
    return PayGroup(
        pay_group_id=2,
        company_id=10,
        name="Hourly",
        code="hrl",
        pay_frequency=PayFrequency.WEEKLY,
        uses_national_insurance=False,
        country_code="GB",
    )


@pytest.fixture
def christmas_holidays():
    return [
        Holiday(holiday_date=date(2025, 12, 24), name="Christmas Eve", scope=HolidayScope.COMPANY),
        Holiday(holiday_date=date(2025, 12, 25), name="Christmas Day", scope=HolidayScope.COUNTRY),
        Holiday(holiday_date=date(2025, 12, 26), name="Boxing Day", scope=HolidayScope.COUNTRY),
    ]


@pytest.fixture
def periods_repo():
    return InMemoryPayPeriods()


@pytest.fixture
def schedules_repo():
    return InMemorySchedules()


@pytest.fixture
def holidays_repo(christmas_holidays):
    return InMemoryHolidays(christmas_holidays)


@pytest.fixture
def calendar_service(monthly_group, weekly_group, holidays_repo, periods_repo, schedules_repo):
    coordinator = PeriodPersistenceCoordinator(periods_repo, schedules_repo)
    return PayrollCalendarService(InMemoryPayGroups(monthly_group, weekly_group), holidays_repo, periods_repo, coordinator)


@pytest.fixture
def failing_periods_repo():
    return InMemoryPayPeriods(fail_on_insert=True)


@pytest.fixture
def make_pay_groups():
    return InMemoryPayGroups
