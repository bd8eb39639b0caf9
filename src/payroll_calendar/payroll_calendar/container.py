from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_CUTOFF_DAYS
from .database.connection import DBConfig, DatabaseConnection
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .pay_groups.mysql_pay_group_repository import MySQLPayGroupRepository
from .periods.coordinator import PeriodPersistenceCoordinator
from .periods.mysql_pay_period_repository import MySQLPayPeriodRepository
from .periods.service import PayrollCalendarService
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.service import ScheduleService


@dataclass(frozen=True)
class Container:
    calendar_service: PayrollCalendarService
    schedule_service: ScheduleService


def build_container(*, db_config: dict, cutoff_days: int = DEFAULT_CUTOFF_DAYS) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    pay_groups_repo = MySQLPayGroupRepository(conn)
    holidays_repo = MySQLHolidayRepository(conn)
    schedules_repo = MySQLScheduleRepository(conn)
    periods_repo = MySQLPayPeriodRepository(conn)

    coordinator = PeriodPersistenceCoordinator(periods_repo, schedules_repo, default_cutoff_days=cutoff_days)
    calendar_service = PayrollCalendarService(pay_groups_repo, holidays_repo, periods_repo, coordinator)
    schedule_service = ScheduleService(schedules_repo)

    return Container(
        calendar_service=calendar_service,
        schedule_service=schedule_service,
    )
