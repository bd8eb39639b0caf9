from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import NewSchedule, PayPeriodSchedule
from .repository import ScheduleRepository

_COLUMNS = """
    schedule_id, company_id, pay_group_id, code, name, frequency,
    cutoff_days_before_pay, is_active
"""


def _row_to_schedule(r: dict) -> PayPeriodSchedule:
    return PayPeriodSchedule(
        schedule_id=int(r["schedule_id"]),
        company_id=int(r["company_id"]),
        pay_group_id=int(r["pay_group_id"]),
        code=r["code"],
        name=r["name"],
        frequency=r["frequency"],
        cutoff_days_before_pay=int(r["cutoff_days_before_pay"]),
        is_active=bool(r["is_active"]),
    )


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_pay_group(self, *, pay_group_id: int) -> Optional[PayPeriodSchedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM pay_period_schedules WHERE pay_group_id=%s", (int(pay_group_id),))
            r = fetchone(cur)
            return _row_to_schedule(r) if r else None

    def ensure(self, new: NewSchedule) -> PayPeriodSchedule:
        with db_cursor(self._conn_factory) as (_, cur):
            # Upsert by natural key; the no-op update keeps the first writer's values.
            cur.execute(
                """
                INSERT INTO pay_period_schedules(company_id, pay_group_id, code, name, frequency, cutoff_days_before_pay)
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE schedule_id=LAST_INSERT_ID(schedule_id)
                """,
                (
                    int(new.company_id),
                    int(new.pay_group_id),
                    new.code,
                    new.name,
                    new.frequency,
                    int(new.cutoff_days_before_pay),
                ),
            )
            cur.execute(
                f"SELECT {_COLUMNS} FROM pay_period_schedules WHERE pay_group_id=%s",
                (int(new.pay_group_id),),
            )
            return _row_to_schedule(fetchone(cur))

    def list_for_company(self, *, company_id: int) -> Sequence[PayPeriodSchedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM pay_period_schedules WHERE company_id=%s ORDER BY name",
                (int(company_id),),
            )
            return [_row_to_schedule(r) for r in fetchall(cur)]

    def set_active(self, *, schedule_id: int, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE pay_period_schedules SET is_active=%s WHERE schedule_id=%s",
                (1 if is_active else 0, int(schedule_id)),
            )
            return cur.rowcount > 0
