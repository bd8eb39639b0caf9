from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import PeriodStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause
from .model import NewPayPeriod, PersistedPayPeriod, StoredPeriodRef
from .repository import PayPeriodRepository

_COLUMNS = """
    pay_period_id, pay_group_id, schedule_id, year, cycle_number, period_number,
    period_start, period_end, pay_date, cutoff_date, monday_count, status
"""


def _row_to_period(r: dict) -> PersistedPayPeriod:
    return PersistedPayPeriod(
        pay_period_id=int(r["pay_period_id"]),
        pay_group_id=int(r["pay_group_id"]),
        schedule_id=int(r["schedule_id"]),
        year=int(r["year"]),
        cycle_number=int(r["cycle_number"]),
        period_number=r["period_number"],
        period_start=r["period_start"],
        period_end=r["period_end"],
        pay_date=r["pay_date"],
        cutoff_date=r.get("cutoff_date"),
        monday_count=int(r["monday_count"]) if r.get("monday_count") is not None else None,
        status=PeriodStatus(r["status"]),
    )


class MySQLPayPeriodRepository(PayPeriodRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_refs(self, *, pay_group_id: int, year: int) -> Sequence[StoredPeriodRef]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT cycle_number, period_end
                FROM pay_periods
                WHERE pay_group_id=%s AND year=%s
                ORDER BY cycle_number DESC
                """,
                (int(pay_group_id), int(year)),
            )
            return [
                StoredPeriodRef(cycle_number=int(r["cycle_number"]), period_end=r["period_end"])
                for r in fetchall(cur)
            ]

    def find_by_keys(self, *, pay_group_id: int, year: int, period_numbers: Sequence[str]) -> Sequence[PersistedPayPeriod]:
        keys = list(period_numbers)
        if not keys:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM pay_periods
                WHERE pay_group_id=%s AND year=%s AND period_number IN ({in_clause(keys)})
                ORDER BY cycle_number ASC
                """,
                (int(pay_group_id), int(year), *keys),
            )
            return [_row_to_period(r) for r in fetchall(cur)]

    def replace(
        self,
        *,
        pay_group_id: int,
        year: int,
        delete_period_numbers: Sequence[str],
        rows: Sequence[NewPayPeriod],
    ) -> int:
        keys = list(delete_period_numbers)
        # One connection = one transaction: a failed insert rolls the delete back.
        with db_cursor(self._conn_factory) as (_, cur):
            if keys:
                cur.execute(
                    f"""
                    DELETE FROM pay_periods
                    WHERE pay_group_id=%s AND year=%s AND period_number IN ({in_clause(keys)})
                    """,
                    (int(pay_group_id), int(year), *keys),
                )
            if rows:
                cur.executemany(
                    """
                    INSERT INTO pay_periods(
                        company_id, pay_group_id, schedule_id, year, cycle_number, period_number,
                        period_start, period_end, pay_date, cutoff_date, monday_count, status
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    [
                        (
                            int(p.company_id),
                            int(p.pay_group_id),
                            int(p.schedule_id),
                            int(p.year),
                            int(p.cycle_number),
                            p.period_number,
                            p.period_start,
                            p.period_end,
                            p.pay_date,
                            p.cutoff_date,
                            p.monday_count,
                            p.status.value,
                        )
                        for p in rows
                    ],
                )
            return len(rows)

    def list_periods(
        self,
        *,
        pay_group_id: int,
        year: int,
        status: Optional[PeriodStatus] = None,
    ) -> Sequence[PersistedPayPeriod]:
        clauses = ["pay_group_id=%s", "year=%s"]
        params: list[object] = [int(pay_group_id), int(year)]
        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM pay_periods WHERE {where} ORDER BY cycle_number ASC",
                tuple(params),
            )
            return [_row_to_period(r) for r in fetchall(cur)]

    def get_by_id(self, pay_period_id: int) -> Optional[PersistedPayPeriod]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM pay_periods WHERE pay_period_id=%s", (int(pay_period_id),))
            r = fetchone(cur)
            return _row_to_period(r) if r else None

    def update_status(self, *, pay_period_id: int, status: PeriodStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE pay_periods SET status=%s WHERE pay_period_id=%s",
                (status.value, int(pay_period_id)),
            )
            return cur.rowcount > 0
