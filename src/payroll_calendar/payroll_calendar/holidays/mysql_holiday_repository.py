from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import HolidayScope
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Holiday
from .repository import HolidayRepository


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(
        self,
        *,
        company_id: int,
        country_code: Optional[str],
        start: date,
        end: date,
    ) -> Sequence[Holiday]:
        out: list[Holiday] = []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT holiday_date, name
                FROM company_holidays
                WHERE company_id=%s AND is_active=1 AND holiday_date BETWEEN %s AND %s
                ORDER BY holiday_date
                """,
                (int(company_id), start, end),
            )
            for r in fetchall(cur):
                out.append(Holiday(holiday_date=r["holiday_date"], name=r["name"], scope=HolidayScope.COMPANY))

            if country_code:
                cur.execute(
                    """
                    SELECT holiday_date, name
                    FROM country_holidays
                    WHERE country_code=%s AND is_active=1 AND holiday_date BETWEEN %s AND %s
                    ORDER BY holiday_date
                    """,
                    (country_code, start, end),
                )
                for r in fetchall(cur):
                    out.append(Holiday(holiday_date=r["holiday_date"], name=r["name"], scope=HolidayScope.COUNTRY))
        return out
