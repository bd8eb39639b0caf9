from __future__ import annotations

from typing import Optional

from ..core.enums import PayFrequency
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import PayGroup
from .repository import PayGroupRepository


class MySQLPayGroupRepository(PayGroupRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, pay_group_id: int) -> Optional[PayGroup]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT pg.pay_group_id, pg.company_id, pg.name, pg.code, pg.pay_frequency,
                       pg.uses_national_insurance, c.country_code
                FROM pay_groups pg
                JOIN companies c ON c.company_id = pg.company_id
                WHERE pg.pay_group_id=%s
                """,
                (int(pay_group_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return PayGroup(
                pay_group_id=int(r["pay_group_id"]),
                company_id=int(r["company_id"]),
                name=r["name"],
                code=r["code"],
                pay_frequency=PayFrequency(r["pay_frequency"]),
                uses_national_insurance=bool(r["uses_national_insurance"]),
                country_code=r.get("country_code"),
            )
