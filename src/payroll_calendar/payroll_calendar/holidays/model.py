from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import HolidayScope


@dataclass(frozen=True)
class Holiday:
    holiday_date: date
    name: str
    scope: HolidayScope
