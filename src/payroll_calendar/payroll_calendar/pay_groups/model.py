from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import PayFrequency


@dataclass(frozen=True)
class PayGroup:
    """Employees sharing one pay frequency and calendar (owned by HR config)."""

    pay_group_id: int
    company_id: int
    name: str
    code: str
    pay_frequency: PayFrequency
    uses_national_insurance: bool = False
    country_code: Optional[str] = None
