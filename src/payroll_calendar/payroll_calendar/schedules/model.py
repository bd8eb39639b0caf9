from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_CUTOFF_DAYS
from ..pay_groups.model import PayGroup


@dataclass(frozen=True)
class PayPeriodSchedule:
    schedule_id: int
    company_id: int
    pay_group_id: int
    code: str
    name: str
    frequency: str
    cutoff_days_before_pay: int = DEFAULT_CUTOFF_DAYS
    is_active: bool = True


@dataclass(frozen=True)
class NewSchedule:
    """Values used when a pay group's schedule is created lazily on first save."""

    company_id: int
    pay_group_id: int
    code: str
    name: str
    frequency: str
    cutoff_days_before_pay: int = DEFAULT_CUTOFF_DAYS

    @classmethod
    def for_pay_group(cls, pay_group: PayGroup, *, cutoff_days: int = DEFAULT_CUTOFF_DAYS) -> "NewSchedule":
        return cls(
            company_id=pay_group.company_id,
            pay_group_id=pay_group.pay_group_id,
            code=f"{pay_group.code}-{pay_group.pay_frequency.value}".upper(),
            name=f"{pay_group.name} ({pay_group.pay_frequency.schedule_label.replace('_', '-')})",
            frequency=pay_group.pay_frequency.schedule_label,
            cutoff_days_before_pay=int(cutoff_days),
        )
