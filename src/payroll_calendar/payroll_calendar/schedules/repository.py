from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import NewSchedule, PayPeriodSchedule


class ScheduleRepository(Protocol):
    def get_for_pay_group(self, *, pay_group_id: int) -> Optional[PayPeriodSchedule]:
        raise NotImplementedError

    def ensure(self, new: NewSchedule) -> PayPeriodSchedule:
        """Return the pay group's schedule, creating it if absent.

        Keyed by (company_id, code) and by pay_group_id; must never create a
        second schedule for the same pay group.
        """

        raise NotImplementedError

    def list_for_company(self, *, company_id: int) -> Sequence[PayPeriodSchedule]:
        raise NotImplementedError

    def set_active(self, *, schedule_id: int, is_active: bool) -> bool:
        raise NotImplementedError
