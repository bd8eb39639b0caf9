from __future__ import annotations

import logging
from typing import Sequence

from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import PayPeriodSchedule
from .repository import ScheduleRepository

logger = logging.getLogger(__name__)


class ScheduleService:
    def __init__(self, schedules: ScheduleRepository):
        self._schedules = schedules

    def list_for_company(self, *, current_role: Role, company_id: int) -> Sequence[PayPeriodSchedule]:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Admin role required")
        if int(company_id) <= 0:
            raise ValidationError("companyId is invalid")
        return self._schedules.list_for_company(company_id=int(company_id))

    def set_active(self, *, current_role: Role, schedule_id: int, is_active: bool) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Admin role required")

        if not self._schedules.set_active(schedule_id=int(schedule_id), is_active=bool(is_active)):
            raise NotFoundError(f"Schedule {schedule_id} not found")
        logger.info("Schedule %s active=%s", schedule_id, is_active)
