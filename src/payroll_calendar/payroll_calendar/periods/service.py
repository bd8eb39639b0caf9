from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional, Sequence

from ..common.validators import require_year
from ..core.constants import HOLIDAY_SLACK_DAYS
from ..core.enums import PeriodStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..holidays.repository import HolidayRepository, holiday_dates
from ..pay_groups.model import PayGroup
from ..pay_groups.repository import PayGroupRepository
from .continuation import CycleContinuationResolver
from .coordinator import PeriodPersistenceCoordinator
from .generator import PeriodGenerator
from .model import CycleContinuation, GeneratedPeriod, GenerationRequest, PersistedPayPeriod, SaveOutcome
from .repository import PayPeriodRepository

logger = logging.getLogger(__name__)


class PayrollCalendarService:
    def __init__(
        self,
        pay_groups: PayGroupRepository,
        holidays: HolidayRepository,
        periods: PayPeriodRepository,
        coordinator: PeriodPersistenceCoordinator,
        *,
        generator: Optional[PeriodGenerator] = None,
        continuation: Optional[CycleContinuationResolver] = None,
    ):
        self._pay_groups = pay_groups
        self._holidays = holidays
        self._periods = periods
        self._coordinator = coordinator
        self._generator = generator or PeriodGenerator()
        self._continuation = continuation or CycleContinuationResolver()

    @staticmethod
    def _require_admin(current_role: Role) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Admin role required")

    def _get_pay_group(self, pay_group_id: int) -> PayGroup:
        pay_group = self._pay_groups.get_by_id(int(pay_group_id))
        if not pay_group:
            raise NotFoundError(f"Pay group {pay_group_id} not found")
        return pay_group

    def _holiday_set(self, pay_group: PayGroup, year: int) -> frozenset[date]:
        slack = timedelta(days=HOLIDAY_SLACK_DAYS)
        holidays = self._holidays.list_active(
            company_id=pay_group.company_id,
            country_code=pay_group.country_code,
            start=date(year, 1, 1) - slack,
            end=date(year, 12, 31) + slack,
        )
        return holiday_dates(holidays)

    def _generate(self, request: GenerationRequest) -> tuple[PayGroup, tuple[GeneratedPeriod, ...]]:
        pay_group = self._get_pay_group(request.pay_group_id)
        if pay_group.pay_frequency != request.frequency:
            raise ValidationError(
                f"frequency {request.frequency.value} does not match pay group frequency {pay_group.pay_frequency.value}"
            )
        periods = self._generator.generate(request, self._holiday_set(pay_group, request.year))
        return pay_group, periods

    def preview(self, *, current_role: Role, request: GenerationRequest) -> tuple[GeneratedPeriod, ...]:
        self._require_admin(current_role)
        _, periods = self._generate(request)
        logger.info(
            "Previewed %d periods for pay group %s/%s",
            len(periods),
            request.pay_group_id,
            request.year,
        )
        return periods

    def next_cycle(self, *, current_role: Role, pay_group_id: int, year: int) -> CycleContinuation:
        self._require_admin(current_role)
        year = require_year(year)
        pay_group = self._get_pay_group(pay_group_id)
        stored = self._periods.list_refs(pay_group_id=pay_group.pay_group_id, year=year)
        return self._continuation.resolve(frequency=pay_group.pay_frequency, year=year, stored=stored)

    def save(self, *, current_role: Role, request: GenerationRequest, confirm_replace: bool = False) -> SaveOutcome:
        self._require_admin(current_role)
        pay_group, periods = self._generate(request)
        if not periods:
            raise ValidationError("No periods to save for the given start date")
        return self._coordinator.reconcile_and_save(
            periods, pay_group, request.year, confirm_replace=confirm_replace
        )

    def list_periods(
        self,
        *,
        current_role: Role,
        pay_group_id: int,
        year: int,
        status: Optional[PeriodStatus] = None,
    ) -> Sequence[PersistedPayPeriod]:
        self._require_admin(current_role)
        return self._periods.list_periods(pay_group_id=int(pay_group_id), year=require_year(year), status=status)

    def update_period_status(self, *, current_role: Role, pay_period_id: int, status: PeriodStatus) -> None:
        self._require_admin(current_role)
        period = self._periods.get_by_id(int(pay_period_id))
        if not period:
            raise NotFoundError(f"Pay period {pay_period_id} not found")
        if period.status == PeriodStatus.CLOSED and status != PeriodStatus.CLOSED:
            raise ValidationError("A closed pay period cannot be reopened")

        self._periods.update_status(pay_period_id=period.pay_period_id, status=status)
        logger.info("Pay period %s status %s -> %s", period.period_number, period.status.value, status.value)
