from __future__ import annotations

import logging
from datetime import timedelta
from typing import Sequence

from ..core.constants import DEFAULT_CUTOFF_DAYS
from ..core.exceptions import PersistenceError
from ..pay_groups.model import PayGroup
from ..schedules.model import NewSchedule
from ..schedules.repository import ScheduleRepository
from .model import GeneratedPeriod, NewPayPeriod, SaveOutcome, period_key
from .repository import PayPeriodRepository

logger = logging.getLogger(__name__)


class PeriodPersistenceCoordinator:
    """Saves a generated preview, replacing colliding stored periods only on confirmation."""

    def __init__(
        self,
        periods: PayPeriodRepository,
        schedules: ScheduleRepository,
        *,
        default_cutoff_days: int = DEFAULT_CUTOFF_DAYS,
    ):
        self._periods = periods
        self._schedules = schedules
        self._default_cutoff_days = int(default_cutoff_days)

    def find_conflicts(self, generated: Sequence[GeneratedPeriod], pay_group: PayGroup, year: int):
        keys = [period_key(year, p.period_number) for p in generated]
        return tuple(
            self._periods.find_by_keys(pay_group_id=pay_group.pay_group_id, year=year, period_numbers=keys)
        )

    def reconcile_and_save(
        self,
        generated: Sequence[GeneratedPeriod],
        pay_group: PayGroup,
        year: int,
        *,
        confirm_replace: bool = False,
    ) -> SaveOutcome:
        conflicts = self.find_conflicts(generated, pay_group, year)
        if conflicts and not confirm_replace:
            logger.info(
                "Save for pay group %s/%s needs confirmation: %d stored periods collide",
                pay_group.pay_group_id,
                year,
                len(conflicts),
            )
            return SaveOutcome(conflicts=conflicts, requires_confirmation=True)

        schedule = self._schedules.ensure(
            NewSchedule.for_pay_group(pay_group, cutoff_days=self._default_cutoff_days)
        )

        rows = [
            NewPayPeriod(
                pay_group_id=pay_group.pay_group_id,
                schedule_id=schedule.schedule_id,
                company_id=pay_group.company_id,
                year=year,
                cycle_number=p.period_number,
                period_start=p.period_start,
                period_end=p.period_end,
                pay_date=p.pay_date,
                cutoff_date=p.pay_date - timedelta(days=schedule.cutoff_days_before_pay),
                monday_count=p.monday_count if pay_group.uses_national_insurance else None,
            )
            for p in generated
        ]

        if conflicts:
            logger.warning(
                "Replacing %d stored periods for pay group %s/%s: %s",
                len(conflicts),
                pay_group.pay_group_id,
                year,
                ", ".join(c.period_number for c in conflicts),
            )

        try:
            inserted = self._periods.replace(
                pay_group_id=pay_group.pay_group_id,
                year=year,
                delete_period_numbers=[c.period_number for c in conflicts],
                rows=rows,
            )
        except PersistenceError:
            logger.error("Saving pay periods for pay group %s/%s failed", pay_group.pay_group_id, year, exc_info=True)
            raise

        logger.info(
            "Saved %d pay periods for pay group %s/%s (schedule %s)",
            inserted,
            pay_group.pay_group_id,
            year,
            schedule.schedule_id,
        )
        return SaveOutcome(
            inserted_count=inserted,
            schedule_id=schedule.schedule_id,
            replaced_count=len(conflicts),
        )
