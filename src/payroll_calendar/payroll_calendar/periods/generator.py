from __future__ import annotations

import logging
from datetime import date
from typing import AbstractSet, Optional

from .calendar_math import count_mondays
from .factory import PeriodStrategyFactory
from .model import GeneratedPeriod, GenerationRequest
from .pay_date import PayDateResolver

logger = logging.getLogger(__name__)


class PeriodGenerator:
    """Builds the ordered, contiguous periods for the rest of a year.

    Pure: the same request and holiday set always give the same periods.
    """

    def __init__(
        self,
        *,
        strategy_factory: Optional[PeriodStrategyFactory] = None,
        pay_date_resolver: Optional[PayDateResolver] = None,
    ):
        self._factory = strategy_factory or PeriodStrategyFactory()
        self._pay_dates = pay_date_resolver or PayDateResolver()

    def generate(self, request: GenerationRequest, holidays: AbstractSet[date] = frozenset()) -> tuple[GeneratedPeriod, ...]:
        strategy = self._factory.for_frequency(request.frequency)
        strategy.validate_start(year=request.year, cycle_start_date=request.cycle_start_date)

        periods: list[GeneratedPeriod] = []
        number = request.starting_cycle_number
        for start, end in strategy.iter_bounds(year=request.year, cycle_start_date=request.cycle_start_date):
            periods.append(
                GeneratedPeriod(
                    period_number=number,
                    period_start=start,
                    period_end=end,
                    pay_date=self._pay_dates.resolve(end, request.pay_day_offset_days, holidays),
                    monday_count=count_mondays(start, end),
                )
            )
            number += 1

        logger.debug(
            "Generated %d %s periods for %s starting %s (cycle %d)",
            len(periods),
            request.frequency.value,
            request.year,
            request.cycle_start_date,
            request.starting_cycle_number,
        )
        return tuple(periods)
