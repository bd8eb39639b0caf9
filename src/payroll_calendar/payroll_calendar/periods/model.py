from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_iso_date_field, to_iso
from ..common.validators import parse_int, parse_optional_int, require_int_in_range, require_year
from ..core.constants import MAX_PAY_DAY_OFFSET, MAX_YEAR, MIN_PAY_DAY_OFFSET, MIN_YEAR
from ..core.enums import PayFrequency, PeriodStatus
from ..core.exceptions import ValidationError


def period_key(year: int, cycle_number: int) -> str:
    """Storage key for a period: "{year}-{NN}"."""
    return f"{int(year)}-{int(cycle_number):02d}"


def parse_frequency(value) -> PayFrequency:
    try:
        return PayFrequency(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(f.value for f in PayFrequency)
        raise ValidationError(f"frequency must be one of: {allowed}")


@dataclass(frozen=True)
class GenerationRequest:
    """Validated input for one calendar generation run."""

    pay_group_id: int
    frequency: PayFrequency
    year: int
    cycle_start_date: date
    starting_cycle_number: int = 1
    pay_day_offset_days: int = 0

    def __post_init__(self):
        if self.cycle_start_date is None:
            raise ValidationError("cycleStartDate is required")
        if not MIN_YEAR <= int(self.year) <= MAX_YEAR:
            raise ValidationError("year is out of range")
        max_cycles = self.frequency.max_cycles
        if not 1 <= int(self.starting_cycle_number) <= max_cycles:
            raise ValidationError(f"startingCycleNumber must be between 1 and {max_cycles} for {self.frequency.value}")
        if not MIN_PAY_DAY_OFFSET <= int(self.pay_day_offset_days) <= MAX_PAY_DAY_OFFSET:
            raise ValidationError(
                f"payDayOffsetDays must be between {MIN_PAY_DAY_OFFSET} and {MAX_PAY_DAY_OFFSET}"
            )

    @classmethod
    def from_payload(cls, payload: dict) -> "GenerationRequest":
        """Parse the JSON request shape once; invalid text is rejected, not coerced."""

        if not isinstance(payload, dict):
            raise ValidationError("request body must be a JSON object")
        pay_group_id = parse_int(payload.get("payGroupId"), "payGroupId")
        if pay_group_id <= 0:
            raise ValidationError("payGroupId is invalid")
        offset = parse_optional_int(payload.get("payDayOffsetDays"), "payDayOffsetDays", default=0)
        return cls(
            pay_group_id=pay_group_id,
            frequency=parse_frequency(payload.get("frequency")),
            year=require_year(payload.get("year")),
            cycle_start_date=parse_iso_date_field(payload.get("cycleStartDate"), "cycleStartDate"),
            starting_cycle_number=parse_optional_int(
                payload.get("startingCycleNumber"), "startingCycleNumber", default=1
            ),
            pay_day_offset_days=require_int_in_range(offset, "payDayOffsetDays", MIN_PAY_DAY_OFFSET, MAX_PAY_DAY_OFFSET),
        )


@dataclass(frozen=True)
class GeneratedPeriod:
    """A previewed period; in memory only until saved."""

    period_number: int
    period_start: date
    period_end: date
    pay_date: date
    monday_count: int

    def to_dict(self) -> dict:
        return {
            "period_number": self.period_number,
            "period_start": to_iso(self.period_start),
            "period_end": to_iso(self.period_end),
            "pay_date": to_iso(self.pay_date),
            "monday_count": self.monday_count,
        }


@dataclass(frozen=True)
class StoredPeriodRef:
    cycle_number: int
    period_end: date


@dataclass(frozen=True)
class CycleContinuation:
    year: int
    cycle: int
    start_date: date
    rolled_over: bool = False

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "cycle": self.cycle,
            "startDate": to_iso(self.start_date),
            "rolledOver": self.rolled_over,
        }


@dataclass(frozen=True)
class NewPayPeriod:
    pay_group_id: int
    schedule_id: int
    company_id: int
    year: int
    cycle_number: int
    period_start: date
    period_end: date
    pay_date: date
    cutoff_date: Optional[date]
    monday_count: Optional[int]
    status: PeriodStatus = PeriodStatus.OPEN

    @property
    def period_number(self) -> str:
        return period_key(self.year, self.cycle_number)


@dataclass(frozen=True)
class PersistedPayPeriod:
    pay_period_id: int
    pay_group_id: int
    schedule_id: int
    year: int
    cycle_number: int
    period_number: str
    period_start: date
    period_end: date
    pay_date: date
    cutoff_date: Optional[date]
    monday_count: Optional[int]
    status: PeriodStatus

    def to_dict(self) -> dict:
        return {
            "id": self.pay_period_id,
            "pay_group_id": self.pay_group_id,
            "schedule_id": self.schedule_id,
            "year": self.year,
            "period_number": self.period_number,
            "cycle_number": self.cycle_number,
            "period_start": to_iso(self.period_start),
            "period_end": to_iso(self.period_end),
            "pay_date": to_iso(self.pay_date),
            "cutoff_date": to_iso(self.cutoff_date),
            "monday_count": self.monday_count,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class SaveOutcome:
    """Result of reconcile_and_save.

    When requires_confirmation is set nothing was written and `conflicts`
    lists the stored periods that would be replaced.
    """

    inserted_count: int = 0
    schedule_id: Optional[int] = None
    conflicts: tuple[PersistedPayPeriod, ...] = field(default_factory=tuple)
    replaced_count: int = 0
    requires_confirmation: bool = False

    @property
    def saved(self) -> bool:
        return not self.requires_confirmation and self.schedule_id is not None
