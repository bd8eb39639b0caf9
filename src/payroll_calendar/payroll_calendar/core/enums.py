from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Session role used for access checks."""

    ADMIN = "admin"
    STAFF = "staff"


class PayFrequency(str, Enum):
    """Pay frequency as configured on a pay group."""

    MONTHLY = "monthly"
    SEMIMONTHLY = "semimonthly"
    BIWEEKLY = "biweekly"
    WEEKLY = "weekly"

    @property
    def max_cycles(self) -> int:
        return {
            PayFrequency.MONTHLY: 12,
            PayFrequency.SEMIMONTHLY: 24,
            PayFrequency.BIWEEKLY: 27,
            PayFrequency.WEEKLY: 53,
        }[self]

    @property
    def window_days(self) -> int | None:
        """Length of a fixed window, or None for calendar-based frequencies."""
        return {PayFrequency.BIWEEKLY: 14, PayFrequency.WEEKLY: 7}.get(self)

    @property
    def schedule_label(self) -> str:
        """Frequency label stored on pay_period_schedules."""
        return {
            PayFrequency.MONTHLY: "monthly",
            PayFrequency.SEMIMONTHLY: "semi_monthly",
            PayFrequency.BIWEEKLY: "bi_weekly",
            PayFrequency.WEEKLY: "weekly",
        }[self]


class PeriodStatus(str, Enum):
    """Lifecycle of a stored pay period."""

    OPEN = "open"
    PROCESSING = "processing"
    APPROVED = "approved"
    PAID = "paid"
    CLOSED = "closed"


class HolidayScope(str, Enum):
    COMPANY = "company"
    COUNTRY = "country"
