from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_date_field(value, field_name: str) -> date:
    """Like parse_iso_date but raises ValidationError for missing/bad input."""
    if isinstance(value, date):
        return value
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    try:
        return parse_iso_date(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def to_iso(value: date | None) -> str | None:
    return value.strftime("%Y-%m-%d") if value else None
