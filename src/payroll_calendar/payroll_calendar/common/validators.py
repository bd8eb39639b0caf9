from __future__ import annotations

import re
from typing import Optional

from ..core.constants import MAX_YEAR, MIN_YEAR
from ..core.exceptions import ValidationError

_INT_RE = re.compile(r"[+-]?[0-9]+")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def parse_int(value, field_name: str) -> int:
    """Parse an int from JSON/form input.

    Accepts ints and integer strings ("-3", " 5 "). Anything else is rejected
    instead of falling back to a default.
    """

    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _INT_RE.fullmatch(text):
            return int(text)
    raise ValidationError(f"{field_name} must be an integer")


def require_int_in_range(value, field_name: str, min_value: int, max_value: int) -> int:
    number = parse_int(value, field_name)
    if number < min_value or number > max_value:
        raise ValidationError(f"{field_name} must be between {min_value} and {max_value}")
    return number


def require_year(value, field_name: str = "year") -> int:
    """Calendar year with room for a following year (continuation rolls into year + 1)."""
    return require_int_in_range(value, field_name, MIN_YEAR, MAX_YEAR)


def parse_optional_int(value, field_name: str, *, default: Optional[int] = None) -> Optional[int]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    return parse_int(value, field_name)


def parse_bool(value, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in {"1", "true", "yes"}:
        return True
    if isinstance(value, str) and value.strip().lower() in {"0", "false", "no", ""}:
        return False
    if value is None:
        return False
    raise ValidationError(f"{field_name} must be a boolean")
