"""Stay window rules shared by availability search and booking validation."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from shared.domain.value_objects import DateRange

from ..exceptions import InvalidRange


def stay_date_error(check_in: date, check_out: date, today: date) -> Optional[str]:
    """The first broken date rule for the requested stay, or None."""
    if check_in < today:
        return f"Check-in date cannot be in the past. Today is {today.isoformat()}"
    if check_out < today + timedelta(days=1):
        return f"Check-out date must be at least tomorrow. Today is {today.isoformat()}"
    if check_in >= check_out:
        return "Check-in date must be before check-out date"
    return None


def ensure_valid_stay(check_in: date, check_out: date, people_count: int, today: date) -> DateRange:
    """Return the stay as a DateRange or raise InvalidRange."""
    error = stay_date_error(check_in, check_out, today)
    if error:
        raise InvalidRange(error)
    if people_count < 1:
        raise InvalidRange("People count must be at least 1")
    return DateRange(check_in, check_out)
