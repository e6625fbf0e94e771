"""Calendar names and string renderings shared by the date tools.

All dates are handled in UTC: naive inputs are read as UTC, and every
rendering below uses UTC fields.
"""
from datetime import datetime, timedelta
from typing import Any

from ...handler_wrappers import HandlerError
from .. import _runtime
from .._helpers import parse_date

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


def weekday(moment: datetime) -> int:
    """Day of week with Sunday as 0."""
    return (moment.weekday() + 1) % 7


def resolve_date(value: Any, allow_now: bool = True) -> datetime | None:
    """Parse ``value``; the string "now" means the current time."""
    if allow_now and value == "now":
        return _runtime.utc_now()
    return parse_date(value)


def require_date(value: Any, field: str, allow_now: bool = True) -> datetime:
    moment = resolve_date(value, allow_now)
    if moment is None:
        raise HandlerError(
            f"Invalid date for {field}",
            hint="Use an ISO date such as 2024-01-15 or 2024-01-15T10:30:00Z",
            **{field: value},
        )
    return moment


def shift_months(moment: datetime, months: int) -> datetime:
    """Move by whole months. Days past the end of the target month roll over (Jan 31 + 1 month = Mar 2)."""
    total = moment.year * 12 + (moment.month - 1) + months
    year, month = divmod(total, 12)
    return moment.replace(year=year, month=month + 1, day=1) + timedelta(days=moment.day - 1)


def date_string(moment: datetime) -> str:
    """Short human form: "Mon Jan 15 2024"."""
    return f"{DAY_NAMES[weekday(moment)][:3]} {MONTH_NAMES[moment.month - 1][:3]} {moment.day:02d} {moment.year}"


def time_string(moment: datetime) -> str:
    return moment.strftime("%H:%M:%S") + " GMT+0000 (Coordinated Universal Time)"
