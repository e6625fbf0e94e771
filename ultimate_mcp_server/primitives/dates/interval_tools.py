"""Date interval tools - differences, offsets, working days and countdowns."""
from datetime import timedelta
from typing import Any
import math

from ...tool_decorator import Tool
from ...handler_wrappers import HandlerError
from .. import _runtime
from .._helpers import MS_PER_DAY, epoch_ms, iso_string
from . import CATEGORY
from ._common import date_string, require_date, shift_months, weekday

_UNIT_MS = {
    "seconds": 1000,
    "minutes": 60_000,
    "hours": 3_600_000,
    "days": MS_PER_DAY,
    "weeks": 7 * MS_PER_DAY,
}
TIME_UNITS = (*_UNIT_MS, "months", "years")


@Tool(
    "date_difference",
    CATEGORY,
    "Calculate difference between two dates",
    {
        "type": "object",
        "properties": {"date1": {"type": "string"}, "date2": {"type": "string"}},
        "required": ["date1", "date2"],
    },
)
def date_difference(date1: str, date2: str) -> dict[str, Any]:
    d1 = require_date(date1, "date1", allow_now=False)
    d2 = require_date(date2, "date2", allow_now=False)
    diff = abs(epoch_ms(d2) - epoch_ms(d1))
    total_days = diff // MS_PER_DAY
    return {
        "date1": date1,
        "date2": date2,
        "total_milliseconds": diff,
        "total_seconds": diff // 1000,
        "total_minutes": diff // 60_000,
        "total_hours": diff // 3_600_000,
        "total_days": total_days,
        "total_weeks": total_days // 7,
        "total_months": math.floor(total_days / 30.44),
        "total_years": math.floor(total_days / 365.25),
        "earlier_date": date1 if d1 < d2 else date2,
    }


@Tool(
    "add_time",
    CATEGORY,
    "Add or subtract time from a date",
    {
        "type": "object",
        "properties": {
            "date": {"type": "string"},
            "amount": {"type": "number"},
            "unit": {"type": "string", "enum": list(TIME_UNITS)},
            "operation": {"type": "string", "enum": ["add", "subtract"], "default": "add"},
        },
        "required": ["date", "amount", "unit"],
    },
)
def add_time(date: str, amount: float, unit: str, operation: str = "add") -> dict[str, Any]:
    """Offset a date. Months and years take whole amounts only; fractions are truncated."""
    moment = require_date(date, "date")
    sign = -1 if operation == "subtract" else 1

    if unit in _UNIT_MS:
        result = moment + timedelta(milliseconds=sign * amount * _UNIT_MS[unit])
    elif unit == "months":
        result = shift_months(moment, sign * int(amount))
    elif unit == "years":
        result = shift_months(moment, sign * int(amount) * 12)
    else:
        raise HandlerError(f"Unknown unit: {unit}", hint=f"Use one of: {', '.join(TIME_UNITS)}")

    return {
        "original": date,
        "result": iso_string(result),
        "result_formatted": date_string(result),
        "operation": operation,
        "amount": amount,
        "unit": unit,
    }


@Tool(
    "working_days_calculator",
    CATEGORY,
    "Calculate working days between two dates (Mon-Fri)",
    {
        "type": "object",
        "properties": {"start_date": {"type": "string"}, "end_date": {"type": "string"}},
        "required": ["start_date", "end_date"],
    },
)
def working_days_calculator(start_date: str, end_date: str) -> dict[str, Any]:
    """Count days stepping one day at a time from start while still <= end, both ends inclusive.

    Computed arithmetically, so the cost does not grow with the span.
    """
    start = require_date(start_date, "start_date", allow_now=False)
    end = require_date(end_date, "end_date", allow_now=False)
    span = epoch_ms(end) - epoch_ms(start)
    total = span // MS_PER_DAY + 1 if span >= 0 else 0

    full_weeks, remainder = divmod(total, 7)
    first = weekday(start)
    working = full_weeks * 5 + sum(1 for i in range(remainder) if (first + i) % 7 not in (0, 6))
    return {
        "start_date": start_date,
        "end_date": end_date,
        "working_days": working,
        "weekend_days": total - working,
        "total_days": total,
    }


@Tool(
    "countdown_to",
    CATEGORY,
    "Create a countdown to a future date",
    {
        "type": "object",
        "properties": {
            "target_date": {"type": "string", "description": "Future date in YYYY-MM-DD format"},
            "event_name": {"type": "string"},
        },
        "required": ["target_date"],
    },
)
def countdown_to(target_date: str, event_name: str = "Event") -> dict[str, Any]:
    target = require_date(target_date, "target_date", allow_now=False)
    diff = epoch_ms(target) - epoch_ms(_runtime.utc_now())
    if diff < 0:
        return {
            "event_name": event_name,
            "target_date": target_date,
            "message": "This date has already passed",
            "past": True,
        }

    days = diff // MS_PER_DAY
    hours = diff % MS_PER_DAY // 3_600_000
    minutes = diff % 3_600_000 // 60_000
    seconds = diff % 60_000 // 1000
    return {
        "event_name": event_name,
        "target_date": target_date,
        "days": days,
        "hours": hours,
        "minutes": minutes,
        "seconds": seconds,
        "total_hours": diff // 3_600_000,
        "summary": f"{days}d {hours}h {minutes}m {seconds}s",
    }
