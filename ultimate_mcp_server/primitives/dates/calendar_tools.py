"""Calendar tools - month grids and US federal holidays."""
from typing import Any
import calendar

from ...tool_decorator import Tool
from ...handler_wrappers import HandlerError
from .._helpers import num_str
from . import CATEGORY
from ._common import DAY_NAMES, MONTH_NAMES, require_date, weekday

# (month, day) -> name
FIXED_HOLIDAYS = {
    (1, 1): "New Year's Day",
    (6, 19): "Juneteenth",
    (7, 4): "Independence Day",
    (11, 11): "Veterans Day",
    (12, 25): "Christmas Day",
}


@Tool(
    "calendar_generator",
    CATEGORY,
    "Generate a text calendar for any month",
    {
        "type": "object",
        "properties": {
            "year": {"type": "number"},
            "month": {"type": "number", "description": "1-12"},
        },
        "required": ["year", "month"],
    },
)
def calendar_generator(year: int, month: int) -> dict[str, Any]:
    """Plain-text month grid, weeks starting on Sunday."""
    if not 1 <= int(month) <= 12 or not 1 <= int(year) <= 9999:
        raise HandlerError("Month must be 1-12 and year 1-9999", year=year, month=month)

    y, m = int(year), int(month)
    # calendar.weekday() is Monday-based
    first_day = (calendar.weekday(y, m, 1) + 1) % 7
    days_in_month = calendar.monthrange(y, m)[1]

    grid = f"   {MONTH_NAMES[m - 1]} {num_str(year)}\nSun Mon Tue Wed Thu Fri Sat\n"
    grid += "    " * first_day
    for day in range(1, days_in_month + 1):
        grid += f"{day:>3} "
        if (first_day + day) % 7 == 0:
            grid += "\n"

    return {
        "calendar": grid,
        "year": year,
        "month": MONTH_NAMES[m - 1],
        "days_in_month": days_in_month,
        "first_day_of_week": DAY_NAMES[first_day],
    }


def _floating_holiday(month: int, day: int, wd: int) -> str | None:
    if month == 1 and wd == 1 and 15 <= day <= 21:
        return "MLK Jr. Day"
    if month == 5 and wd == 1 and day >= 25:
        return "Memorial Day"
    if month == 9 and wd == 1 and day <= 7:
        return "Labor Day"
    if month == 11 and wd == 4 and 22 <= day <= 28:
        return "Thanksgiving Day"
    return None


@Tool(
    "is_holiday",
    CATEGORY,
    "Check if a date is a US Federal holiday",
    {
        "type": "object",
        "properties": {"date": {"type": "string", "description": "YYYY-MM-DD"}},
        "required": ["date"],
    },
)
def is_holiday(date: str) -> dict[str, Any]:
    """Fixed-date holidays are matched on the date itself, not the observed weekday."""
    moment = require_date(date, "date", allow_now=False)
    wd = weekday(moment)
    holiday = FIXED_HOLIDAYS.get((moment.month, moment.day)) or _floating_holiday(moment.month, moment.day, wd)
    return {
        "date": date,
        "is_holiday": holiday is not None,
        "holiday_name": holiday,
        "day_of_week": DAY_NAMES[wd][:3],
    }
