"""Date formatting tools - display formats, Unix timestamps, time zones and week numbers."""
from datetime import datetime, timezone
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
import math
import logging

from ...tool_decorator import Tool
from ...handler_wrappers import HandlerError
from .. import _runtime
from .._helpers import MS_PER_DAY, epoch_ms, iso_string
from . import CATEGORY
from ._common import DAY_NAMES, MONTH_NAMES, date_string, require_date, resolve_date, time_string, weekday

logger = logging.getLogger(__name__)

DATE_FORMATS = ("iso", "us", "eu", "long", "short", "unix", "relative", "custom")


def _relative(moment: datetime) -> str:
    diff = epoch_ms(_runtime.utc_now()) - epoch_ms(moment)
    if abs(diff) < 60_000:
        return "just now"
    suffix = "ago" if diff > 0 else "from now"
    minutes = abs(diff) / 60_000
    hours = minutes / 60
    days = hours / 24
    if days > 365:
        return f"{math.floor(days / 365)} years {suffix}"
    if days > 30:
        return f"{math.floor(days / 30)} months {suffix}"
    if days > 1:
        return f"{math.floor(days)} days {suffix}"
    if hours > 1:
        return f"{math.floor(hours)} hours {suffix}"
    return f"{math.floor(minutes)} minutes {suffix}"


def _custom(moment: datetime, pattern: str) -> str:
    # Each token is replaced once, first occurrence only
    for token, value in (
        ("YYYY", str(moment.year)),
        ("MM", f"{moment.month:02d}"),
        ("DD", f"{moment.day:02d}"),
        ("HH", f"{moment.hour:02d}"),
        ("mm", f"{moment.minute:02d}"),
        ("ss", f"{moment.second:02d}"),
    ):
        pattern = pattern.replace(token, value, 1)
    return pattern


@Tool(
    "date_formatter",
    CATEGORY,
    "Format dates in various formats",
    {
        "type": "object",
        "properties": {
            "date": {"type": "string", "description": "Date string or 'now'"},
            "format": {"type": "string", "enum": list(DATE_FORMATS)},
            "custom_format": {"type": "string", "description": "Custom format like 'DD/MM/YYYY'"},
        },
        "required": ["date", "format"],
    },
)
def date_formatter(date: str, format: str, custom_format: str | None = None) -> dict[str, Any]:
    """Render a date in one of several formats.

    An unparseable date is returned as ``{"error": "Invalid date"}``. The
    custom format understands YYYY, MM, DD, HH, mm and ss; without a pattern
    it falls back to ISO.
    """
    moment = resolve_date(date)
    if moment is None:
        return {"error": "Invalid date"}

    month = MONTH_NAMES[moment.month - 1]
    day_name = DAY_NAMES[weekday(moment)]
    match format:
        case "iso":
            formatted = iso_string(moment)
        case "us":
            formatted = f"{moment.month:02d}/{moment.day:02d}/{moment.year}"
        case "eu":
            formatted = f"{moment.day:02d}/{moment.month:02d}/{moment.year}"
        case "long":
            formatted = f"{day_name}, {month} {moment.day}, {moment.year}"
        case "short":
            formatted = f"{month[:3]} {moment.day}, {moment.year}"
        case "unix":
            formatted = str(math.floor(epoch_ms(moment) / 1000))
        case "relative":
            formatted = _relative(moment)
        case "custom":
            formatted = _custom(moment, custom_format) if custom_format else iso_string(moment)
        case _:
            raise HandlerError(f"Unknown format: {format}", hint=f"Use one of: {', '.join(DATE_FORMATS)}")

    return {"input": date, "formatted": formatted, "format": format, "day_of_week": day_name, "timezone": "UTC"}


@Tool(
    "unix_timestamp",
    CATEGORY,
    "Convert between Unix timestamps and human dates",
    {
        "type": "object",
        "properties": {
            "value": {"type": "string", "description": "Unix timestamp (numbers) or date string"},
            "to": {"type": "string", "enum": ["timestamp", "date"]},
        },
        "required": ["value", "to"],
    },
)
def unix_timestamp(value: Any, to: str) -> dict[str, Any]:
    if to == "timestamp":
        moment = require_date(value, "value")
        ms = epoch_ms(moment)
        return {"input": value, "unix_timestamp": math.floor(ms / 1000), "unix_ms": ms}

    try:
        moment = datetime.fromtimestamp(float(value), tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError) as e:
        raise HandlerError("Invalid Unix timestamp", hint="Pass seconds since 1970-01-01 UTC", value=value) from e
    return {
        "input": value,
        "date": iso_string(moment),
        "formatted": date_string(moment),
        "time": time_string(moment),
    }


def _zone_time(moment: datetime, zone: ZoneInfo) -> str:
    """Long en-US form: "Monday, January 15, 2024 at 5:00:00 AM EST"."""
    local = moment.astimezone(zone)
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return (
        f"{DAY_NAMES[weekday(local)]}, {MONTH_NAMES[local.month - 1]} {local.day}, {local.year} "
        f"at {hour}:{local.minute:02d}:{local.second:02d} {meridiem} {local.tzname()}"
    )


@Tool(
    "timezone_converter",
    CATEGORY,
    "Convert time between timezones",
    {
        "type": "object",
        "properties": {
            "datetime": {"type": "string", "description": "ISO datetime or 'now'"},
            "from_timezone": {"type": "string", "description": "e.g. America/New_York"},
            "to_timezone": {"type": "string", "description": "e.g. Asia/Tokyo"},
        },
        "required": ["datetime", "from_timezone", "to_timezone"],
    },
)
def timezone_converter(datetime: str, from_timezone: str, to_timezone: str) -> dict[str, Any]:
    """Show one instant in two IANA zones.

    A datetime without an offset is read as UTC. Unknown zones and unparseable
    datetimes are returned as an "error" field.
    """
    moment = resolve_date(datetime)
    if moment is None:
        return {"error": "Invalid datetime. Use ISO format like 2024-01-15T10:30:00Z or 'now'"}
    try:
        source, target = ZoneInfo(from_timezone), ZoneInfo(to_timezone)
    except (ZoneInfoNotFoundError, ValueError, TypeError) as e:
        logger.debug("timezone_converter: %s", e)
        return {"error": 'Invalid timezone. Use IANA format like "America/New_York", "Europe/London", "Asia/Tokyo"'}

    return {
        "original": datetime,
        "from_timezone": from_timezone,
        "to_timezone": to_timezone,
        "from_time": _zone_time(moment, source),
        "to_time": _zone_time(moment, target),
        "utc": iso_string(moment),
    }


@Tool(
    "week_number",
    CATEGORY,
    "Get week number of a date",
    {
        "type": "object",
        "properties": {"date": {"type": "string", "description": "Date string or 'now'"}},
        "required": ["date"],
    },
)
def week_number(date: str) -> dict[str, Any]:
    """Week of year counting from the week containing January 1 (Sunday-based, not ISO)."""
    moment = require_date(date, "date")
    start_of_year = moment.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)
    elapsed_days = (epoch_ms(moment) - epoch_ms(start_of_year)) / MS_PER_DAY
    return {
        "date": date_string(moment),
        "week_number": math.ceil((elapsed_days + weekday(start_of_year) + 1) / 7),
        "year": moment.year,
        "day_of_year": math.floor(elapsed_days) + 1,
    }
