"""Number and date formatting shared by the tool modules.

Tool results are rendered as JSON text for the client, so numbers follow the
conventions clients of this server expect: an integral float is reported as an
integer (50, not 50.0) and rounding is half-up.
"""
from datetime import datetime, timezone
from typing import Any
import math
import re

# Tried in order after datetime.fromisoformat() gives up
_DATE_FORMATS = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%a, %d %b %Y %H:%M:%S GMT",
)

MS_PER_DAY = 86_400_000

_HEX_COLOR = re.compile(r"[0-9a-fA-F]{6}|[0-9a-fA-F]{3}")


def plain_number(value: Any) -> Any:
    """Return an integral float as int, anything else unchanged."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return value


def round_half_up(value: float, digits: int = 0) -> int | float:
    """Round to ``digits`` decimals, halves toward +infinity.

    Non-finite values are returned as-is; serializing them fails later and the
    call is reported as a tool error.
    """
    if isinstance(value, bool) or not math.isfinite(value):
        return value
    factor = 10 ** digits
    return plain_number(math.floor(value * factor + 0.5) / factor)


def num_str(value: Any) -> str:
    """Render a number the way it reads in a sentence: 50 not 50.0."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return str(plain_number(value))
    return str(value)


def to_fixed(value: float, digits: int = 2) -> str:
    return f"{value:.{digits}f}"


def locale_string(value: float, max_decimals: int = 3) -> str:
    """en-US grouping: 1234567.891 -> "1,234,567.891"."""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "∞" if value > 0 else "-∞"
        text = f"{value:,.{max_decimals}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return "0" if text == "-0" else text
    return f"{value:,}"


def to_exponential(value: float, digits: int) -> str:
    """Scientific notation without exponent padding: 12345 -> "1.2345e+4"."""
    mantissa, exponent = f"{value:.{digits}e}".split("e")
    exp = int(exponent)
    return f"{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp)}"


def to_int(value: Any, default: int = 0) -> int:
    """Leading-integer parse of a string or number ("42px" -> 42)."""
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return int(value) if math.isfinite(value) else default
    text = str(value).strip()
    sign = ""
    if text and text[0] in "+-":
        sign, text = text[:1], text[1:]
    digits = ""
    for ch in text:
        if not ch.isdigit():
            break
        digits += ch
    return int(sign + digits) if digits else default


def parse_date(value: Any) -> datetime | None:
    """Parse a date string (or epoch milliseconds) into an aware UTC datetime.

    Naive inputs are read as UTC. Returns None when the value is not a date.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    candidate = text[:-1] + "+00:00" if text[-1] in "Zz" else text
    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError:
        parsed = _parse_with_formats(text)
        if parsed is None:
            return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _parse_with_formats(text: str) -> datetime | None:
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def iso_string(moment: datetime) -> str:
    """UTC ISO-8601 with millisecond precision: 2024-01-15T00:00:00.000Z."""
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def iso_date(moment: datetime) -> str:
    return iso_string(moment)[:10]


def epoch_ms(moment: datetime) -> int:
    return math.floor(moment.timestamp() * 1000)


def parse_hex_color(color: str) -> tuple[int, int, int] | None:
    """Parse "#3B82F6" or "3b8" into (r, g, b). None when it is not a hex colour."""
    digits = color.replace("#", "", 1).strip()
    if not _HEX_COLOR.fullmatch(digits):
        return None
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
