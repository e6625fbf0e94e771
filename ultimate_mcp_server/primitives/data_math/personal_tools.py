"""Personal calculators - body mass index and age."""
from datetime import datetime, timezone
from typing import Any
import math

from ...tool_decorator import Tool
from ...handler_wrappers import HandlerError
from .. import _runtime
from .._helpers import MS_PER_DAY, epoch_ms, parse_date, round_half_up
from . import CATEGORY


@Tool(
    "bmi_calculator",
    CATEGORY,
    "Calculate BMI and category",
    {
        "type": "object",
        "properties": {"weight_kg": {"type": "number"}, "height_cm": {"type": "number"}},
        "required": ["weight_kg", "height_cm"],
    },
)
def bmi_calculator(weight_kg: float, height_cm: float) -> dict[str, Any]:
    h2 = (height_cm / 100) ** 2
    bmi = weight_kg / h2
    if bmi < 18.5:
        category = "Underweight"
    elif bmi < 25:
        category = "Normal weight"
    elif bmi < 30:
        category = "Overweight"
    else:
        category = "Obese"
    return {
        "bmi": round_half_up(bmi, 1),
        "category": category,
        "ideal_weight_range": f"{round_half_up(18.5 * h2)}-{round_half_up(24.9 * h2)} kg",
        "height_cm": height_cm,
        "weight_kg": weight_kg,
    }


def _birthday_in(year: int, birth: datetime) -> datetime:
    # Feb 29 birthdays fall on Mar 1 in common years
    try:
        return datetime(year, birth.month, birth.day, tzinfo=timezone.utc)
    except ValueError:
        return datetime(year, 3, 1, tzinfo=timezone.utc)


@Tool(
    "age_calculator",
    CATEGORY,
    "Calculate age and days until next birthday",
    {
        "type": "object",
        "properties": {
            "birth_date": {"type": "string", "description": "Date in YYYY-MM-DD format"},
            "reference_date": {"type": "string", "description": "Optional reference date, defaults to today"},
        },
        "required": ["birth_date"],
    },
)
def age_calculator(birth_date: str, reference_date: str | None = None) -> dict[str, Any]:
    """Age as years/months/days. Month borrowing assumes 30-day months."""
    birth = parse_date(birth_date)
    ref = parse_date(reference_date) if reference_date else _runtime.utc_now()
    if birth is None or ref is None:
        raise HandlerError(
            "Invalid date",
            hint="Use YYYY-MM-DD format",
            birth_date=birth_date,
            reference_date=reference_date,
        )

    years = ref.year - birth.year
    months = ref.month - birth.month
    days = ref.day - birth.day
    if days < 0:
        months -= 1
        days += 30
    if months < 0:
        years -= 1
        months += 12

    next_birthday = _birthday_in(ref.year, birth)
    if next_birthday < ref:
        next_birthday = _birthday_in(ref.year + 1, birth)

    return {
        "years": years,
        "months": months,
        "days": days,
        "total_days_lived": math.floor((epoch_ms(ref) - epoch_ms(birth)) / MS_PER_DAY),
        "days_to_next_birthday": math.floor((epoch_ms(next_birthday) - epoch_ms(ref)) / MS_PER_DAY),
    }
