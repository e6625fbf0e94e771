"""Conversion tools - physical units and currencies (static rate table, no network)."""
from typing import Any

from ...tool_decorator import Tool
from ...handler_wrappers import HandlerError
from .._helpers import round_half_up
from . import CATEGORY

# Factor to the base unit of each category (m, kg, m2, l, m/s)
UNIT_FACTORS: dict[str, dict[str, float]] = {
    "length": {"m": 1, "km": 1000, "cm": 0.01, "mm": 0.001, "inch": 0.0254, "ft": 0.3048, "yard": 0.9144, "mile": 1609.34},
    "weight": {"kg": 1, "g": 0.001, "mg": 0.000001, "lb": 0.453592, "oz": 0.0283495, "ton": 1000},
    "area": {"m2": 1, "km2": 1e6, "cm2": 0.0001, "ft2": 0.092903, "acre": 4046.86, "hectare": 10000},
    "volume": {
        "l": 1, "ml": 0.001, "m3": 1000, "gallon": 3.78541, "quart": 0.946353,
        "cup": 0.236588, "tbsp": 0.0147868, "tsp": 0.00492892,
    },
    "speed": {"ms": 1, "kmh": 0.277778, "mph": 0.44704, "knot": 0.514444, "fps": 0.3048},
}

# Approximate units per 1 USD
USD_RATES: dict[str, float] = {
    "USD": 1, "EUR": 0.92, "GBP": 0.79, "JPY": 149.5, "CAD": 1.36, "AUD": 1.53,
    "CHF": 0.89, "CNY": 7.24, "INR": 83.1, "MXN": 17.1, "BRL": 4.97, "KRW": 1325,
    "SGD": 1.34, "HKD": 7.82, "NOK": 10.55, "SEK": 10.42, "DKK": 6.89,
    "NZD": 1.63, "ZAR": 18.63, "TRY": 30.5, "AED": 3.67, "SAR": 3.75, "THB": 35.1,
    "IDR": 15640, "MYR": 4.69, "PHP": 56.8, "PKR": 278, "EGP": 30.9, "NGN": 775,
}


def _to_celsius(value: float, unit: str) -> float:
    if unit == "c":
        return value
    if unit == "f":
        return (value - 32) * 5 / 9
    return value - 273.15


def _from_celsius(celsius: float, unit: str) -> float:
    if unit == "c":
        return celsius
    if unit == "f":
        return celsius * 9 / 5 + 32
    return celsius + 273.15


@Tool(
    "unit_converter",
    CATEGORY,
    "Convert between units: length, weight, temperature, area, volume, speed",
    {
        "type": "object",
        "properties": {
            "value": {"type": "number"},
            "from_unit": {"type": "string"},
            "to_unit": {"type": "string"},
            "category": {"type": "string", "enum": ["length", "weight", "temperature", "area", "volume", "speed"]},
        },
        "required": ["value", "from_unit", "to_unit", "category"],
    },
)
def unit_converter(value: float, from_unit: str, to_unit: str, category: str) -> dict[str, Any]:
    """Convert a value. Temperature units are c, f and k (anything else is read as k)."""
    if category == "temperature":
        result = _from_celsius(_to_celsius(value, from_unit), to_unit)
        return {"value": value, "from_unit": from_unit, "to_unit": to_unit, "result": round_half_up(result, 3)}

    factors = UNIT_FACTORS.get(category)
    if factors is None:
        raise HandlerError(
            f"Unknown category: {category}",
            hint=f"Use one of: temperature, {', '.join(UNIT_FACTORS)}",
        )
    if from_unit not in factors or to_unit not in factors:
        return {"error": f"Unknown unit. Available: {', '.join(factors)}"}

    result = value * factors[from_unit] / factors[to_unit]
    return {"value": value, "from_unit": from_unit, "to_unit": to_unit, "result": round_half_up(result, 6)}


@Tool(
    "currency_converter",
    CATEGORY,
    "Convert between major currencies using approximate rates",
    {
        "type": "object",
        "properties": {
            "amount": {"type": "number"},
            "from": {"type": "string", "description": "Currency code e.g. USD"},
            "to": {"type": "string", "description": "Currency code e.g. EUR"},
        },
        "required": ["amount", "from", "to"],
    },
)
def currency_converter(amount: float, from_: str, to: str) -> dict[str, Any]:
    source, target = from_.upper(), to.upper()
    if source not in USD_RATES:
        return {"error": f"Unknown currency: {from_}"}
    if target not in USD_RATES:
        return {"error": f"Unknown currency: {to}"}

    from_rate, to_rate = USD_RATES[source], USD_RATES[target]
    return {
        "amount": amount,
        "from": source,
        "to": target,
        "result": round_half_up(amount / from_rate * to_rate, 2),
        "rate": round_half_up(to_rate / from_rate, 4),
        "note": "Rates are approximate. Use a financial API for real-time rates.",
    }
