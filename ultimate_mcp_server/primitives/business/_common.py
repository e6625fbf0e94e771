"""Small numeric helpers for the business tools."""
from .._helpers import round_half_up


def money(value: float | None) -> int | float | None:
    """Round to cents. None passes through."""
    if value is None:
        return None
    return round_half_up(value, 2)


def percent(part: float, whole: float) -> int | float:
    """part / whole as a percentage with two decimals; 0 when ``whole`` is 0."""
    if not whole:
        return 0
    return round_half_up(part / whole * 100, 2)


def rate(part: float, whole: float) -> int | float | None:
    """Like percent(), but None when ``whole`` is 0: the rate is undefined, not zero."""
    if not whole:
        return None
    return round_half_up(part / whole * 100, 2)


def safe_div(numerator: float, denominator: float) -> float | None:
    if not denominator:
        return None
    return numerator / denominator
