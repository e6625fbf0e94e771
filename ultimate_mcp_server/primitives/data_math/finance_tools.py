"""Everyday finance calculators - compound interest, loans, tips and tax."""
from typing import Any

from ...tool_decorator import Tool
from ...handler_wrappers import HandlerError
from .._helpers import plain_number, round_half_up
from . import CATEGORY

MAX_BREAKDOWN_YEARS = 30


@Tool(
    "compound_interest",
    CATEGORY,
    "Calculate compound interest",
    {
        "type": "object",
        "properties": {
            "principal": {"type": "number"},
            "rate_percent": {"type": "number"},
            "years": {"type": "number"},
            "compounds_per_year": {"type": "number", "default": 12},
        },
        "required": ["principal", "rate_percent", "years"],
    },
)
def compound_interest(
    principal: float,
    rate_percent: float,
    years: float,
    compounds_per_year: float = 12,
) -> dict[str, Any]:
    """Final amount after ``years``, with a yearly balance table (first 30 years only)."""
    growth = 1 + rate_percent / 100 / compounds_per_year

    def balance(t: float) -> float:
        return principal * growth ** (compounds_per_year * t)

    amount = balance(years)
    interest = amount - principal
    breakdown = [
        {"year": year, "balance": round_half_up(balance(year), 2)}
        for year in range(1, int(min(years, MAX_BREAKDOWN_YEARS)) + 1)
    ]
    return {
        "principal": principal,
        "rate_percent": rate_percent,
        "years": years,
        "compounds_per_year": compounds_per_year,
        "final_amount": round_half_up(amount, 2),
        "total_interest": round_half_up(interest, 2),
        "interest_earned_percent": round_half_up(interest / principal * 100, 2) if principal else None,
        "yearly_breakdown": breakdown,
    }


@Tool(
    "loan_calculator",
    CATEGORY,
    "Calculate monthly loan payment, total interest",
    {
        "type": "object",
        "properties": {
            "principal": {"type": "number"},
            "annual_rate_percent": {"type": "number"},
            "years": {"type": "number"},
        },
        "required": ["principal", "annual_rate_percent", "years"],
    },
)
def loan_calculator(principal: float, annual_rate_percent: float, years: float) -> dict[str, Any]:
    r = annual_rate_percent / 100 / 12
    n = years * 12
    if n <= 0:
        raise HandlerError("Loan term must be positive", hint="Pass years greater than 0", years=years)
    if r == 0:
        monthly = principal / n
    else:
        factor = (1 + r) ** n
        monthly = principal * r * factor / (factor - 1)
    total = monthly * n
    return {
        "principal": principal,
        "annual_rate_percent": annual_rate_percent,
        "years": years,
        "monthly_payment": round_half_up(monthly, 2),
        "total_payment": round_half_up(total, 2),
        "total_interest": round_half_up(total - principal, 2),
        "total_months": plain_number(n),
    }


@Tool(
    "tip_calculator",
    CATEGORY,
    "Calculate tip and split bill",
    {
        "type": "object",
        "properties": {
            "bill_amount": {"type": "number"},
            "tip_percent": {"type": "number", "default": 18},
            "people": {"type": "number", "default": 1},
        },
        "required": ["bill_amount"],
    },
)
def tip_calculator(bill_amount: float, tip_percent: float = 18, people: int = 1) -> dict[str, Any]:
    tip = bill_amount * tip_percent / 100
    total = bill_amount + tip
    return {
        "bill_amount": bill_amount,
        "tip_percent": tip_percent,
        "people": people,
        "tip_amount": round_half_up(tip, 2),
        "total": round_half_up(total, 2),
        "per_person": round_half_up(total / people, 2) if people else None,
        "tip_per_person": round_half_up(tip / people, 2) if people else None,
    }


@Tool(
    "tax_calculator",
    CATEGORY,
    "Calculate tax amount and total",
    {
        "type": "object",
        "properties": {
            "amount": {"type": "number"},
            "tax_rate_percent": {"type": "number"},
            "tax_type": {"type": "string", "enum": ["add_tax", "remove_tax"], "default": "add_tax"},
        },
        "required": ["amount", "tax_rate_percent"],
    },
)
def tax_calculator(amount: float, tax_rate_percent: float, tax_type: str = "add_tax") -> dict[str, Any]:
    """add_tax treats ``amount`` as net, anything else treats it as gross."""
    if tax_type == "add_tax":
        tax = amount * tax_rate_percent / 100
        return {
            "pre_tax": amount,
            "tax_rate_percent": tax_rate_percent,
            "tax_amount": round_half_up(tax, 2),
            "total": round_half_up(amount + tax, 2),
        }

    pre_tax = amount / (1 + tax_rate_percent / 100)
    return {
        "total": amount,
        "tax_rate_percent": tax_rate_percent,
        "tax_amount": round_half_up(amount - pre_tax, 2),
        "pre_tax": round_half_up(pre_tax, 2),
    }
