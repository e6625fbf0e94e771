"""Accounting tools - invoices, margins, cash flow, break-even and budgets."""
from datetime import timedelta
from typing import Any
import math

from ...tool_decorator import Tool
from .. import _runtime
from .._helpers import epoch_ms, iso_date
from . import CATEGORY
from ._common import money, percent, rate, safe_div

_LINE_ITEM_SCHEMA = {
    "type": "object",
    "properties": {"name": {"type": "string"}, "amount": {"type": "number"}},
}

BUDGET_RULES = {
    "50-30-20": [
        {"name": "Needs", "percent": 50},
        {"name": "Wants", "percent": 30},
        {"name": "Savings", "percent": 20},
    ],
    "70-20-10": [
        {"name": "Living", "percent": 70},
        {"name": "Savings", "percent": 20},
        {"name": "Debt/Giving", "percent": 10},
    ],
}


@Tool(
    "invoice_generator",
    CATEGORY,
    "Generate invoice data structure",
    {
        "type": "object",
        "properties": {
            "company_name": {"type": "string"},
            "client_name": {"type": "string"},
            "items": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "name": {"type": "string"},
                        "quantity": {"type": "number"},
                        "price": {"type": "number"},
                    },
                },
            },
            "tax_rate": {"type": "number", "default": 0},
            "currency": {"type": "string", "default": "USD"},
            "due_days": {"type": "number", "default": 30},
        },
        "required": ["company_name", "client_name", "items"],
    },
)
def invoice_generator(
    company_name: str,
    client_name: str,
    items: list[dict[str, Any]],
    tax_rate: float = 0,
    currency: str = "USD",
    due_days: int = 30,
) -> dict[str, Any]:
    """Draft invoice dated today (UTC). The number is derived from the current time."""
    now = _runtime.utc_now()
    subtotal = sum(item["quantity"] * item["price"] for item in items)
    tax = subtotal * tax_rate / 100
    return {
        "invoice_number": f"INV-{str(epoch_ms(now))[-8:]}",
        "company": company_name,
        "client": client_name,
        "date": iso_date(now),
        "due_date": iso_date(now + timedelta(days=int(due_days))),
        "items": [{**item, "total": money(item["quantity"] * item["price"])} for item in items],
        "subtotal": money(subtotal),
        "tax_rate": tax_rate,
        "tax_amount": money(tax),
        "total": money(subtotal + tax),
        "currency": currency,
        "status": "draft",
    }


@Tool(
    "profit_margin_calculator",
    CATEGORY,
    "Calculate profit margin, markup, and break-even",
    {
        "type": "object",
        "properties": {
            "cost": {"type": "number"},
            "revenue": {"type": "number"},
            "fixed_costs": {"type": "number", "default": 0},
            "variable_cost_per_unit": {"type": "number", "default": 0},
            "units_sold": {"type": "number", "default": 1},
        },
        "required": ["cost", "revenue"],
    },
)
def profit_margin_calculator(
    cost: float,
    revenue: float,
    fixed_costs: float = 0,
    variable_cost_per_unit: float = 0,
    units_sold: float = 1,
) -> dict[str, Any]:
    gross_profit = revenue - cost
    net_profit = gross_profit - fixed_costs
    break_even_units = 0
    if variable_cost_per_unit > 0:
        unit_price = safe_div(revenue, units_sold)
        if unit_price is not None and unit_price != variable_cost_per_unit:
            break_even_units = math.ceil(fixed_costs / (unit_price - variable_cost_per_unit))

    return {
        "revenue": revenue,
        "cost": cost,
        "gross_profit": money(gross_profit),
        "gross_margin_percent": rate(gross_profit, revenue),
        "markup_percent": rate(gross_profit, cost),
        "net_profit": money(net_profit),
        "net_margin_percent": rate(net_profit, revenue),
        "break_even_units": break_even_units or "N/A (no variable costs provided)",
        "roi_percent": rate(revenue - cost, cost),
    }


@Tool(
    "cash_flow_analyzer",
    CATEGORY,
    "Analyze cash flow from income and expense lists",
    {
        "type": "object",
        "properties": {
            "income": {"type": "array", "items": _LINE_ITEM_SCHEMA},
            "expenses": {"type": "array", "items": _LINE_ITEM_SCHEMA},
        },
        "required": ["income", "expenses"],
    },
)
def cash_flow_analyzer(income: list[dict[str, Any]], expenses: list[dict[str, Any]]) -> dict[str, Any]:
    """Totals, ratios and per-line shares. Ratios against a zero total are reported as 0."""
    total_income = sum(i["amount"] for i in income)
    total_expenses = sum(e["amount"] for e in expenses)
    net = total_income - total_expenses
    return {
        "total_income": money(total_income),
        "total_expenses": money(total_expenses),
        "net_cash_flow": money(net),
        "status": "Positive" if net >= 0 else "Negative",
        "expense_ratio": f"{percent(total_expenses, total_income)}%",
        "savings_rate": f"{percent(net, total_income)}%",
        "largest_expense": max(expenses, key=lambda e: e["amount"]) if expenses else None,
        "income_breakdown": [{**i, "percent": percent(i["amount"], total_income)} for i in income],
        "expense_breakdown": [{**e, "percent": percent(e["amount"], total_expenses)} for e in expenses],
    }


@Tool(
    "break_even_analysis",
    CATEGORY,
    "Calculate break-even point for a business",
    {
        "type": "object",
        "properties": {
            "fixed_costs": {"type": "number"},
            "price_per_unit": {"type": "number"},
            "variable_cost_per_unit": {"type": "number"},
        },
        "required": ["fixed_costs", "price_per_unit", "variable_cost_per_unit"],
    },
)
def break_even_analysis(fixed_costs: float, price_per_unit: float, variable_cost_per_unit: float) -> dict[str, Any]:
    """Units and revenue needed to cover fixed costs. With no margin per unit there is no break-even point."""
    contribution_margin = price_per_unit - variable_cost_per_unit
    break_even_units = safe_div(fixed_costs, contribution_margin)
    margin_ratio = rate(contribution_margin, price_per_unit)
    return {
        "fixed_costs": fixed_costs,
        "price_per_unit": price_per_unit,
        "variable_cost_per_unit": variable_cost_per_unit,
        "contribution_margin": money(contribution_margin),
        "break_even_units": math.ceil(break_even_units) if break_even_units is not None else None,
        "break_even_revenue": money(break_even_units * price_per_unit) if break_even_units is not None else None,
        "contribution_margin_ratio": f"{margin_ratio}%" if margin_ratio is not None else "N/A",
    }


@Tool(
    "budget_planner",
    CATEGORY,
    "Create a budget plan using 50/30/20 or custom rules",
    {
        "type": "object",
        "properties": {
            "monthly_income": {"type": "number"},
            "rule": {"type": "string", "enum": ["50-30-20", "70-20-10", "custom"], "default": "50-30-20"},
            "custom_splits": {"type": "array", "items": {"type": "object"}, "description": "[{name, percent}]"},
        },
        "required": ["monthly_income"],
    },
)
def budget_planner(
    monthly_income: float,
    rule: str = "50-30-20",
    custom_splits: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Split income by rule. Any rule other than the two presets uses ``custom_splits``."""
    splits = BUDGET_RULES.get(rule) or custom_splits or []
    budget = [{**s, "amount": money(monthly_income * s["percent"] / 100)} for s in splits]
    savings = next((b for b in budget if "sav" in str(b.get("name", "")).lower()), None)
    return {
        "monthly_income": monthly_income,
        "rule": rule,
        "budget": budget,
        "annual_income": monthly_income * 12,
        "annual_savings": money(savings["amount"] * 12) if savings else "N/A",
    }
