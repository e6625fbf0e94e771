"""Investment and performance tools - NPV, stock returns, ROI, pay rates and KPIs."""
from typing import Any
import math

from ...tool_decorator import Tool
from ...handler_wrappers import HandlerError
from .._helpers import num_str
from . import CATEGORY
from ._common import money, percent, rate, safe_div

PAY_PERIODS = ("hourly", "daily", "weekly", "biweekly", "monthly", "annually")


@Tool(
    "npv_calculator",
    CATEGORY,
    "Calculate Net Present Value (NPV) of cash flows",
    {
        "type": "object",
        "properties": {
            "initial_investment": {"type": "number"},
            "cash_flows": {"type": "array", "items": {"type": "number"}},
            "discount_rate_percent": {"type": "number"},
        },
        "required": ["initial_investment", "cash_flows", "discount_rate_percent"],
    },
)
def npv_calculator(
    initial_investment: float,
    cash_flows: list[float],
    discount_rate_percent: float,
) -> dict[str, Any]:
    """Cash flows are end-of-year amounts starting in year 1."""
    rate = discount_rate_percent / 100
    present_values = [cf / (1 + rate) ** year for year, cf in enumerate(cash_flows, start=1)]
    total_pv = sum(present_values)
    npv = total_pv - initial_investment
    return {
        "initial_investment": initial_investment,
        "discount_rate_percent": discount_rate_percent,
        "cash_flows": [
            {"year": year, "cash_flow": cf, "present_value": money(pv)}
            for year, (cf, pv) in enumerate(zip(cash_flows, present_values), start=1)
        ],
        "total_pv": money(total_pv),
        "npv": money(npv),
        "decision": "Accept (positive NPV)" if npv > 0 else "Reject (negative NPV)",
    }


@Tool(
    "stock_return_calculator",
    CATEGORY,
    "Calculate stock investment returns",
    {
        "type": "object",
        "properties": {
            "buy_price": {"type": "number"},
            "sell_price": {"type": "number"},
            "shares": {"type": "number"},
            "dividends_received": {"type": "number", "default": 0},
            "buy_commission": {"type": "number", "default": 0},
            "sell_commission": {"type": "number", "default": 0},
        },
        "required": ["buy_price", "sell_price", "shares"],
    },
)
def stock_return_calculator(
    buy_price: float,
    sell_price: float,
    shares: float,
    dividends_received: float = 0,
    buy_commission: float = 0,
    sell_commission: float = 0,
) -> dict[str, Any]:
    cost_basis = buy_price * shares + buy_commission
    proceeds = sell_price * shares - sell_commission + dividends_received
    profit = proceeds - cost_basis
    return {
        "shares": shares,
        "buy_price": buy_price,
        "sell_price": sell_price,
        "cost_basis": money(cost_basis),
        "proceeds": money(proceeds),
        "profit_loss": money(profit),
        "return_percent": rate(profit, cost_basis),
        "outcome": "Profit" if profit >= 0 else "Loss",
    }


@Tool(
    "roi_calculator",
    CATEGORY,
    "Calculate ROI for any investment",
    {
        "type": "object",
        "properties": {
            "investment": {"type": "number"},
            "returns": {"type": "number"},
            "time_period_months": {"type": "number", "default": 12},
        },
        "required": ["investment", "returns"],
    },
)
def roi_calculator(investment: float, returns: float, time_period_months: float = 12) -> dict[str, Any]:
    """payback_months is null when the investment makes no profit at all.

    With nothing invested the ROI figures are null as well.
    """
    profit = returns - investment
    roi = profit / investment * 100 if investment else None
    return {
        "investment": investment,
        "returns": returns,
        "time_period_months": time_period_months,
        "profit": money(profit),
        "roi_percent": money(roi),
        "annualized_roi_percent": money(roi * (12 / time_period_months)) if roi is not None and time_period_months else None,
        "payback_months": math.ceil(investment / (profit / time_period_months)) if profit and time_period_months else None,
    }


@Tool(
    "salary_to_hourly",
    CATEGORY,
    "Convert salary to hourly rate and vice versa",
    {
        "type": "object",
        "properties": {
            "amount": {"type": "number"},
            "from": {"type": "string", "enum": list(PAY_PERIODS)},
            "hours_per_week": {"type": "number", "default": 40},
            "weeks_per_year": {"type": "number", "default": 52},
        },
        "required": ["amount", "from"],
    },
)
def salary_to_hourly(
    amount: float,
    from_: str,
    hours_per_week: float = 40,
    weeks_per_year: float = 52,
) -> dict[str, Any]:
    """Express a pay amount in every period. A working week is five days."""
    to_annual = {
        "hourly": hours_per_week * weeks_per_year,
        "daily": 5 * weeks_per_year,
        "weekly": weeks_per_year,
        "biweekly": 26,
        "monthly": 12,
        "annually": 1,
    }
    if from_ not in to_annual:
        raise HandlerError(f"Unknown pay period: {from_}", hint=f"Use one of: {', '.join(PAY_PERIODS)}")

    annual = amount * to_annual[from_]
    return {
        "input": f"{num_str(amount)} {from_}",
        "hourly": money(annual / (hours_per_week * weeks_per_year)),
        "daily": money(annual / (5 * weeks_per_year)),
        "weekly": money(annual / weeks_per_year),
        "biweekly": money(annual / 26),
        "monthly": money(annual / 12),
        "annually": money(annual),
    }


@Tool(
    "kpi_tracker",
    CATEGORY,
    "Calculate and track KPIs from business metrics",
    {
        "type": "object",
        "properties": {
            "revenue": {"type": "number"},
            "customers": {"type": "number"},
            "new_customers": {"type": "number"},
            "lost_customers": {"type": "number"},
            "marketing_spend": {"type": "number"},
            "support_tickets": {"type": "number"},
            "resolved_tickets": {"type": "number"},
        },
        "required": ["revenue", "customers"],
    },
)
def kpi_tracker(
    revenue: float,
    customers: float,
    new_customers: float = 0,
    lost_customers: float = 0,
    marketing_spend: float = 0,
    support_tickets: float = 0,
    resolved_tickets: float = 0,
) -> dict[str, Any]:
    """Unit economics. LTV is ARPU over churn; CAC is spend per new customer.

    Per-customer figures are None when there are no customers.
    """
    arpu = safe_div(revenue, customers)
    churn_rate = safe_div(lost_customers * 100, customers)
    growth_rate = safe_div((new_customers - lost_customers) * 100, customers)
    cac = marketing_spend / new_customers if marketing_spend > 0 and new_customers > 0 else 0
    ltv = arpu / (churn_rate / 100) if arpu is not None and churn_rate is not None and churn_rate > 0 else 0
    return {
        "revenue": revenue,
        "customers": customers,
        "arpu": money(arpu),
        "churn_rate_percent": money(churn_rate),
        "growth_rate_percent": money(growth_rate),
        "customer_acquisition_cost": money(cac),
        "lifetime_value": money(ltv),
        "ltv_cac_ratio": money(ltv / cac) if cac > 0 else "N/A",
        "ticket_resolution_rate": f"{percent(resolved_tickets, support_tickets) if support_tickets > 0 else 0}%",
    }
