"""Tests for the Business & Finance tools."""
from __future__ import annotations

from .helpers import call_tool, tool_error


class TestAccountingTools:
    """Tests for invoices, margins, cash flow, break-even and budgets."""

    def test_invoice(self, client, frozen_now):
        args = {
            "company_name": "Acme",
            "client_name": "Globex",
            "items": [{"name": "Widget", "quantity": 2, "price": 10}],
            "tax_rate": 10,
        }
        result = call_tool(client, "invoice_generator", args)
        assert result == {
            "invoice_number": "INV-20000000",
            "company": "Acme",
            "client": "Globex",
            "date": "2024-01-15",
            "due_date": "2024-02-14",
            "items": [{"name": "Widget", "quantity": 2, "price": 10, "total": 20}],
            "subtotal": 20,
            "tax_rate": 10,
            "tax_amount": 2,
            "total": 22,
            "currency": "USD",
            "status": "draft",
        }

    def test_invoice_custom_terms(self, client, frozen_now):
        args = {"company_name": "A", "client_name": "B", "items": [], "due_days": 7, "currency": "EUR"}
        result = call_tool(client, "invoice_generator", args)
        assert result["due_date"] == "2024-01-22"
        assert result["currency"] == "EUR"
        assert result["total"] == 0

    def test_profit_margin_without_variable_costs(self, client):
        result = call_tool(client, "profit_margin_calculator", {"cost": 60, "revenue": 100})
        assert result["gross_profit"] == 40
        assert result["gross_margin_percent"] == 40
        assert result["markup_percent"] == 66.67
        assert result["break_even_units"] == "N/A (no variable costs provided)"

    def test_profit_margin_break_even(self, client):
        args = {"cost": 600, "revenue": 1000, "fixed_costs": 1000, "variable_cost_per_unit": 60, "units_sold": 10}
        result = call_tool(client, "profit_margin_calculator", args)
        assert result["break_even_units"] == 25
        assert result["net_profit"] == -600
        assert result["net_margin_percent"] == -60

    def test_profit_margin_zero_revenue(self, client):
        """Margins against zero revenue are undefined and come back as null."""
        result = call_tool(client, "profit_margin_calculator", {"cost": 50, "revenue": 0})
        assert result["gross_profit"] == -50
        assert result["gross_margin_percent"] is None
        assert result["net_margin_percent"] is None
        assert result["markup_percent"] == -100
        assert result["roi_percent"] == -100

    def test_profit_margin_zero_cost(self, client):
        result = call_tool(client, "profit_margin_calculator", {"cost": 0, "revenue": 100})
        assert result["gross_margin_percent"] == 100
        assert result["markup_percent"] is None
        assert result["roi_percent"] is None

    def test_profit_margin_no_units_sold(self, client):
        args = {"cost": 10, "revenue": 100, "fixed_costs": 50, "variable_cost_per_unit": 5, "units_sold": 0}
        result = call_tool(client, "profit_margin_calculator", args)
        assert result["break_even_units"] == "N/A (no variable costs provided)"

    def test_cash_flow(self, client):
        args = {
            "income": [{"name": "Salary", "amount": 4000}, {"name": "Freelance", "amount": 1000}],
            "expenses": [{"name": "Rent", "amount": 1500}, {"name": "Food", "amount": 500}],
        }
        result = call_tool(client, "cash_flow_analyzer", args)
        assert result["total_income"] == 5000
        assert result["net_cash_flow"] == 3000
        assert result["status"] == "Positive"
        assert result["expense_ratio"] == "40%"
        assert result["savings_rate"] == "60%"
        assert result["largest_expense"] == {"name": "Rent", "amount": 1500}
        assert [i["percent"] for i in result["income_breakdown"]] == [80, 20]
        assert [e["percent"] for e in result["expense_breakdown"]] == [75, 25]

    def test_cash_flow_empty(self, client):
        """Ratios against a zero total come out as 0 rather than failing."""
        result = call_tool(client, "cash_flow_analyzer", {"income": [], "expenses": []})
        assert result["expense_ratio"] == "0%"
        assert result["largest_expense"] is None

    def test_break_even(self, client):
        args = {"fixed_costs": 1000, "price_per_unit": 50, "variable_cost_per_unit": 30}
        result = call_tool(client, "break_even_analysis", args)
        assert result["contribution_margin"] == 20
        assert result["break_even_units"] == 50
        assert result["break_even_revenue"] == 2500
        assert result["contribution_margin_ratio"] == "40%"

    def test_break_even_without_margin(self, client):
        """Price equal to variable cost never breaks even."""
        args = {"fixed_costs": 100, "price_per_unit": 30, "variable_cost_per_unit": 30}
        result = call_tool(client, "break_even_analysis", args)
        assert result["contribution_margin"] == 0
        assert result["break_even_units"] is None
        assert result["break_even_revenue"] is None
        assert result["contribution_margin_ratio"] == "0%"

    def test_break_even_zero_price(self, client):
        args = {"fixed_costs": 100, "price_per_unit": 0, "variable_cost_per_unit": 10}
        result = call_tool(client, "break_even_analysis", args)
        assert result["break_even_units"] == -10
        assert result["contribution_margin_ratio"] == "N/A"

    def test_budget_default_rule(self, client):
        result = call_tool(client, "budget_planner", {"monthly_income": 5000})
        assert [b["amount"] for b in result["budget"]] == [2500, 1500, 1000]
        assert result["annual_income"] == 60000
        assert result["annual_savings"] == 12000

    def test_budget_custom_without_savings(self, client):
        splits = [{"name": "Rent", "percent": 40}, {"name": "Fun", "percent": 60}]
        result = call_tool(client, "budget_planner", {"monthly_income": 1000, "rule": "custom", "custom_splits": splits})
        assert result["budget"] == [
            {"name": "Rent", "percent": 40, "amount": 400},
            {"name": "Fun", "percent": 60, "amount": 600},
        ]
        assert result["annual_savings"] == "N/A"


class TestInvestmentTools:
    """Tests for NPV, stock returns, ROI, pay conversion and KPIs."""

    def test_npv(self, client):
        args = {"initial_investment": 1000, "cash_flows": [500, 500, 500], "discount_rate_percent": 10}
        result = call_tool(client, "npv_calculator", args)
        assert result["total_pv"] == 1243.43
        assert result["npv"] == 243.43
        assert result["decision"] == "Accept (positive NPV)"
        assert result["cash_flows"][0] == {"year": 1, "cash_flow": 500, "present_value": 454.55}

    def test_negative_npv(self, client):
        args = {"initial_investment": 1000, "cash_flows": [100], "discount_rate_percent": 5}
        assert call_tool(client, "npv_calculator", args)["decision"] == "Reject (negative NPV)"

    def test_stock_return(self, client):
        args = {
            "buy_price": 10,
            "sell_price": 15,
            "shares": 100,
            "dividends_received": 50,
            "buy_commission": 10,
            "sell_commission": 10,
        }
        result = call_tool(client, "stock_return_calculator", args)
        assert result["cost_basis"] == 1010
        assert result["proceeds"] == 1540
        assert result["profit_loss"] == 530
        assert result["return_percent"] == 52.48
        assert result["outcome"] == "Profit"

    def test_roi(self, client):
        result = call_tool(client, "roi_calculator", {"investment": 1000, "returns": 2200, "time_period_months": 12})
        assert result["profit"] == 1200
        assert result["roi_percent"] == 120
        assert result["annualized_roi_percent"] == 120
        assert result["payback_months"] == 10

    def test_roi_without_profit(self, client):
        result = call_tool(client, "roi_calculator", {"investment": 1000, "returns": 1000})
        assert result["profit"] == 0
        assert result["payback_months"] is None

    def test_stock_return_zero_cost_basis(self, client):
        result = call_tool(client, "stock_return_calculator", {"buy_price": 0, "sell_price": 5, "shares": 10})
        assert result["cost_basis"] == 0
        assert result["proceeds"] == 50
        assert result["return_percent"] is None
        assert result["outcome"] == "Profit"

    def test_roi_without_investment(self, client):
        result = call_tool(client, "roi_calculator", {"investment": 0, "returns": 500})
        assert result["profit"] == 500
        assert result["roi_percent"] is None
        assert result["annualized_roi_percent"] is None
        assert result["payback_months"] == 0

    def test_salary_to_hourly(self, client):
        result = call_tool(client, "salary_to_hourly", {"amount": 52000, "from": "annually"})
        assert result == {
            "input": "52000 annually",
            "hourly": 25,
            "daily": 200,
            "weekly": 1000,
            "biweekly": 2000,
            "monthly": 4333.33,
            "annually": 52000,
        }

    def test_unknown_pay_period(self, client):
        error = tool_error(client, "salary_to_hourly", {"amount": 1, "from": "yearly"})
        assert error["code"] == -32000
        assert "Unknown pay period: yearly" in error["message"]

    def test_kpis(self, client):
        args = {
            "revenue": 10000,
            "customers": 100,
            "new_customers": 20,
            "lost_customers": 5,
            "marketing_spend": 2000,
            "support_tickets": 50,
            "resolved_tickets": 45,
        }
        result = call_tool(client, "kpi_tracker", args)
        assert result["arpu"] == 100
        assert result["churn_rate_percent"] == 5
        assert result["growth_rate_percent"] == 15
        assert result["customer_acquisition_cost"] == 100
        assert result["lifetime_value"] == 2000
        assert result["ltv_cac_ratio"] == 20
        assert result["ticket_resolution_rate"] == "90%"

    def test_kpis_minimal(self, client):
        result = call_tool(client, "kpi_tracker", {"revenue": 500, "customers": 10})
        assert result["ltv_cac_ratio"] == "N/A"
        assert result["ticket_resolution_rate"] == "0%"

    def test_kpis_without_customers(self, client):
        """Per-customer figures are null when there are no customers."""
        result = call_tool(client, "kpi_tracker", {"revenue": 1000, "customers": 0, "lost_customers": 3})
        assert result["arpu"] is None
        assert result["churn_rate_percent"] is None
        assert result["growth_rate_percent"] is None
        assert result["lifetime_value"] == 0
        assert result["ltv_cac_ratio"] == "N/A"
        assert result["ticket_resolution_rate"] == "0%"


class TestPlanningTemplates:
    """Tests for the business plan outline and SWOT grid."""

    def test_business_plan_outline(self, client):
        result = call_tool(client, "generate_business_plan_outline", {"business_name": "Acme", "industry": "SaaS"})
        assert result["business_type"] == "startup"
        assert len(result["outline"]) == 8
        assert result["estimated_pages"] == 16
        assert result["outline"][2]["points"][0] == "SaaS industry overview"

    def test_swot_default_industry(self, client):
        result = call_tool(client, "swot_template", {"business_name": "Acme"})
        assert result["business"] == "Acme"
        assert set(result["swot"]) == {"strengths", "weaknesses", "opportunities", "threats"}
        assert result["swot"]["opportunities"]["prompts"][0] == "Emerging trends in your industry?"
