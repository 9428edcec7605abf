"""
Tests for KPI utility functions.
"""

import pandas as pd
import pytest
from finplanlab.core.results import LineItem, YearlyBalanceSheet, YearlyCashflow
from finplanlab.kpi import (
    cumulative_cashflow,
    first_deficit_year,
    lifetime_cashflow_totals,
    net_worth_at_age,
    net_worth_gap,
)


class TestKPIUtilities:
    """Test KPI utility functions."""

    @pytest.fixture
    def cashflow(self):
        return [
            YearlyCashflow(
                year=2025,
                age=40,
                amount=500.0,
                income=1000.0,
                expense=500.0,
                positives=[LineItem("Salary", "income", 1000.0, "salary")],
                negatives=[LineItem("Living", "expense", 500.0, "living")],
            ),
            YearlyCashflow(
                year=2026,
                age=41,
                amount=-300.0,
                income=1000.0,
                expense=500.0,
                asset_purchase=800.0,
                positives=[LineItem("Salary", "income", 1000.0, "salary")],
                negatives=[
                    LineItem("Living", "expense", 500.0, "living"),
                    LineItem("Car", "asset_purchase", 800.0, "car"),
                ],
            ),
            YearlyCashflow(year=2027, age=42, amount=-50.0),
        ]

    @pytest.fixture
    def balance_sheet(self):
        return [
            YearlyBalanceSheet(year=2025, age=40, cash=100.0, items={"cash": 100.0}, total_amount=100.0),
            YearlyBalanceSheet(
                year=2026,
                age=41,
                cash=-200.0,
                items={"cash": -200.0, "Car": 800.0},
                total_amount=600.0,
                asset_items=[LineItem("Car", "a.asset.general", 800.0, "car")],
            ),
        ]

    def test_lifetime_totals(self, cashflow):
        totals = lifetime_cashflow_totals(cashflow)
        assert totals["total_supply"] == pytest.approx(2000.0)
        assert totals["total_demand"] == pytest.approx(1800.0)
        assert totals["net_cashflow"] == pytest.approx(200.0)
        assert totals["supply"].to_dict("records") == [
            {"category": "income", "label": "Salary", "amount": 2000.0}
        ]
        demand = totals["demand"]
        assert list(demand["label"]) == ["Living", "Car"]
        assert list(demand["amount"]) == [1000.0, 800.0]

    def test_lifetime_totals_without_breakdown(self):
        series = [
            YearlyCashflow(year=2025, age=40, amount=300.0),
            YearlyCashflow(year=2026, age=41, amount=-100.0),
        ]
        totals = lifetime_cashflow_totals(series)
        assert totals["total_supply"] == 300.0
        assert totals["total_demand"] == 100.0

    def test_lifetime_totals_empty(self):
        totals = lifetime_cashflow_totals([])
        assert totals["total_supply"] == 0.0
        assert totals["supply"].empty

    def test_cumulative_cashflow(self, cashflow):
        cum = cumulative_cashflow(cashflow)
        assert cum.name == "cumulative_cashflow"
        assert cum.tolist() == pytest.approx([500.0, 200.0, 150.0])
        assert cum.index.tolist() == [2025, 2026, 2027]

    def test_first_deficit_year(self, cashflow):
        assert first_deficit_year(cashflow) == 2026
        assert first_deficit_year(cashflow[:1]) is None

    def test_first_deficit_year_accepts_frame(self):
        df = pd.DataFrame({"amount": [1.0, -1.0]}, index=pd.Index([2030, 2031], name="year"))
        assert first_deficit_year(df) == 2031

    def test_net_worth_gap(self, balance_sheet):
        gap = net_worth_gap(balance_sheet, 500.0)
        assert gap.tolist() == pytest.approx([-400.0, 100.0])

    def test_net_worth_at_age(self, balance_sheet):
        assert net_worth_at_age(balance_sheet, 41) == pytest.approx(600.0)
        assert net_worth_at_age(balance_sheet, 90) is None
