"""
Tests for the savings account strategy.
"""

import pytest
from finplanlab.core.errors import FinPlanWarning
from finplanlab.core.instruments import SavingAccount
from finplanlab.strategies.valuation import ValuationSaving, contribution_for, terminal_value
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st


def make_saving(**overrides):
    params = dict(
        id="fund",
        title="Fund",
        start_year=2025,
        end_year=2026,
        amount=100.0,
        frequency="monthly",
        interest_rate=0.03,
    )
    params.update(overrides)
    return SavingAccount(**params)


class TestSavingAccount:
    """Test compounding, contributions and maturity."""

    def test_monthly_reference_example(self, ctx):
        out = ValuationSaving().simulate(make_saving(), ctx)
        assert out["flows"]["savings"][:3] == pytest.approx([1200.0, 1200.0, 0.0])
        assert out["value"][:2] == pytest.approx([1200.0, 1200.0 * 1.03 + 1200.0])
        assert out["flows"]["saving_maturity"][2] == pytest.approx(2436.0)
        assert out["flows"]["saving_maturity"].sum() == pytest.approx(2436.0)
        assert out["active"][:2].all()
        assert not out["active"][2:].any()
        assert out["events"][0].kind == "maturity"
        assert out["events"][0].year == 2027

    def test_current_amount_compounds(self, ctx):
        acc = make_saving(current_amount=1000.0, amount=0.0, interest_rate=0.1, end_year=2027)
        out = ValuationSaving().simulate(acc, ctx)
        assert out["value"][:3] == pytest.approx([1000.0, 1100.0, 1210.0])
        assert "savings" not in out["flows"]
        assert out["flows"]["saving_maturity"][3] == pytest.approx(1210.0)

    def test_one_time_contribution(self, ctx):
        acc = make_saving(frequency="one_time", amount=5000.0, interest_rate=0.0, end_year=2029)
        out = ValuationSaving().simulate(acc, ctx)
        assert out["flows"]["savings"][:5] == pytest.approx([5000.0, 0, 0, 0, 0])
        assert out["flows"]["saving_maturity"][5] == pytest.approx(5000.0)

    def test_contribution_growth_is_separate_from_interest(self):
        acc = make_saving(frequency="yearly", amount=1000.0, yearly_growth_rate=0.1)
        assert contribution_for(acc, 0) == pytest.approx(1000.0)
        assert contribution_for(acc, 2) == pytest.approx(1210.0)
        assert terminal_value(acc) == pytest.approx(1000.0 * 1.03 + 1100.0)

    def test_maturity_outside_projection(self, ctx):
        acc = make_saving(start_year=2015, end_year=2020)
        out = ValuationSaving().simulate(acc, ctx)
        assert out["flows"] == {}
        assert not out["active"].any()

    def test_started_before_projection(self, ctx):
        acc = make_saving(start_year=2024, end_year=2025, interest_rate=0.0)
        out = ValuationSaving().simulate(acc, ctx)
        assert out["value"][0] == pytest.approx(2400.0)
        assert out["flows"]["savings"][0] == pytest.approx(1200.0)
        assert out["flows"]["saving_maturity"][1] == pytest.approx(2400.0)

    def test_unknown_frequency_warns(self, ctx):
        with pytest.warns(FinPlanWarning, match="unknown frequency"):
            ValuationSaving().prepare(make_saving(id="odd", frequency="weekly"), ctx)

    def test_empty_window(self, ctx):
        acc = make_saving(id="empty", start_year=2030, end_year=2029)
        with pytest.warns(FinPlanWarning, match="ignored"):
            ValuationSaving().prepare(acc, ctx)
        assert ValuationSaving().simulate(acc, ctx)["flows"] == {}
        assert terminal_value(acc) == 0.0


class TestSavingProperties:
    """Maturity payout equals the independently compounded balance."""

    @given(
        current=st.floats(min_value=0.0, max_value=1e6, allow_nan=False),
        amount=st.floats(min_value=1.0, max_value=1e5, allow_nan=False),
        rate=st.floats(min_value=0.0, max_value=0.15, allow_nan=False),
        growth=st.floats(min_value=0.0, max_value=0.1, allow_nan=False),
        years=st.integers(min_value=1, max_value=30),
        frequency=st.sampled_from(["monthly", "yearly", "one_time"]),
    )
    @settings(
        max_examples=150,
        deadline=None,
        suppress_health_check=[HealthCheck.function_scoped_fixture],
    )
    def test_maturity_matches_closed_form(
        self, ctx, current, amount, rate, growth, years, frequency
    ):
        acc = SavingAccount(
            id="p",
            start_year=2025,
            end_year=2025 + years - 1,
            current_amount=current,
            amount=amount,
            frequency=frequency,
            interest_rate=rate,
            yearly_growth_rate=growth,
        )
        expected = current * (1 + rate) ** (years - 1) + sum(
            contribution_for(acc, k) * (1 + rate) ** (years - 1 - k) for k in range(years)
        )
        out = ValuationSaving().simulate(acc, ctx)
        assert out["flows"]["saving_maturity"][years] == pytest.approx(expected, rel=1e-9, abs=1e-6)
        assert out["value"][years - 1] == pytest.approx(expected, rel=1e-9, abs=1e-6)
