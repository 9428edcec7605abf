"""
Tests for national and accruing pension strategies.
"""

import pytest
from finplanlab.core.context import ProjectionConfig, ProjectionContext
from finplanlab.core.errors import FinPlanWarning
from finplanlab.core.instruments import Pension, Profile
from finplanlab.strategies.pension import PensionAccrual, PensionNational


class TestNationalPension:
    """Test inflation-indexed payouts."""

    def test_default_inflation(self, ctx):
        pension = Pension(
            id="np", type="national", start_year=2025, end_year=2027, monthly_amount=1000
        )
        out = PensionNational().simulate(pension, ctx)
        assert out["flows"]["pension"][:4] == pytest.approx([12_000.0, 12_300.0, 12_607.5, 0.0])
        assert not out["active"].any()

    def test_explicit_inflation(self, ctx):
        pension = Pension(
            id="np",
            type="national",
            start_year=2026,
            end_year=2030,
            monthly_amount=1000,
            inflation_rate=0.0,
        )
        out = PensionNational().simulate(pension, ctx)
        assert out["flows"]["pension"][0] == 0.0
        assert out["flows"]["pension"][1:6] == pytest.approx([12_000.0] * 5)
        assert out["flows"]["pension"][6:].sum() == 0.0

    def test_config_default_inflation(self):
        ctx = ProjectionContext.build(
            Profile(birth_year=1960),
            ProjectionConfig(current_year=2025, default_national_inflation_pct=10.0),
        )
        pension = Pension(
            id="np", type="national", start_year=2025, end_year=2026, monthly_amount=100
        )
        out = PensionNational().simulate(pension, ctx)
        assert out["flows"]["pension"][:2] == pytest.approx([1200.0, 1320.0])

    def test_payout_started_before_projection_keeps_indexing(self, ctx):
        pension = Pension(
            id="np",
            type="national",
            start_year=2023,
            end_year=2030,
            monthly_amount=1000,
            inflation_rate=10.0,
        )
        out = PensionNational().simulate(pension, ctx)
        assert out["flows"]["pension"][0] == pytest.approx(12_000.0 * 1.1**2)


def personal(**overrides):
    params = dict(
        id="pp",
        title="Private plan",
        type="personal",
        contribution_amount=100.0,
        contribution_frequency="monthly",
        contribution_start_year=2025,
        contribution_end_year=2026,
        return_rate=0.0,
        payment_start_year=2027,
        payment_end_year=2028,
    )
    params.update(overrides)
    return Pension(**params)


class TestAccrualPension:
    """Test accrual then equal decumulation."""

    def test_personal_contributions_are_expenses(self, ctx):
        out = PensionAccrual(debit_contributions=True).simulate(personal(), ctx)
        assert out["flows"]["expense"][:3] == pytest.approx([1200.0, 1200.0, 0.0])
        assert out["value"][:4] == pytest.approx([1200.0, 2400.0, 1200.0, 0.0])
        assert out["flows"]["pension"][:5] == pytest.approx([0.0, 0.0, 1200.0, 1200.0, 0.0])
        assert out["active"][:4].all()
        assert not out["active"][4:].any()

    def test_employer_funded_contributions_leave_cash_alone(self, ctx):
        pension = personal(type="retirement")
        out = PensionAccrual().simulate(pension, ctx)
        assert "expense" not in out["flows"]
        assert out["flows"]["pension"][2] == pytest.approx(1200.0)

    def test_return_and_gap_years_compound(self, ctx):
        pension = personal(
            type="severance",
            current_amount=0.0,
            contribution_amount=1000.0,
            contribution_frequency="yearly",
            contribution_end_year=2025,
            return_rate=10.0,
            payment_start_year=2027,
            payment_end_year=2027,
        )
        out = PensionAccrual().simulate(pension, ctx)
        # 2025: 1000, 2026 (gap): 1100, 2027: paid out in full
        assert out["value"][:3] == pytest.approx([1000.0, 1100.0, 0.0])
        assert out["flows"]["pension"][2] == pytest.approx(1100.0)
        assert out["events"][0].meta["monthly"] == pytest.approx(1100.0 / 12)

    def test_current_amount_is_included(self, ctx):
        pension = personal(current_amount=600.0, return_rate=0.0)
        out = PensionAccrual(debit_contributions=True).simulate(pension, ctx)
        assert out["flows"]["pension"][2] == pytest.approx(1500.0)

    def test_no_contribution_window(self, ctx):
        pension = personal(
            current_amount=24_000.0,
            contribution_start_year=0,
            contribution_end_year=0,
            payment_start_year=2030,
            payment_end_year=2031,
        )
        out = PensionAccrual(debit_contributions=True).simulate(pension, ctx)
        assert "expense" not in out["flows"]
        assert not out["active"][:5].any()
        assert out["flows"]["pension"][5:7] == pytest.approx([12_000.0, 12_000.0])

    def test_empty_payment_window_warns(self, ctx):
        pension = personal(id="bad", payment_start_year=2030, payment_end_year=2029)
        strategy = PensionAccrual()
        with pytest.warns(FinPlanWarning, match="no payout"):
            strategy.prepare(pension, ctx)
        out = strategy.simulate(pension, ctx)
        assert "pension" not in out["flows"]
        assert out["value"][1] == pytest.approx(2400.0)

    def test_contributions_into_payout_warn(self, ctx):
        pension = personal(id="late", contribution_end_year=2027)
        with pytest.warns(FinPlanWarning, match="not paid out"):
            PensionAccrual().prepare(pension, ctx)
