"""
Tests for real estate and general asset strategies.
"""

import pytest
from finplanlab.core.errors import FinPlanWarning
from finplanlab.core.instruments import Asset, RealEstateHolding
from finplanlab.strategies.valuation import (
    ValuationAsset,
    ValuationIncomeAsset,
    ValuationRealEstate,
)


def make_home(**overrides):
    params = dict(
        id="home",
        title="Home",
        start_year=2025,
        end_year=2027,
        current_value=100_000.0,
        growth_rate=10.0,
    )
    params.update(overrides)
    return RealEstateHolding(**params)


class TestRealEstate:
    """Test the real estate lifecycle."""

    def test_appreciation_and_sale(self, ctx):
        out = ValuationRealEstate().simulate(make_home(), ctx)
        assert out["value"][:4] == pytest.approx([100_000.0, 110_000.0, 121_000.0, 0.0])
        assert out["active"][:3].all()
        assert not out["active"][3:].any()
        assert out["flows"]["real_estate_sale"][3] == pytest.approx(121_000.0)
        assert "real_estate_purchase" not in out["flows"]

    def test_purchase_outlay(self, ctx):
        out = ValuationRealEstate().simulate(make_home(is_purchase=True), ctx)
        assert out["flows"]["real_estate_purchase"][0] == 100_000.0
        assert out["flows"]["real_estate_purchase"][1:].sum() == 0.0
        assert [e.kind for e in out["events"]] == ["purchase", "sale"]

    def test_rental_window_is_independent(self, ctx):
        home = make_home(
            end_year=2026,
            has_rental_income=True,
            monthly_rental_income=500.0,
            rental_income_start_year=2024,
            rental_income_end_year=2030,
        )
        out = ValuationRealEstate().simulate(home, ctx)
        assert out["flows"]["rental_income"][:7] == pytest.approx([6000.0] * 6 + [0.0])

    def test_rental_requires_flag(self, ctx):
        home = make_home(
            monthly_rental_income=500.0,
            rental_income_start_year=2025,
            rental_income_end_year=2030,
        )
        assert "rental_income" not in ValuationRealEstate().simulate(home, ctx)["flows"]

    def test_reverse_mortgage_draws_down_value(self, ctx):
        home = make_home(
            convert_to_pension=True,
            pension_start_year=2026,
            monthly_pension_amount=1000.0,
        )
        out = ValuationRealEstate().simulate(home, ctx)
        assert out["value"][:3] == pytest.approx([100_000.0, 88_000.0, 76_000.0])
        assert out["flows"]["real_estate_pension"][:4] == pytest.approx(
            [0.0, 12_000.0, 12_000.0, 0.0]
        )
        # Disposal proceeds follow the appreciation formula
        assert out["flows"]["real_estate_sale"][3] == pytest.approx(121_000.0)

    def test_reverse_mortgage_explicit_end_and_floor(self, ctx):
        home = make_home(
            current_value=10_000.0,
            growth_rate=0.0,
            convert_to_pension=True,
            pension_start_year=2025,
            pension_end_year=2026,
            monthly_pension_amount=500.0,
        )
        out = ValuationRealEstate().simulate(home, ctx)
        assert out["value"][:3] == pytest.approx([4_000.0, 0.0, 0.0])
        assert out["flows"]["real_estate_pension"][:3] == pytest.approx([6_000.0, 6_000.0, 0.0])


def make_asset(**overrides):
    params = dict(
        id="car",
        title="Car",
        start_year=2025,
        end_year=2027,
        current_value=20_000.0,
        growth_rate=-0.1,
    )
    params.update(overrides)
    return Asset(**params)


class TestAsset:
    """Test general and income assets."""

    def test_general_asset(self, ctx):
        out = ValuationAsset().simulate(make_asset(is_purchase=True), ctx)
        assert out["value"][:4] == pytest.approx([20_000.0, 18_000.0, 16_200.0, 0.0])
        assert out["flows"]["asset_purchase"][0] == 20_000.0
        assert out["flows"]["asset_sale"][3] == pytest.approx(16_200.0)
        assert "asset_income" not in out["flows"]

    def test_income_asset_yield(self, ctx):
        asset = make_asset(
            id="bond", growth_rate=0.0, asset_type="income", income_rate=0.05
        )
        out = ValuationIncomeAsset().simulate(asset, ctx)
        assert out["flows"]["asset_income"][:4] == pytest.approx([1000.0] * 3 + [0.0])

    def test_unknown_asset_type_warns(self, ctx):
        asset = make_asset(id="odd", asset_type="crypto")
        with pytest.warns(FinPlanWarning, match="general asset"):
            ValuationAsset().prepare(asset, ctx)

    def test_asset_held_before_projection(self, ctx):
        asset = make_asset(start_year=2023, end_year=2030, growth_rate=0.1, is_purchase=True)
        out = ValuationAsset().simulate(asset, ctx)
        assert out["value"][0] == pytest.approx(20_000.0 * 1.21)
        assert "asset_purchase" not in out["flows"]
