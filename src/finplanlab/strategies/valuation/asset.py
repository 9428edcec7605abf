"""
General and income-producing asset valuation strategies.
"""

from __future__ import annotations

from finplanlab.core.context import ProjectionContext
from finplanlab.core.events import Event
from finplanlab.core.instruments import Asset
from finplanlab.core.interfaces import IValuationStrategy
from finplanlab.core.kinds import ASSET_TYPES
from finplanlab.core.results import InstrumentOutput, add_flow, empty_output
from finplanlab.core.utils import warn_once


class ValuationAsset(IValuationStrategy):
    """
    General asset (kind: 'a.asset.general').

    Value ``current_value * (1 + growth_rate) ** (Y - start_year)`` while held
    (``growth_rate`` is a FRACTION). Purchase outlay at ``start_year`` when
    ``is_purchase``; disposal at ``end_year + 1`` for the value reached in
    ``end_year``.
    """

    def prepare(self, instrument: Asset, ctx: ProjectionContext) -> None:
        if instrument.asset_type not in ASSET_TYPES:
            warn_once(
                "ASSET_TYPE",
                instrument.id,
                f"[{instrument.id}] unknown asset_type {instrument.asset_type!r}; "
                "valued as a general asset.",
            )

    def value_in(self, instrument: Asset, year: int) -> float:
        return instrument.current_value * (1.0 + instrument.growth_rate) ** (
            year - instrument.start_year
        )

    def yield_for(self, instrument: Asset, value: float) -> float:
        """Cash yield of the year; general assets pay none."""
        return 0.0

    def simulate(self, instrument: Asset, ctx: ProjectionContext) -> InstrumentOutput:
        out = empty_output(ctx.T)
        start, end = instrument.start_year, instrument.end_year
        if end < start:
            return out

        if instrument.is_purchase:
            idx = ctx.index_of(start)
            add_flow(out, "asset_purchase", idx, instrument.current_value)
            if idx is not None:
                out["events"].append(
                    Event(
                        start,
                        "purchase",
                        f"{instrument.label} bought for {instrument.current_value:,.0f}",
                        {"amount": instrument.current_value},
                    )
                )

        for year in range(max(start, ctx.first_year), min(end, ctx.last_year) + 1):
            idx = ctx.index_of(year)
            value = self.value_in(instrument, year)
            add_flow(out, "asset_income", idx, self.yield_for(instrument, value))
            out["value"][idx] = value
            out["active"][idx] = True

        sale_idx = ctx.index_of(end + 1)
        if sale_idx is not None:
            proceeds = self.value_in(instrument, end)
            add_flow(out, "asset_sale", sale_idx, proceeds)
            out["events"].append(
                Event(
                    end + 1,
                    "sale",
                    f"{instrument.label} sold for {proceeds:,.0f}",
                    {"amount": proceeds},
                )
            )
        return out


class ValuationIncomeAsset(ValuationAsset):
    """
    Income-producing asset (kind: 'a.asset.income').

    Same valuation as a general asset, plus a yearly yield of
    ``value * income_rate`` (FRACTION) credited as ``asset_income``.
    """

    def yield_for(self, instrument: Asset, value: float) -> float:
        return value * instrument.income_rate
