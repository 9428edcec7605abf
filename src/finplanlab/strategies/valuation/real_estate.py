"""
Real estate valuation strategy.
"""

from __future__ import annotations

from finplanlab.core.context import ProjectionContext
from finplanlab.core.events import Event
from finplanlab.core.instruments import RealEstateHolding
from finplanlab.core.interfaces import IValuationStrategy
from finplanlab.core.results import InstrumentOutput, add_flow, empty_output
from finplanlab.core.utils import in_window


class ValuationRealEstate(IValuationStrategy):
    """
    Real estate holding (kind: 'a.real_estate').

    Lifecycle over ``start_year..end_year``:
        - purchase: ``current_value`` leaves cash at ``start_year`` if ``is_purchase``
        - appreciation: value grows by ``growth_rate`` (PERCENT) each held year
        - reverse mortgage: in payout years the value is drawn down by
          ``monthly_pension_amount * 12`` (floored at 0) instead of appreciating,
          and the same amount is credited as ``real_estate_pension``
        - rental: ``monthly_rental_income * 12`` credited inside the rental window
        - disposal: ``current_value * (1 + g) ** (end_year - start_year)`` credited
          as ``real_estate_sale`` at ``end_year + 1``

    Note:
        Rental income follows its own window, independently of the holding window.
    """

    def prepare(self, instrument: RealEstateHolding, ctx: ProjectionContext) -> None:
        pass

    def is_payout_year(self, instrument: RealEstateHolding, year: int) -> bool:
        return (
            instrument.convert_to_pension
            and instrument.monthly_pension_amount > 0
            and in_window(
                year, instrument.pension_start_year, instrument.reverse_mortgage_end_year
            )
        )

    def sale_value(self, instrument: RealEstateHolding) -> float:
        growth = 1.0 + instrument.growth_rate / 100.0
        return instrument.current_value * growth ** (instrument.end_year - instrument.start_year)

    def simulate(self, instrument: RealEstateHolding, ctx: ProjectionContext) -> InstrumentOutput:
        out = empty_output(ctx.T)
        start, end = instrument.start_year, instrument.end_year
        growth = 1.0 + instrument.growth_rate / 100.0

        if instrument.has_rental_income:
            rent = instrument.monthly_rental_income * 12.0
            r_start = max(instrument.rental_income_start_year, ctx.first_year)
            r_end = min(instrument.rental_income_end_year, ctx.last_year)
            for year in range(r_start, r_end + 1):
                add_flow(out, "rental_income", ctx.index_of(year), rent)

        if end < start:
            return out

        if instrument.is_purchase:
            idx = ctx.index_of(start)
            add_flow(out, "real_estate_purchase", idx, instrument.current_value)
            if idx is not None:
                out["events"].append(
                    Event(
                        start,
                        "purchase",
                        f"{instrument.label} bought for {instrument.current_value:,.0f}",
                        {"amount": instrument.current_value},
                    )
                )

        value = instrument.current_value
        payout = instrument.monthly_pension_amount * 12.0
        for year in range(start, min(end, ctx.last_year) + 1):
            idx = ctx.index_of(year)
            paying = self.is_payout_year(instrument, year)
            if year > start and not paying:
                value *= growth
            if paying:
                value = max(0.0, value - payout)
                add_flow(out, "real_estate_pension", idx, payout)
            if idx is not None:
                out["value"][idx] = value
                out["active"][idx] = True

        sale_idx = ctx.index_of(end + 1)
        if sale_idx is not None:
            proceeds = self.sale_value(instrument)
            add_flow(out, "real_estate_sale", sale_idx, proceeds)
            out["events"].append(
                Event(
                    end + 1,
                    "sale",
                    f"{instrument.label} sold for {proceeds:,.0f}",
                    {"amount": proceeds},
                )
            )
        return out
