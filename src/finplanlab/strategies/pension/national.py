"""
National pension payout strategy.
"""

from __future__ import annotations

from finplanlab.core.context import ProjectionContext
from finplanlab.core.events import Event
from finplanlab.core.instruments import Pension
from finplanlab.core.interfaces import IPensionStrategy
from finplanlab.core.results import InstrumentOutput, add_flow, empty_output


class PensionNational(IPensionStrategy):
    """
    National pension (kind: 'p.pension.national').

    Pays ``monthly_amount * 12`` indexed by ``inflation_rate`` (PERCENT) for
    every year elapsed since ``start_year``, inside ``start_year..end_year``.
    A missing rate falls back to the run's default national inflation.

    Note:
        The state holds the entitlement, so the household carries no balance
        and the pension never appears in the balance sheet.
    """

    def prepare(self, instrument: Pension, ctx: ProjectionContext) -> None:
        pass

    def inflation_pct(self, instrument: Pension, ctx: ProjectionContext) -> float:
        if instrument.inflation_rate is None:
            return ctx.config.default_national_inflation_pct
        return instrument.inflation_rate

    def simulate(self, instrument: Pension, ctx: ProjectionContext) -> InstrumentOutput:
        out = empty_output(ctx.T)
        start, end = instrument.start_year, instrument.end_year
        base = instrument.monthly_amount * 12.0
        inflation = self.inflation_pct(instrument, ctx) / 100.0

        for year in range(max(start, ctx.first_year), min(end, ctx.last_year) + 1):
            add_flow(out, "pension", ctx.index_of(year), base * (1.0 + inflation) ** (year - start))

        if start <= end and ctx.index_of(start) is not None:
            out["events"].append(
                Event(
                    start,
                    "pension_payout_start",
                    f"{instrument.label} pays {instrument.monthly_amount:,.0f}/month",
                    {"monthly": instrument.monthly_amount, "inflation_pct": inflation * 100},
                )
            )
        return out
