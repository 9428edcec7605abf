"""
Recurring income flow strategy with annual growth.
"""

from __future__ import annotations

from finplanlab.core.context import ProjectionContext
from finplanlab.core.events import Event
from finplanlab.core.instruments import IncomeStream
from finplanlab.core.interfaces import IFlowStrategy
from finplanlab.core.results import InstrumentOutput, add_flow, empty_output
from finplanlab.core.utils import annual_amount, warn_once


class FlowIncomeRecurring(IFlowStrategy):
    """
    Recurring income flow strategy (kind: 'f.income.recurring').

    Models a salary or other regular income stream. The yearly amount is the
    periodic amount annualized (x12 for monthly) and grown by ``growth_rate``
    (PERCENT) for every year elapsed since ``start_year``.

    Note:
        Flows carry no balance, so ``active`` stays False and the stream
        never appears in the balance sheet.
    """

    category = "income"
    event_prefix = "income"

    def prepare(self, instrument: IncomeStream, ctx: ProjectionContext) -> None:
        if instrument.frequency not in ("monthly", "yearly"):
            warn_once(
                "FREQUENCY",
                instrument.id,
                f"[{instrument.id}] unknown frequency {instrument.frequency!r}; "
                "treating amount as yearly.",
            )

    def window(self, instrument: IncomeStream, ctx: ProjectionContext) -> tuple[int, int]:
        """Inclusive active window of the stream."""
        return instrument.start_year, instrument.end_year

    def simulate(self, instrument: IncomeStream, ctx: ProjectionContext) -> InstrumentOutput:
        """
        Simulate the stream over the projection horizon.

        Returns:
            InstrumentOutput with the grown yearly amounts under ``category``
        """
        out = empty_output(ctx.T)
        start, end = self.window(instrument, ctx)
        base = annual_amount(instrument.amount, instrument.frequency)
        growth = instrument.growth_rate / 100.0

        for year in range(max(start, ctx.first_year), min(end, ctx.last_year) + 1):
            amount = base * (1.0 + growth) ** (year - start)
            add_flow(out, self.category, ctx.index_of(year), amount)

        if start <= end and ctx.index_of(start) is not None:
            out["events"].append(
                Event(
                    start,
                    f"{self.event_prefix}_start",
                    f"{instrument.label} starts at {base:,.0f}/year",
                    {"amount": base, "growth_rate": instrument.growth_rate},
                )
            )
        if start <= end and ctx.index_of(end) is not None:
            out["events"].append(
                Event(end, f"{self.event_prefix}_end", f"{instrument.label} ends")
            )
        return out
