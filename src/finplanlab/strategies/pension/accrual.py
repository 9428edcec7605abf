"""
Accruing pension strategy (retirement, personal and severance pensions).
"""

from __future__ import annotations

from finplanlab.core.context import ProjectionContext
from finplanlab.core.events import Event
from finplanlab.core.instruments import Pension
from finplanlab.core.interfaces import IPensionStrategy
from finplanlab.core.results import InstrumentOutput, add_flow, empty_output
from finplanlab.core.utils import annual_amount, warn_once


class PensionAccrual(IPensionStrategy):
    """
    Accrual then decumulation (kinds: 'p.pension.retirement',
    'p.pension.personal', 'p.pension.severance').

    The balance starts at ``current_amount``. Each contribution year it earns
    ``return_rate`` (PERCENT) and receives the yearly contribution; years
    between the end of contributions and the first payout keep earning the
    return. At ``payment_start_year`` the balance is split into a fixed
    monthly payment over the payout years; no return is earned while paying
    out and the balance reaches zero at ``payment_end_year``.

    Only personal pensions are funded from household cash, so only their
    contributions are booked as an expense.
    """

    def __init__(self, debit_contributions: bool = False):
        self.debit_contributions = debit_contributions

    def prepare(self, instrument: Pension, ctx: ProjectionContext) -> None:
        if (
            instrument.payment_start_year <= 0
            or instrument.payment_end_year < instrument.payment_start_year
        ):
            warn_once(
                "EMPTY_PAYOUT",
                instrument.id,
                f"[{instrument.id}] payment window "
                f"{instrument.payment_start_year}..{instrument.payment_end_year} is empty; "
                "no payout will be made.",
            )
        elif (
            self.has_contributions(instrument)
            and instrument.contribution_end_year >= instrument.payment_start_year
        ):
            warn_once(
                "CONTRIBUTION_OVERLAP",
                instrument.id,
                f"[{instrument.id}] contributions run until {instrument.contribution_end_year} "
                f"but payout starts in {instrument.payment_start_year}; contributions made "
                "during the payout are not paid out.",
            )

    def has_contributions(self, instrument: Pension) -> bool:
        start, end = instrument.contribution_start_year, instrument.contribution_end_year
        return start > 0 and end >= start

    def simulate(self, instrument: Pension, ctx: ProjectionContext) -> InstrumentOutput:
        """
        Simulate accrual and payout.

        Returns:
            InstrumentOutput with ``pension`` payouts, ``expense`` contributions
            for personal pensions, and the running balance as ``value``
        """
        out = empty_output(ctx.T)
        c_start, c_end = instrument.contribution_start_year, instrument.contribution_end_year
        p_start, p_end = instrument.payment_start_year, instrument.payment_end_year
        contributing = self.has_contributions(instrument)
        payout_years = p_end - p_start + 1 if p_start > 0 else 0

        starts = [y for y, ok in ((c_start, contributing), (p_start, payout_years > 0)) if ok]
        first = min(starts, default=0)
        last = p_end if payout_years > 0 else (c_end if contributing else first - 1)

        growth = 1.0 + instrument.return_rate / 100.0
        contribution = annual_amount(
            instrument.contribution_amount, instrument.contribution_frequency
        )
        balance = instrument.current_amount
        monthly = 0.0

        for year in range(first, min(last, ctx.last_year) + 1):
            idx = ctx.index_of(year)
            if contributing and c_start <= year <= c_end:
                balance = balance * growth + contribution
                if self.debit_contributions:
                    add_flow(out, "expense", idx, contribution)
            elif year < p_start:
                balance *= growth

            if payout_years > 0 and p_start <= year <= p_end:
                if year == p_start:
                    monthly = balance / payout_years / 12.0
                    if idx is not None:
                        out["events"].append(
                            Event(
                                year,
                                "pension_payout_start",
                                f"{instrument.label} pays {monthly:,.0f}/month",
                                {"monthly": monthly, "balance": balance},
                            )
                        )
                payout = monthly * 12.0
                add_flow(out, "pension", idx, payout)
                balance = 0.0 if year == p_end else balance - payout

            if idx is not None:
                out["value"][idx] = balance
                out["active"][idx] = True
        return out
