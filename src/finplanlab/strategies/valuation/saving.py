"""
Savings account valuation strategy.
"""

from __future__ import annotations

from finplanlab.core.context import ProjectionContext
from finplanlab.core.events import Event
from finplanlab.core.instruments import SavingAccount
from finplanlab.core.interfaces import IValuationStrategy
from finplanlab.core.results import InstrumentOutput, add_flow, empty_output
from finplanlab.core.utils import warn_once

FREQUENCIES = ("monthly", "yearly", "one_time")


def contribution_for(account: SavingAccount, k: int) -> float:
    """
    Contribution paid in the k-th year (0-based) of the account.

    The amount grows by ``yearly_growth_rate`` (FRACTION) per elapsed year;
    one-time accounts pay their amount once, in the first year.
    """
    if account.frequency == "one_time":
        return account.amount if k == 0 else 0.0
    grown = account.amount * (1.0 + account.yearly_growth_rate) ** k
    return grown * 12.0 if account.frequency == "monthly" else grown


def terminal_value(account: SavingAccount) -> float:
    """
    Balance at the end of ``end_year``, recomputed from the account terms.

    Example:
        ```python
        acc = SavingAccount(start_year=2025, end_year=2026, amount=100,
                            frequency="monthly", interest_rate=0.03)
        terminal_value(acc)  # 1200 * 1.03 + 1200 = 2436.0
        ```
    """
    n = account.end_year - account.start_year + 1
    if n <= 0:
        return 0.0
    balance = account.current_amount
    for k in range(n):
        if k > 0:
            balance *= 1.0 + account.interest_rate
        balance += contribution_for(account, k)
    return balance


class ValuationSaving(IValuationStrategy):
    """
    Savings or investment account (kind: 'a.saving').

    In ``start_year`` the balance is ``current_amount`` plus the first
    contribution. Every later year the held balance earns ``interest_rate``
    (FRACTION) and the grown contribution is added. Contributions leave cash
    as ``savings``. In ``end_year + 1`` the terminal value is paid out once as
    ``saving_maturity`` and the account is no longer held.
    """

    def prepare(self, instrument: SavingAccount, ctx: ProjectionContext) -> None:
        if instrument.frequency not in FREQUENCIES:
            warn_once(
                "FREQUENCY",
                instrument.id,
                f"[{instrument.id}] unknown frequency {instrument.frequency!r}; "
                "treating amount as yearly.",
            )
        if instrument.end_year < instrument.start_year:
            warn_once(
                "EMPTY_WINDOW",
                instrument.id,
                f"[{instrument.id}] end_year precedes start_year; account is ignored.",
            )

    def simulate(self, instrument: SavingAccount, ctx: ProjectionContext) -> InstrumentOutput:
        out = empty_output(ctx.T)
        start, end = instrument.start_year, instrument.end_year
        if end < start:
            return out

        balance = 0.0
        for year in range(start, min(end, ctx.last_year) + 1):
            k = year - start
            contribution = contribution_for(instrument, k)
            if k == 0:
                balance = instrument.current_amount + contribution
            else:
                balance = balance * (1.0 + instrument.interest_rate) + contribution
            idx = ctx.index_of(year)
            if idx is None:
                continue
            add_flow(out, "savings", idx, contribution)
            out["value"][idx] = balance
            out["active"][idx] = True

        maturity_idx = ctx.index_of(end + 1)
        if maturity_idx is not None:
            payout = terminal_value(instrument)
            add_flow(out, "saving_maturity", maturity_idx, payout)
            out["events"].append(
                Event(
                    end + 1,
                    "maturity",
                    f"{instrument.label} matured: {payout:,.0f} paid out",
                    {"amount": payout},
                )
            )
        return out
