"""
Shared amortization machinery for debt schedule strategies.
"""

from __future__ import annotations

from typing import NamedTuple

from finplanlab.core.context import ProjectionContext
from finplanlab.core.events import Event
from finplanlab.core.instruments import Debt
from finplanlab.core.interfaces import IScheduleStrategy
from finplanlab.core.results import InstrumentOutput, add_flow, empty_output
from finplanlab.core.utils import warn_once


class DebtPhase:
    """Repayment states a debt moves through, one per schedule row."""

    HOLDING = "holding"  # interest only, principal due at maturity
    DEFERRED = "deferred"  # interest only during the grace period
    AMORTIZING = "amortizing"  # interest plus a principal installment
    SETTLED = "settled"  # balance reached zero in this year


class AmortizationRow(NamedTuple):
    """
    One year of a debt schedule.

    Attributes:
        year: Calendar year
        phase: DebtPhase of the year
        interest: Interest paid on the opening balance
        principal: Principal repaid
        remaining: Balance after this year's repayment
    """

    year: int
    phase: str
    interest: float
    principal: float
    remaining: float


class ScheduleDebtBase(IScheduleStrategy):
    """
    Base class for debt schedules over ``start_year..end_year``.

    Subclasses decide the phase and the principal installment of each year;
    the base class applies interest on the opening balance, forces the final
    installment to clear the balance and maps the rows onto the projection.
    """

    def prepare(self, instrument: Debt, ctx: ProjectionContext) -> None:
        if instrument.term_years <= 0:
            warn_once(
                "EMPTY_TERM",
                instrument.id,
                f"[{instrument.id}] end_year {instrument.end_year} precedes start_year "
                f"{instrument.start_year}; debt contributes nothing.",
            )
        if instrument.debt_amount < 0:
            warn_once(
                "NEGATIVE_PRINCIPAL",
                instrument.id,
                f"[{instrument.id}] negative debt_amount {instrument.debt_amount}.",
            )

    def phase_for(self, debt: Debt, k: int, n: int) -> str:
        """Phase of the k-th year (0-based) of an n-year term."""
        raise NotImplementedError

    def principal_for(self, debt: Debt, k: int, n: int, balance: float) -> float:
        """Principal installment of the k-th year given the opening balance."""
        raise NotImplementedError

    def schedule(self, debt: Debt) -> list[AmortizationRow]:
        """
        Full repayment schedule, one row per year of the term.

        Returns an empty list when the term has no years.
        """
        n = debt.term_years
        if n <= 0:
            return []

        rows: list[AmortizationRow] = []
        balance = debt.debt_amount
        rate = debt.interest_rate
        for k in range(n):
            interest = balance * rate
            if k == n - 1:
                # Last installment absorbs any floating-point residue
                principal = balance
            else:
                principal = self.principal_for(debt, k, n, balance)
            balance = 0.0 if k == n - 1 else balance - principal
            phase = DebtPhase.SETTLED if k == n - 1 else self.phase_for(debt, k, n)
            rows.append(
                AmortizationRow(
                    year=debt.start_year + k,
                    phase=phase,
                    interest=interest,
                    principal=principal,
                    remaining=balance,
                )
            )
        return rows

    def simulate(self, instrument: Debt, ctx: ProjectionContext) -> InstrumentOutput:
        """
        Simulate the debt over the projection horizon.

        Returns:
            InstrumentOutput with ``debt_interest``, ``debt_principal`` and
            optionally ``debt_injection`` flows; ``value`` is the negative
            remaining balance while the debt is active
        """
        out = empty_output(ctx.T)
        rows = self.schedule(instrument)
        if not rows:
            return out

        if instrument.add_cash_to_flow:
            idx = ctx.index_of(instrument.start_year)
            add_flow(out, "debt_injection", idx, instrument.debt_amount)
            if idx is not None:
                out["events"].append(
                    Event(
                        instrument.start_year,
                        "debt_injection",
                        f"{instrument.label}: {instrument.debt_amount:,.0f} credited to cash",
                        {"amount": instrument.debt_amount},
                    )
                )

        for row in rows:
            idx = ctx.index_of(row.year)
            if idx is None:
                continue
            add_flow(out, "debt_interest", idx, row.interest)
            add_flow(out, "debt_principal", idx, row.principal)
            out["value"][idx] = -row.remaining if row.remaining else 0.0
            out["active"][idx] = True
            if row.phase == DebtPhase.SETTLED:
                out["events"].append(
                    Event(
                        row.year,
                        "payoff",
                        f"{instrument.label} repaid",
                        {"principal": row.principal, "interest": row.interest},
                    )
                )
        return out
