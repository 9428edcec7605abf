"""
Grace-period debt schedule strategy.
"""

from __future__ import annotations

from finplanlab.core.instruments import Debt

from ._debt_utils import DebtPhase, ScheduleDebtBase


class ScheduleDebtGrace(ScheduleDebtBase):
    """
    Grace-deferred repayment (kind: 'l.debt.grace').

    Interest only for ``grace_period`` years, then ``n - grace_period`` equal
    principal installments with interest on the declining balance.

    Note:
        A grace period covering the whole term leaves the principal to be
        repaid in full at ``end_year``, as with a bullet debt.
    """

    def _grace_years(self, debt: Debt) -> int:
        return max(0, debt.grace_period)

    def phase_for(self, debt: Debt, k: int, n: int) -> str:
        if k < self._grace_years(debt):
            return DebtPhase.DEFERRED
        return DebtPhase.AMORTIZING

    def principal_for(self, debt: Debt, k: int, n: int, balance: float) -> float:
        grace = self._grace_years(debt)
        installments = n - grace
        if k < grace or installments <= 0:
            return 0.0
        return debt.debt_amount / installments
