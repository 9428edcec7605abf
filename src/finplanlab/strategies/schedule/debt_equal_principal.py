"""
Equal-principal (linear) debt schedule strategy.
"""

from __future__ import annotations

from finplanlab.core.instruments import Debt

from ._debt_utils import DebtPhase, ScheduleDebtBase


class ScheduleDebtEqualPrincipal(ScheduleDebtBase):
    """
    Equal-principal repayment (kind: 'l.debt.equal_principal').

    Repays ``P / n`` every year; interest ``(P - k * P / n) * r`` falls as the
    balance declines.
    """

    def phase_for(self, debt: Debt, k: int, n: int) -> str:
        return DebtPhase.AMORTIZING

    def principal_for(self, debt: Debt, k: int, n: int, balance: float) -> float:
        return debt.debt_amount / n
