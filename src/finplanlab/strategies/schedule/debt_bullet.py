"""
Bullet debt schedule strategy.
"""

from __future__ import annotations

from finplanlab.core.instruments import Debt

from ._debt_utils import DebtPhase, ScheduleDebtBase


class ScheduleDebtBullet(ScheduleDebtBase):
    """
    Bullet repayment (kind: 'l.debt.bullet').

    Interest ``P * r`` every year; the full principal is repaid together with
    the last year's interest at ``end_year``. The balance stays at ``P`` until then.
    """

    def phase_for(self, debt: Debt, k: int, n: int) -> str:
        return DebtPhase.HOLDING

    def principal_for(self, debt: Debt, k: int, n: int, balance: float) -> float:
        return 0.0
