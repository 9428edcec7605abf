"""
Equal-payment (annuity) debt schedule strategy.
"""

from __future__ import annotations

from finplanlab.core.instruments import Debt

from ._debt_utils import DebtPhase, ScheduleDebtBase


def annuity_payment(principal: float, rate: float, n: int) -> float:
    """
    Constant yearly payment that repays ``principal`` over ``n`` years.

    Args:
        principal: Amount borrowed
        rate: Annual interest rate as a fraction
        n: Number of yearly payments

    Returns:
        ``P * r * (1 + r)**n / ((1 + r)**n - 1)``, or ``P / n`` when the rate is 0

    Example:
        ```python
        annuity_payment(10_000, 0.05, 5)  # 2309.75
        ```
    """
    if n <= 0:
        return 0.0
    factor = (1.0 + rate) ** n
    if rate == 0 or factor == 1.0:
        return principal / n
    return principal * rate * factor / (factor - 1.0)


class ScheduleDebtEqualPayment(ScheduleDebtBase):
    """
    Equal-payment repayment (kind: 'l.debt.equal_payment').

    Every year pays the same annuity; interest is charged on the opening
    balance and the rest of the payment repays principal.
    """

    def phase_for(self, debt: Debt, k: int, n: int) -> str:
        return DebtPhase.AMORTIZING

    def principal_for(self, debt: Debt, k: int, n: int, balance: float) -> float:
        payment = annuity_payment(debt.debt_amount, debt.interest_rate, n)
        return payment - balance * debt.interest_rate
