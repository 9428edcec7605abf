"""
Schedule strategies for debts.
"""

from ._debt_utils import AmortizationRow, DebtPhase, ScheduleDebtBase
from .debt_bullet import ScheduleDebtBullet
from .debt_equal_payment import ScheduleDebtEqualPayment, annuity_payment
from .debt_equal_principal import ScheduleDebtEqualPrincipal
from .debt_grace import ScheduleDebtGrace

__all__ = [
    "AmortizationRow",
    "DebtPhase",
    "ScheduleDebtBase",
    "ScheduleDebtBullet",
    "ScheduleDebtEqualPayment",
    "ScheduleDebtEqualPrincipal",
    "ScheduleDebtGrace",
    "annuity_payment",
]
