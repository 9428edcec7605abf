"""
Strategy registry setup for FinPlanLab.
"""

from finplanlab.core.instruments import (
    FlowRegistry,
    PensionRegistry,
    ScheduleRegistry,
    ValuationRegistry,
)
from finplanlab.core.kinds import K

# Flow strategies
from .flow.expense_recurring import FlowExpenseRecurring
from .flow.income_recurring import FlowIncomeRecurring

# Pension strategies
from .pension.accrual import PensionAccrual
from .pension.national import PensionNational

# Schedule strategies
from .schedule.debt_bullet import ScheduleDebtBullet
from .schedule.debt_equal_payment import ScheduleDebtEqualPayment
from .schedule.debt_equal_principal import ScheduleDebtEqualPrincipal
from .schedule.debt_grace import ScheduleDebtGrace

# Valuation strategies
from .valuation.asset import ValuationAsset, ValuationIncomeAsset
from .valuation.real_estate import ValuationRealEstate
from .valuation.saving import ValuationSaving


def register_defaults():
    """
    Register all default strategy implementations in the global registries.

    Registered Strategies:
        Assets:
            - 'a.saving': Savings account with maturity payout
            - 'a.real_estate': Property with rent, reverse mortgage and sale
            - 'a.asset.general' / 'a.asset.income': Appreciating holdings

        Pensions:
            - 'p.pension.national': Inflation-indexed payout
            - 'p.pension.retirement' / 'p.pension.severance': Employer-funded accrual
            - 'p.pension.personal': Accrual funded from household cash

        Liabilities:
            - 'l.debt.bullet', 'l.debt.equal_payment',
              'l.debt.equal_principal', 'l.debt.grace'

        Flows:
            - 'f.income.recurring': Recurring income
            - 'f.expense.recurring': Recurring expense

    Note:
        This function is automatically called when the module is imported.
        Additional strategies can be registered by calling the registry
        dictionaries directly.
    """
    # Register asset valuation strategies
    ValuationRegistry[K.A_SAVING] = ValuationSaving()
    ValuationRegistry[K.A_REAL_ESTATE] = ValuationRealEstate()
    ValuationRegistry[K.A_ASSET_GENERAL] = ValuationAsset()
    ValuationRegistry[K.A_ASSET_INCOME] = ValuationIncomeAsset()

    # Register pension strategies
    PensionRegistry[K.P_PENSION_NATIONAL] = PensionNational()
    PensionRegistry[K.P_PENSION_RETIREMENT] = PensionAccrual()
    PensionRegistry[K.P_PENSION_SEVERANCE] = PensionAccrual()
    PensionRegistry[K.P_PENSION_PERSONAL] = PensionAccrual(debit_contributions=True)

    # Register liability schedule strategies
    ScheduleRegistry[K.L_DEBT_BULLET] = ScheduleDebtBullet()
    ScheduleRegistry[K.L_DEBT_EQUAL_PAYMENT] = ScheduleDebtEqualPayment()
    ScheduleRegistry[K.L_DEBT_EQUAL_PRINCIPAL] = ScheduleDebtEqualPrincipal()
    ScheduleRegistry[K.L_DEBT_GRACE] = ScheduleDebtGrace()

    # Register cash flow strategies
    FlowRegistry[K.F_INCOME_RECURRING] = FlowIncomeRecurring()
    FlowRegistry[K.F_EXPENSE_RECURRING] = FlowExpenseRecurring()
