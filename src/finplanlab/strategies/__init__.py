"""
Strategy implementations for FinPlanLab.

Strategies implement the actual behavior for each kind of instrument based on
its 'kind' discriminator.

Strategy Categories:
- Flow Strategies: Recurring income and expense streams
- Valuation Strategies: Savings, real estate and other held assets
- Pension Strategies: National payouts and accruing pensions
- Schedule Strategies: Debt repayment schedules

Registry System:
The module automatically registers all default strategies in the global registries,
making them available to instruments with matching kind discriminators.
"""

from .flow import FlowExpenseRecurring, FlowIncomeRecurring
from .pension import PensionAccrual, PensionNational
from .registry import register_defaults
from .schedule import (
    ScheduleDebtBullet,
    ScheduleDebtEqualPayment,
    ScheduleDebtEqualPrincipal,
    ScheduleDebtGrace,
)
from .valuation import (
    ValuationAsset,
    ValuationIncomeAsset,
    ValuationRealEstate,
    ValuationSaving,
)

# Register all default strategies when module is imported
register_defaults()

__all__ = [
    # Valuation strategies
    "ValuationSaving",
    "ValuationRealEstate",
    "ValuationAsset",
    "ValuationIncomeAsset",
    # Pension strategies
    "PensionNational",
    "PensionAccrual",
    # Schedule strategies
    "ScheduleDebtBullet",
    "ScheduleDebtEqualPayment",
    "ScheduleDebtEqualPrincipal",
    "ScheduleDebtGrace",
    # Flow strategies
    "FlowIncomeRecurring",
    "FlowExpenseRecurring",
    # Registry
    "register_defaults",
]
