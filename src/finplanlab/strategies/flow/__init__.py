"""
Flow strategies for income and expense streams.
"""

from .expense_recurring import FlowExpenseRecurring
from .income_recurring import FlowIncomeRecurring

__all__ = [
    "FlowIncomeRecurring",
    "FlowExpenseRecurring",
]
