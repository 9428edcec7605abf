"""
Recurring expense flow strategy with annual growth.
"""

from __future__ import annotations

from finplanlab.core.context import ProjectionContext
from finplanlab.core.instruments import ExpenseStream

from .income_recurring import FlowIncomeRecurring


class FlowExpenseRecurring(FlowIncomeRecurring):
    """
    Recurring expense flow strategy (kind: 'f.expense.recurring').

    Same growth rule as recurring income, booked as an outflow. An expense
    flagged ``is_fixed_to_retirement_year`` stops at the profile's retirement
    year instead of its own ``end_year``.
    """

    category = "expense"
    event_prefix = "expense"

    def window(self, instrument: ExpenseStream, ctx: ProjectionContext) -> tuple[int, int]:
        if instrument.is_fixed_to_retirement_year:
            return instrument.start_year, ctx.retirement_year
        return instrument.start_year, instrument.end_year
