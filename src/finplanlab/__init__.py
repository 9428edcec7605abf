"""
FinPlanLab - Household Cash-Flow and Net-Worth Projections

FinPlanLab projects a household's yearly cash flow and net worth from the
current year to a fixed horizon age. Financial instruments (income, expenses,
savings, pensions, real estate, assets and debts) are plain immutable records;
their behavior comes from strategies registered under a 'kind' discriminator.

Key Features:
- **Strategy Pattern**: Behaviors are determined by 'kind' discriminators, not inheritance
- **Explicit Debt States**: One schedule strategy per repayment policy
- **Record Friendly**: Instruments accept camelCase or snake_case records
- **Deterministic**: Identical inputs always produce identical series
- **pandas Views**: Year-indexed DataFrames and KPI helpers

Architecture Overview:
- **Instruments**: Frozen dataclasses (Profile, IncomeStream, Debt, ...)
- **Strategy Interfaces**: Protocols for flow, valuation, pension and schedule strategies
- **Registry System**: Maps kind strings to strategy implementations
- **Projection Engine**: Cash-flow projector, then net-worth projector

Quick Start:
    ```python
    from finplanlab import Household, ProjectionConfig

    household = Household.from_dict({
        "profile": {"birthYear": 1985, "retirementAge": 60, "currentCash": 20_000},
        "incomes": [{"title": "Salary", "amount": 4_000, "frequency": "monthly",
                     "startYear": 2025, "endYear": 2044, "growthRate": 2}],
        "debts": [{"title": "Mortgage", "debtAmount": 200_000, "interestRate": 0.04,
                   "debtType": "equal", "startYear": 2025, "endYear": 2049}],
    })
    results = household.run(ProjectionConfig(current_year=2025))
    results.balance_sheet_frame()["total_amount"]
    ```

Available Strategies:
    Assets:
        - 'a.saving', 'a.real_estate', 'a.asset.general', 'a.asset.income'

    Pensions:
        - 'p.pension.national', 'p.pension.retirement',
          'p.pension.personal', 'p.pension.severance'

    Liabilities:
        - 'l.debt.bullet', 'l.debt.equal_payment',
          'l.debt.equal_principal', 'l.debt.grace'

    Flows:
        - 'f.income.recurring', 'f.expense.recurring'
"""

# Version information
__version__ = "0.1.0"
__author__ = "FinPlanLab Team"
__description__ = "Household Cash-Flow and Net-Worth Projections"

# Register default strategies
import finplanlab.strategies

from .core import (
    Asset,
    ConfigError,
    Debt,
    Event,
    ExpenseStream,
    FamilyMember,
    FinPlanWarning,
    FlowRegistry,
    Household,
    IFlowStrategy,
    IncomeStream,
    InstrumentOutput,
    IPensionStrategy,
    IScheduleStrategy,
    IValuationStrategy,
    K,
    LineItem,
    Pension,
    PensionRegistry,
    Profile,
    ProjectionConfig,
    ProjectionContext,
    ProjectionResults,
    RealEstateHolding,
    SavingAccount,
    ScheduleRegistry,
    ValuationRegistry,
    YearlyBalanceSheet,
    YearlyCashflow,
    balance_sheet_frame,
    cashflow_frame,
    project_cashflow,
    project_net_worth,
)

# Import KPI utilities
from .kpi import (
    cumulative_cashflow,
    first_deficit_year,
    lifetime_cashflow_totals,
    net_worth_at_age,
    net_worth_gap,
)

# Define what gets imported with "from finplanlab import *"
__all__ = [
    # Projection
    "project_cashflow",
    "project_net_worth",
    "Household",
    "ProjectionResults",
    "ProjectionConfig",
    "ProjectionContext",
    # Instruments
    "Profile",
    "FamilyMember",
    "IncomeStream",
    "ExpenseStream",
    "SavingAccount",
    "Pension",
    "RealEstateHolding",
    "Asset",
    "Debt",
    # Results
    "YearlyCashflow",
    "YearlyBalanceSheet",
    "LineItem",
    "InstrumentOutput",
    "Event",
    "cashflow_frame",
    "balance_sheet_frame",
    # KPI utilities
    "lifetime_cashflow_totals",
    "cumulative_cashflow",
    "first_deficit_year",
    "net_worth_gap",
    "net_worth_at_age",
    # Errors
    "ConfigError",
    "FinPlanWarning",
    # Strategy interfaces
    "IFlowStrategy",
    "IValuationStrategy",
    "IPensionStrategy",
    "IScheduleStrategy",
    # Registries
    "K",
    "FlowRegistry",
    "ValuationRegistry",
    "PensionRegistry",
    "ScheduleRegistry",
]
