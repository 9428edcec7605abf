"""
Core module for FinPlanLab.

This module contains the fundamental building blocks for the household projection system.
"""

from .context import ProjectionConfig, ProjectionContext
from .errors import ConfigError, FinPlanWarning
from .events import Event
from .instruments import (
    Asset,
    Collections,
    Debt,
    ExpenseStream,
    FamilyMember,
    FlowRegistry,
    IncomeStream,
    Instrument,
    Pension,
    PensionRegistry,
    Profile,
    RealEstateHolding,
    SavingAccount,
    ScheduleRegistry,
    ValuationRegistry,
    resolve_strategy,
)
from .interfaces import (
    IFlowStrategy,
    IInstrumentStrategy,
    IPensionStrategy,
    IScheduleStrategy,
    IValuationStrategy,
)
from .kinds import K
from .projection import (
    Household,
    ProjectionResults,
    build_collections,
    project_cashflow,
    project_net_worth,
)
from .results import (
    InstrumentOutput,
    LineItem,
    YearlyBalanceSheet,
    YearlyCashflow,
    balance_sheet_frame,
    breakdown_frame,
    cashflow_frame,
)
from .utils import in_window, window_mask, year_range

__all__ = [
    # Errors
    "ConfigError",
    "FinPlanWarning",
    # Context
    "ProjectionConfig",
    "ProjectionContext",
    # Events and Results
    "Event",
    "InstrumentOutput",
    "LineItem",
    "YearlyCashflow",
    "YearlyBalanceSheet",
    "cashflow_frame",
    "balance_sheet_frame",
    "breakdown_frame",
    # Instruments
    "Profile",
    "FamilyMember",
    "Instrument",
    "IncomeStream",
    "ExpenseStream",
    "SavingAccount",
    "Pension",
    "RealEstateHolding",
    "Asset",
    "Debt",
    "Collections",
    # Registries
    "K",
    "FlowRegistry",
    "ValuationRegistry",
    "PensionRegistry",
    "ScheduleRegistry",
    "resolve_strategy",
    # Interfaces
    "IInstrumentStrategy",
    "IFlowStrategy",
    "IValuationStrategy",
    "IPensionStrategy",
    "IScheduleStrategy",
    # Projection
    "Household",
    "ProjectionResults",
    "build_collections",
    "project_cashflow",
    "project_net_worth",
    # Utilities
    "in_window",
    "window_mask",
    "year_range",
]
