"""
Results and output structures for FinPlanLab.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, TypedDict

import numpy as np
import pandas as pd

from .events import Event

# Cash-flow categories. Inflows add to the yearly total, outflows subtract.
INFLOW_CATEGORIES = (
    "income",
    "pension",
    "rental_income",
    "real_estate_pension",
    "asset_income",
    "real_estate_sale",
    "asset_sale",
    "debt_injection",
    "saving_maturity",
)
OUTFLOW_CATEGORIES = (
    "expense",
    "savings",
    "debt_interest",
    "debt_principal",
    "real_estate_purchase",
    "asset_purchase",
)
CATEGORIES = INFLOW_CATEGORIES + OUTFLOW_CATEGORIES

CASH_LABEL = "cash"


class InstrumentOutput(TypedDict):
    """
    Standard output structure for all instrument simulations.

    Attributes:
        flows: Yearly cash-flow magnitudes (always >= 0) keyed by category;
            the category decides the sign in the cash-flow total
        value: Yearly balance-sheet value, signed (debts negative, 0 if none)
        active: Yearly flag, True while the instrument is held and valued
        events: List of year-stamped events describing key occurrences

    Note:
        All numpy arrays have the same length as the projection year index.
        Pure flows (income, expense, national pension) keep ``active`` False
        so they never appear in the balance sheet.
    """

    flows: dict[str, np.ndarray]
    value: np.ndarray
    active: np.ndarray
    events: list[Event]


def empty_output(T: int) -> InstrumentOutput:
    """Zeroed output for an instrument that contributes nothing."""
    return InstrumentOutput(
        flows={},
        value=np.zeros(T),
        active=np.zeros(T, dtype=bool),
        events=[],
    )


def add_flow(output: InstrumentOutput, category: str, idx: int | None, amount: float) -> None:
    """Accumulate ``amount`` into ``category`` at row ``idx`` (no-op outside the index)."""
    if idx is None or amount == 0:
        return
    T = len(output["value"])
    series = output["flows"].setdefault(category, np.zeros(T))
    series[idx] += amount


@dataclass(frozen=True)
class LineItem:
    """One labeled amount in a breakdown (cash-flow side or balance-sheet side)."""

    label: str
    category: str
    amount: float
    instrument_id: str = ""


@dataclass
class YearlyCashflow:
    """
    Cash-flow record for one projected year.

    ``amount`` is the signed net surplus (inflows minus outflows). Every
    category field holds a non-negative magnitude; ``positives`` and
    ``negatives`` list the labeled contributions per instrument.
    """

    year: int
    age: int
    amount: float = 0.0
    income: float = 0.0
    expense: float = 0.0
    savings: float = 0.0
    pension: float = 0.0
    rental_income: float = 0.0
    real_estate_pension: float = 0.0
    asset_income: float = 0.0
    real_estate_sale: float = 0.0
    asset_sale: float = 0.0
    debt_injection: float = 0.0
    saving_maturity: float = 0.0
    debt_interest: float = 0.0
    debt_principal: float = 0.0
    real_estate_purchase: float = 0.0
    asset_purchase: float = 0.0
    positives: list[LineItem] = field(default_factory=list)
    negatives: list[LineItem] = field(default_factory=list)

    @property
    def total_inflow(self) -> float:
        return sum(getattr(self, c) for c in INFLOW_CATEGORIES)

    @property
    def total_outflow(self) -> float:
        return sum(getattr(self, c) for c in OUTFLOW_CATEGORIES)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class YearlyBalanceSheet:
    """
    Net-worth snapshot for one projected year.

    Attributes:
        year: Calendar year
        age: Age of the primary person
        cash: Running cash balance after this year's cash flow
        items: Display label -> signed value, cash included under "cash";
            instruments sharing a title are summed
        total_amount: Sum of all signed values (net worth)
        asset_items: Per-instrument positive holdings
        debt_items: Per-instrument debts (negative amounts)
    """

    year: int
    age: int
    cash: float = 0.0
    items: dict[str, float] = field(default_factory=dict)
    total_amount: float = 0.0
    asset_items: list[LineItem] = field(default_factory=list)
    debt_items: list[LineItem] = field(default_factory=list)

    @property
    def total_assets(self) -> float:
        return self.cash + sum(item.amount for item in self.asset_items)

    @property
    def total_debt(self) -> float:
        return sum(item.amount for item in self.debt_items)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def cashflow_frame(series: list[YearlyCashflow]) -> pd.DataFrame:
    """
    Year-indexed DataFrame of a cash-flow series.

    Columns are ``age``, ``amount`` and one column per category; the labeled
    breakdowns are left out (see ``breakdown_frame``).
    """
    columns = ["age", "amount", *CATEGORIES]
    rows = [{c: getattr(cf, c) for c in columns} for cf in series]
    index = pd.Index([cf.year for cf in series], name="year")
    return pd.DataFrame(rows, index=index, columns=columns)


def breakdown_frame(series: list[YearlyCashflow]) -> pd.DataFrame:
    """Long-format DataFrame of every labeled line item, signed by side."""
    rows = []
    for cf in series:
        for item in cf.positives:
            rows.append({"year": cf.year, **asdict(item)})
        for item in cf.negatives:
            rows.append({"year": cf.year, **asdict(item), "amount": -item.amount})
    return pd.DataFrame(rows, columns=["year", "label", "category", "amount", "instrument_id"])


def balance_sheet_frame(series: list[YearlyBalanceSheet]) -> pd.DataFrame:
    """
    Year-indexed DataFrame of a balance-sheet series.

    Columns: ``age``, ``cash``, ``total_assets``, ``total_debt``,
    ``total_amount``, followed by one column per display label (0 where the
    label is not held that year).
    """
    labels: list[str] = []
    for bs in series:
        for label in bs.items:
            if label != CASH_LABEL and label not in labels:
                labels.append(label)
    rows = []
    for bs in series:
        row = {
            "age": bs.age,
            "cash": bs.cash,
            "total_assets": bs.total_assets,
            "total_debt": bs.total_debt,
            "total_amount": bs.total_amount,
        }
        for label in labels:
            row[label] = bs.items.get(label, 0.0)
        rows.append(row)
    index = pd.Index([bs.year for bs in series], name="year")
    columns = ["age", "cash", "total_assets", "total_debt", "total_amount", *labels]
    return pd.DataFrame(rows, index=index, columns=columns)
