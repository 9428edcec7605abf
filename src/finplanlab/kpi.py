"""
KPI calculation utilities for household projections.

This module provides standalone functions for summarizing cash-flow and
balance-sheet series. Functions accept the series returned by the projectors
(or their DataFrame views) and return plain numbers, pandas Series or
DataFrames.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

import pandas as pd

from finplanlab.core.results import (
    YearlyBalanceSheet,
    YearlyCashflow,
    balance_sheet_frame,
    cashflow_frame,
)

_TOTALS_COLUMNS = ["category", "label", "amount"]


def _aggregate(items: list[dict[str, Any]]) -> pd.DataFrame:
    if not items:
        return pd.DataFrame(columns=_TOTALS_COLUMNS)
    df = pd.DataFrame(items)
    df = df[df["amount"] > 0]
    grouped = df.groupby(["category", "label"], as_index=False, sort=False)["amount"].sum()
    return grouped.sort_values("amount", ascending=False, kind="stable").reset_index(drop=True)


def lifetime_cashflow_totals(series: list[YearlyCashflow]) -> dict[str, Any]:
    """
    Aggregate lifetime supply (inflows) and demand (outflows) of funds.

    Every labeled line item is summed per (category, label) across all years.
    When the series carries no breakdown at all, the signed yearly totals are
    used instead, under a single supply and a single demand entry.

    Args:
        series: Cash-flow series from ``project_cashflow``

    Returns:
        Dict with:
            - supply: DataFrame[category, label, amount], largest first
            - demand: DataFrame[category, label, amount], largest first
            - total_supply / total_demand: Sums of the two tables
            - net_cashflow: total_supply - total_demand
    """
    supply_items = [asdict(item) for cf in series for item in cf.positives]
    demand_items = [asdict(item) for cf in series for item in cf.negatives]

    if not supply_items and not demand_items:
        for cf in series:
            if cf.amount > 0:
                supply_items.append(
                    {"category": "cashflow", "label": "supply", "amount": cf.amount}
                )
            elif cf.amount < 0:
                demand_items.append(
                    {"category": "cashflow", "label": "demand", "amount": -cf.amount}
                )

    supply = _aggregate(supply_items)
    demand = _aggregate(demand_items)
    total_supply = float(supply["amount"].sum()) if len(supply) else 0.0
    total_demand = float(demand["amount"].sum()) if len(demand) else 0.0
    return {
        "supply": supply,
        "demand": demand,
        "total_supply": total_supply,
        "total_demand": total_demand,
        "net_cashflow": total_supply - total_demand,
    }


def cumulative_cashflow(series: list[YearlyCashflow] | pd.DataFrame) -> pd.Series:
    """
    Running sum of the yearly net cash flow.

    Args:
        series: Cash-flow series or its ``cashflow_frame`` view

    Returns:
        Year-indexed Series named ``cumulative_cashflow``
    """
    df = series if isinstance(series, pd.DataFrame) else cashflow_frame(series)
    return df["amount"].cumsum().rename("cumulative_cashflow")


def first_deficit_year(series: list[YearlyCashflow] | pd.DataFrame) -> int | None:
    """First year whose net cash flow is negative, or None if there is none."""
    df = series if isinstance(series, pd.DataFrame) else cashflow_frame(series)
    deficits = df.index[df["amount"] < 0]
    return int(deficits[0]) if len(deficits) else None


def net_worth_gap(
    balance_sheet: list[YearlyBalanceSheet] | pd.DataFrame, target: float
) -> pd.Series:
    """
    Distance of the net worth from a target, per year.

    Positive values mean the target is exceeded.

    Args:
        balance_sheet: Balance-sheet series or its ``balance_sheet_frame`` view
        target: Target net worth (e.g. ``profile.target_assets``)

    Returns:
        Year-indexed Series named ``net_worth_gap``
    """
    df = (
        balance_sheet
        if isinstance(balance_sheet, pd.DataFrame)
        else balance_sheet_frame(balance_sheet)
    )
    return (df["total_amount"] - float(target)).rename("net_worth_gap")


def net_worth_at_age(
    balance_sheet: list[YearlyBalanceSheet] | pd.DataFrame, age: int
) -> float | None:
    """Net worth in the year the primary person reaches ``age``, or None outside the horizon."""
    df = (
        balance_sheet
        if isinstance(balance_sheet, pd.DataFrame)
        else balance_sheet_frame(balance_sheet)
    )
    rows = df[df["age"] == age]
    if rows.empty:
        return None
    return float(rows["total_amount"].iloc[0])


__all__ = [
    "lifetime_cashflow_totals",
    "cumulative_cashflow",
    "first_deficit_year",
    "net_worth_gap",
    "net_worth_at_age",
]
