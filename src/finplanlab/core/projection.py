"""
Projection engine for household cash flow and net worth.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

import numpy as np
import pandas as pd

from .context import ProjectionConfig, ProjectionContext
from .errors import ConfigError
from .events import Event
from .instruments import Collections, Instrument, Profile, resolve_strategy
from .results import (
    CASH_LABEL,
    INFLOW_CATEGORIES,
    InstrumentOutput,
    LineItem,
    YearlyBalanceSheet,
    YearlyCashflow,
    balance_sheet_frame,
    breakdown_frame,
    cashflow_frame,
)
from .utils import pick, warn_once, warning_scope

logger = logging.getLogger(__name__)

InstrumentsArg = Iterable[Instrument | Mapping[str, Any]] | None

# Collection name -> (record keys, id prefix for records without an id)
_COLLECTION_KEYS = {
    "incomes": (("incomes",), "income"),
    "expenses": (("expenses",), "expense"),
    "savings": (("savings",), "saving"),
    "pensions": (("pensions",), "pension"),
    "real_estates": (("real_estates", "realEstates"), "real_estate"),
    "assets": (("assets",), "asset"),
    "debts": (("debts",), "debt"),
}


def _coerce(
    items: InstrumentsArg, cls: type[Instrument], prefix: str, seen: set[str]
) -> tuple[Instrument, ...]:
    """
    Turn raw records or instruments into typed instruments with unique ids.

    Records that are neither a mapping nor an instance of ``cls`` are skipped
    with a warning. Missing ids become ``<prefix>-<position>``; a repeated id
    gets the first free ``-<n>`` suffix from its position on, so ids stay
    unique across the household.
    """
    result = []
    for pos, item in enumerate(items or []):
        if isinstance(item, cls):
            instrument = item
        elif isinstance(item, Mapping):
            instrument = cls.from_record(item)
        else:
            warn_once(
                "MALFORMED",
                f"{prefix}-{pos}",
                f"[{prefix}-{pos}] expected a mapping or {cls.__name__}, "
                f"got {type(item).__name__}; instrument skipped.",
            )
            continue

        if not instrument.id:
            instrument = replace(instrument, id=f"{prefix}-{pos}")
        if instrument.id in seen:
            suffix = pos
            while f"{instrument.id}-{suffix}" in seen:
                suffix += 1
            new_id = f"{instrument.id}-{suffix}"
            warn_once(
                "DUPLICATE_ID",
                instrument.id,
                f"[{instrument.id}] duplicate id; renamed to {new_id!r}.",
            )
            instrument = replace(instrument, id=new_id)
        seen.add(instrument.id)
        result.append(instrument)
    return tuple(result)


def build_collections(
    incomes: InstrumentsArg = None,
    expenses: InstrumentsArg = None,
    savings: InstrumentsArg = None,
    pensions: InstrumentsArg = None,
    real_estates: InstrumentsArg = None,
    assets: InstrumentsArg = None,
    debts: InstrumentsArg = None,
) -> Collections:
    """Coerce every collection into typed instruments with ids unique across the household."""
    seen: set[str] = set()
    raw = {
        "incomes": incomes,
        "expenses": expenses,
        "savings": savings,
        "pensions": pensions,
        "real_estates": real_estates,
        "assets": assets,
        "debts": debts,
    }
    return Collections(
        **{
            name: _coerce(raw[name], Collections.field_types[name], prefix, seen)
            for name, (_, prefix) in _COLLECTION_KEYS.items()
        }
    )


def _simulate_all(
    collections: Collections, ctx: ProjectionContext
) -> list[tuple[Instrument, InstrumentOutput]]:
    """
    Simulate every instrument with its registered strategy.

    An instrument whose kind has no strategy, or whose numbers overflow while
    simulating, is skipped with a warning; one bad record never aborts the
    projection.
    """
    simulated = []
    for instrument in collections.all():
        try:
            strategy = resolve_strategy(instrument)
        except ConfigError as exc:
            warn_once(
                "UNKNOWN_KIND",
                instrument.id,
                f"[{instrument.id}] {exc}; instrument skipped.",
            )
            continue
        try:
            strategy.prepare(instrument, ctx)
            output = strategy.simulate(instrument, ctx)
        except ArithmeticError as exc:
            warn_once(
                "NUMERIC",
                instrument.id,
                f"[{instrument.id}] numeric error while simulating ({exc}); instrument skipped.",
            )
            logger.debug("Skipped %s: %r", instrument.id, exc)
            continue
        simulated.append((instrument, output))
    logger.debug(
        "Simulated %d of %d instruments over %d years",
        len(simulated),
        len(collections.all()),
        ctx.T,
    )
    return simulated


def _cashflow_series(
    ctx: ProjectionContext, simulated: list[tuple[Instrument, InstrumentOutput]]
) -> list[YearlyCashflow]:
    rows = [YearlyCashflow(year=int(y), age=ctx.profile.age_in(int(y))) for y in ctx.years]
    for instrument, output in simulated:
        for category, series in output["flows"].items():
            inflow = category in INFLOW_CATEGORIES
            for idx in np.flatnonzero(series):
                amount = float(series[idx])
                row = rows[idx]
                setattr(row, category, getattr(row, category) + amount)
                item = LineItem(
                    label=instrument.label,
                    category=category,
                    amount=amount,
                    instrument_id=instrument.id,
                )
                (row.positives if inflow else row.negatives).append(item)
    for row in rows:
        row.amount = row.total_inflow - row.total_outflow
    return rows


def _balance_sheet_series(
    ctx: ProjectionContext,
    simulated: list[tuple[Instrument, InstrumentOutput]],
    cashflow_series: list[YearlyCashflow],
) -> list[YearlyBalanceSheet]:
    amounts = {cf.year: cf.amount for cf in cashflow_series}
    cash = ctx.profile.current_cash
    sheets = []
    for idx, year in enumerate(ctx.years):
        year = int(year)
        cash += amounts.get(year, 0.0)
        items = {CASH_LABEL: cash}
        asset_items: list[LineItem] = []
        debt_items: list[LineItem] = []
        for instrument, output in simulated:
            if not output["active"][idx]:
                continue
            value = float(output["value"][idx])
            items[instrument.label] = items.get(instrument.label, 0.0) + value
            item = LineItem(
                label=instrument.label,
                category=instrument.kind,
                amount=value,
                instrument_id=instrument.id,
            )
            (debt_items if instrument.family == "l" else asset_items).append(item)
        sheets.append(
            YearlyBalanceSheet(
                year=year,
                age=ctx.profile.age_in(year),
                cash=cash,
                items=items,
                total_amount=sum(items.values()),
                asset_items=asset_items,
                debt_items=debt_items,
            )
        )
    return sheets


def project_cashflow(
    profile: Profile | Mapping[str, Any],
    incomes: InstrumentsArg = None,
    expenses: InstrumentsArg = None,
    savings: InstrumentsArg = None,
    pensions: InstrumentsArg = None,
    real_estates: InstrumentsArg = None,
    assets: InstrumentsArg = None,
    debts: InstrumentsArg = None,
    *,
    config: ProjectionConfig | None = None,
) -> list[YearlyCashflow]:
    """
    Project the household's yearly net cash flow.

    One record per year from the current year up to the horizon age, each with
    the signed surplus (inflows minus outflows), per-category totals and the
    labeled line items behind them.

    Args:
        profile: Profile or profile record (``birth_year`` required)
        incomes, expenses, savings, pensions, real_estates, assets, debts:
            Instruments or raw records (camelCase or snake_case fields)
        config: Run settings (horizon age, current year, default inflation)

    Returns:
        Year-ordered list of YearlyCashflow

    Raises:
        ConfigError: If the profile is unusable

    Example:
        ```python
        series = project_cashflow(
            {"birthYear": 1985, "currentCash": 10_000},
            incomes=[{"title": "Salary", "amount": 4000, "frequency": "monthly",
                      "startYear": 2025, "endYear": 2045, "growthRate": 2}],
            config=ProjectionConfig(current_year=2025),
        )
        ```
    """
    with warning_scope():
        profile = Profile.from_record(profile)
        ctx = ProjectionContext.build(profile, config)
        collections = build_collections(
            incomes, expenses, savings, pensions, real_estates, assets, debts
        )
        return _cashflow_series(ctx, _simulate_all(collections, ctx))


def project_net_worth(
    profile: Profile | Mapping[str, Any],
    incomes: InstrumentsArg = None,
    expenses: InstrumentsArg = None,
    savings: InstrumentsArg = None,
    pensions: InstrumentsArg = None,
    real_estates: InstrumentsArg = None,
    assets: InstrumentsArg = None,
    cashflow_series: list[YearlyCashflow] | None = None,
    debts: InstrumentsArg = None,
    *,
    config: ProjectionConfig | None = None,
) -> list[YearlyBalanceSheet]:
    """
    Roll the household's net worth forward year by year.

    Cash starts at ``profile.current_cash`` and absorbs each year's net cash
    flow from ``cashflow_series`` (years missing from it add nothing). Every
    instrument held that year contributes its signed value; instruments that
    share a title are summed under one label, while ``asset_items`` and
    ``debt_items`` keep one entry per instrument id.

    Args:
        profile: Profile or profile record
        incomes, expenses, savings, pensions, real_estates, assets, debts:
            The same instruments that produced ``cashflow_series``
        cashflow_series: Output of ``project_cashflow``
        config: Run settings, matching the cash-flow run

    Returns:
        Year-ordered list of YearlyBalanceSheet
    """
    with warning_scope():
        profile = Profile.from_record(profile)
        ctx = ProjectionContext.build(profile, config)
        collections = build_collections(
            incomes, expenses, savings, pensions, real_estates, assets, debts
        )
        simulated = _simulate_all(collections, ctx)
    return _balance_sheet_series(ctx, simulated, cashflow_series or [])


@dataclass
class ProjectionResults:
    """
    Results of one household projection.

    Attributes:
        cashflow: Yearly cash-flow series
        balance_sheet: Yearly balance-sheet series
        events: Year-ordered events from all instruments
        profile: Profile the projection was run for
    """

    cashflow: list[YearlyCashflow]
    balance_sheet: list[YearlyBalanceSheet]
    events: list[Event] = field(default_factory=list)
    profile: Profile | None = None

    def cashflow_frame(self) -> pd.DataFrame:
        return cashflow_frame(self.cashflow)

    def balance_sheet_frame(self) -> pd.DataFrame:
        return balance_sheet_frame(self.balance_sheet)

    def breakdown_frame(self) -> pd.DataFrame:
        return breakdown_frame(self.cashflow)

    def summary(self) -> dict[str, Any]:
        """
        Headline numbers of the projection.

        Returns:
            Dict with the year range, lifetime supply/demand totals, the first
            deficit year, the final net worth and its gap to the profile's
            target assets
        """
        from finplanlab.kpi import first_deficit_year, lifetime_cashflow_totals

        totals = lifetime_cashflow_totals(self.cashflow)
        final = self.balance_sheet[-1] if self.balance_sheet else None
        target = self.profile.target_assets if self.profile else 0.0
        return {
            "first_year": self.cashflow[0].year if self.cashflow else None,
            "last_year": self.cashflow[-1].year if self.cashflow else None,
            "total_supply": totals["total_supply"],
            "total_demand": totals["total_demand"],
            "net_cashflow": totals["net_cashflow"],
            "first_deficit_year": first_deficit_year(self.cashflow) if self.cashflow else None,
            "final_net_worth": final.total_amount if final else None,
            "target_assets": target,
            "target_gap": final.total_amount - target if final else None,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "cashflow": [cf.to_dict() for cf in self.cashflow],
            "balance_sheet": [bs.to_dict() for bs in self.balance_sheet],
            "events": [event._asdict() for event in self.events],
        }


@dataclass
class Household:
    """
    A household and its instruments, ready to be projected.

    Attributes:
        profile: Household profile
        collections: Typed instruments by collection

    Example:
        ```python
        household = Household.from_dict(json.load(open("household.json")))
        results = household.run(ProjectionConfig(current_year=2025))
        results.balance_sheet_frame()["total_amount"]
        ```
    """

    profile: Profile
    collections: Collections = field(default_factory=Collections)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Household:
        """
        Create a Household from a dictionary.

        Args:
            data: Mapping with a ``profile`` record and optional lists
                ``incomes``, ``expenses``, ``savings``, ``pensions``,
                ``real_estates`` (or ``realEstates``), ``assets``, ``debts``

        Raises:
            ConfigError: If ``data`` is not a mapping or the profile is unusable
        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"household must be a mapping, got {type(data).__name__}")
        if "profile" not in data:
            raise ConfigError("household is missing its 'profile'")
        with warning_scope():
            profile = Profile.from_record(data["profile"])
            raw = {name: pick(data, *keys) for name, (keys, _) in _COLLECTION_KEYS.items()}
            return cls(profile=profile, collections=build_collections(**raw))

    def run(self, config: ProjectionConfig | None = None) -> ProjectionResults:
        """
        Project cash flow and net worth in one pass.

        Instruments are simulated once and both series are derived from the
        same outputs.
        """
        ctx = ProjectionContext.build(self.profile, config)
        with warning_scope():
            simulated = _simulate_all(self.collections, ctx)
        cashflow = _cashflow_series(ctx, simulated)
        balance_sheet = _balance_sheet_series(ctx, simulated, cashflow)
        events = sorted(
            (event for _, output in simulated for event in output["events"]),
            key=lambda e: e.year,
        )
        logger.debug(
            "Projected %d years (%s..%s), %d events",
            ctx.T,
            ctx.first_year,
            ctx.last_year,
            len(events),
        )
        return ProjectionResults(
            cashflow=cashflow,
            balance_sheet=balance_sheet,
            events=events,
            profile=self.profile,
        )


__all__ = [
    "Household",
    "ProjectionResults",
    "build_collections",
    "project_cashflow",
    "project_net_worth",
]
