"""
Utility functions for FinPlanLab.
"""

from __future__ import annotations

import math
import re
import warnings
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

import numpy as np

from .errors import FinPlanWarning

# Track warnings per instrument to avoid spam; cleared when a run starts
_warned: set[tuple[str, str]] = set()
_run_depth = 0


def warn_once(code: str, instrument_id: str, msg: str, *, category=FinPlanWarning):
    """Warn once per (instrument_id, code) to avoid spam."""
    key = (instrument_id, code)
    if key not in _warned:
        _warned.add(key)
        warnings.warn(msg, category, stacklevel=3)


@contextmanager
def warning_scope() -> Iterator[None]:
    """
    Deduplicate ``warn_once`` within one projection run.

    The outermost scope starts with an empty registry, so every run reports
    its own data problems; nested scopes share the registry of the outer one.
    """
    global _run_depth
    if _run_depth == 0:
        _warned.clear()
    _run_depth += 1
    try:
        yield
    finally:
        _run_depth -= 1


def slugify_name(name: str) -> str:
    """Lowercase a display name and collapse non-alphanumerics into underscores."""
    return re.sub(r"[^0-9a-z]+", "_", str(name).strip().lower()).strip("_")


def to_float(value: Any, default: float = 0.0, *, field: str = "", owner: str = "") -> float:
    """
    Coerce a raw record value to a finite float.

    Accepts numbers and numeric strings (thousands separators and a trailing
    '%' are tolerated). None, empty strings, NaN and infinities fall back to
    ``default``. A non-empty value that cannot be parsed also falls back to
    ``default`` and emits a FinPlanWarning once per (owner, field).

    Args:
        value: Raw value from a record
        default: Value returned when nothing usable is present
        field: Field name, used in the warning message
        owner: Instrument id or title, used to de-duplicate warnings

    Returns:
        A finite float

    Example:
        ```python
        to_float("1,200")   # 1200.0
        to_float(None, 2.5) # 2.5
        to_float("abc")     # 0.0 (with a warning)
        ```
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float, np.integer, np.floating)):
        number = float(value)
        return number if math.isfinite(number) else default
    text = str(value).strip().replace(",", "").rstrip("%").strip()
    if not text:
        return default
    try:
        number = float(text)
    except ValueError:
        warn_once(
            f"UNPARSEABLE_{field.upper()}",
            owner,
            f"[{owner}] could not parse {field or 'value'}={value!r}; using {default}.",
        )
        return default
    return number if math.isfinite(number) else default


def to_int(value: Any, default: int = 0, *, field: str = "", owner: str = "") -> int:
    """Coerce a raw record value to an int (years, periods); see to_float."""
    return int(to_float(value, float(default), field=field, owner=owner))


def to_bool(value: Any) -> bool:
    """Interpret checkbox-like values ('true', 'Y', 1) as booleans."""
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y", "on"}
    return bool(value)


def pick(record: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first key present (and not None) in record, trying aliases in order."""
    for key in keys:
        if key in record and record[key] is not None:
            return record[key]
    return default


def in_window(year: int, start_year: int, end_year: int) -> bool:
    """Inclusive validity window check: start_year <= year <= end_year."""
    return start_year <= year <= end_year


def window_mask(years: np.ndarray, start_year: int, end_year: int) -> np.ndarray:
    """
    Create a boolean mask of the years inside an inclusive window.

    Args:
        years: Projection year index (ascending integers)
        start_year: First active year
        end_year: Last active year (inclusive)

    Returns:
        Boolean array where True indicates the instrument is active

    Example:
        ```python
        years = year_range(2025, 6)      # 2025..2030
        window_mask(years, 2026, 2028)   # [F, T, T, T, F, F]
        ```
    """
    return (years >= start_year) & (years <= end_year)


def year_range(first_year: int, count: int) -> np.ndarray:
    """Consecutive calendar years starting at first_year."""
    return first_year + np.arange(max(0, int(count)), dtype=int)


def annual_amount(amount: float, frequency: str) -> float:
    """Convert a periodic amount to its yearly total (monthly x12, otherwise as-is)."""
    return amount * 12.0 if frequency == "monthly" else amount


def growth_factor(rate: float, years: int) -> float:
    """Compound factor (1 + rate) ** years for a fractional annual rate."""
    return (1.0 + rate) ** years
