"""
Event classes for tracking projection occurrences.
"""

from __future__ import annotations

from typing import Any, NamedTuple


class Event(NamedTuple):
    """
    Year-stamped event record for instrument projections.

    Attributes:
        year: Calendar year when the event occurred
        kind: Event type identifier (e.g., 'maturity', 'purchase', 'sale', 'payoff')
        message: Human-readable description of the event
        meta: Optional dictionary with additional event metadata
    """

    year: int
    kind: str
    message: str
    meta: dict[str, Any] | None = None
