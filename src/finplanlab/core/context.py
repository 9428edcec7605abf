"""
Context classes for FinPlanLab projections.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

import numpy as np

from .utils import year_range

if TYPE_CHECKING:
    from .instruments import Profile

DEFAULT_HORIZON_AGE = 90
DEFAULT_NATIONAL_INFLATION_PCT = 2.5


@dataclass(frozen=True)
class ProjectionConfig:
    """
    Run-level settings for a projection.

    Attributes:
        horizon_age: Age at which the projection stops (inclusive)
        current_year: First projected year (None = today's calendar year)
        default_national_inflation_pct: Fallback inflation (percent) for national
            pensions that do not carry their own rate
    """

    horizon_age: int = DEFAULT_HORIZON_AGE
    current_year: int | None = None
    default_national_inflation_pct: float = DEFAULT_NATIONAL_INFLATION_PCT

    def resolve_current_year(self) -> int:
        return int(self.current_year) if self.current_year else date.today().year


@dataclass
class ProjectionContext:
    """
    Context object passed to all instrument strategies during a projection.

    Attributes:
        years: Array of projected calendar years (ascending, one per row of output)
        profile: Household profile the projection belongs to
        config: Run-level settings

    Note:
        Strategies fold their own running state across years, starting at the
        instrument's start year even when it precedes ``years[0]``, and report only
        the years inside the index.
    """

    years: np.ndarray
    profile: Profile
    config: ProjectionConfig

    @classmethod
    def build(cls, profile: Profile, config: ProjectionConfig | None = None) -> ProjectionContext:
        """Derive the year index current_year .. current_year + (horizon_age - current_age)."""
        config = config or ProjectionConfig()
        current_year = config.resolve_current_year()
        current_age = profile.age_in(current_year)
        count = config.horizon_age - current_age + 1
        return cls(years=year_range(current_year, count), profile=profile, config=config)

    @property
    def T(self) -> int:
        return len(self.years)

    @property
    def first_year(self) -> int:
        return int(self.years[0]) if len(self.years) else self.config.resolve_current_year()

    @property
    def last_year(self) -> int:
        return int(self.years[-1]) if len(self.years) else self.first_year - 1

    @property
    def retirement_year(self) -> int:
        return self.profile.retirement_year

    def index_of(self, year: int) -> int | None:
        """Row index of a calendar year, or None when it falls outside the projection."""
        idx = int(year) - self.first_year
        if 0 <= idx < self.T:
            return idx
        return None
