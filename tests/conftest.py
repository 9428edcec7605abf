"""
Shared fixtures for FinPlanLab tests.
"""

import pytest
from finplanlab.core import utils
from finplanlab.core.context import ProjectionConfig, ProjectionContext
from finplanlab.core.instruments import Profile


@pytest.fixture(autouse=True)
def reset_warned():
    """Forget which warnings were already emitted so each test sees its own."""
    utils._warned.clear()
    yield
    utils._warned.clear()


@pytest.fixture
def profile():
    """Primary person born 1985, retiring at 60 (2045)."""
    return Profile(birth_year=1985, retirement_age=60, current_cash=10_000.0)


@pytest.fixture
def ctx(profile):
    """Projection 2025..2075 (age 40..90)."""
    return ProjectionContext.build(profile, ProjectionConfig(current_year=2025))
