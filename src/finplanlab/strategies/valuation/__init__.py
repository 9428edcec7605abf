"""
Valuation strategies for held assets.
"""

from .asset import ValuationAsset, ValuationIncomeAsset
from .real_estate import ValuationRealEstate
from .saving import ValuationSaving, contribution_for, terminal_value

__all__ = [
    "ValuationSaving",
    "ValuationRealEstate",
    "ValuationAsset",
    "ValuationIncomeAsset",
    "contribution_for",
    "terminal_value",
]
