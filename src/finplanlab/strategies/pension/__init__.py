"""
Pension strategies.
"""

from .accrual import PensionAccrual
from .national import PensionNational

__all__ = [
    "PensionNational",
    "PensionAccrual",
]
