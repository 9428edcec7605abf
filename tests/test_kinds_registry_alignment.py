"""
Tests for kind taxonomy and registry alignment.
"""

from finplanlab.core.instruments import (
    FlowRegistry,
    PensionRegistry,
    ScheduleRegistry,
    ValuationRegistry,
)
from finplanlab.core.interfaces import IInstrumentStrategy
from finplanlab.core.kinds import ASSET_TYPES, DEBT_TYPES, PENSION_TYPES, K

REGISTRIES = {
    "a": ValuationRegistry,
    "p": PensionRegistry,
    "l": ScheduleRegistry,
    "f": FlowRegistry,
}


def test_registry_keys_are_current():
    """Ensure all registered keys belong to the taxonomy."""
    ok = set(K.all_kinds())
    for reg in REGISTRIES.values():
        for k in reg.keys():
            assert k in ok, f"Registry key not in K: {k}"


def test_every_kind_is_registered():
    """Every kind has a strategy in the registry of its family."""
    for k in K.all_kinds():
        family = k.split(".")[0]
        assert k in REGISTRIES[family], f"No strategy registered for {k}"


def test_registered_strategies_satisfy_protocol():
    for reg in REGISTRIES.values():
        for strategy in reg.values():
            assert isinstance(strategy, IInstrumentStrategy)


def test_record_types_map_to_kinds():
    """User-facing type discriminators resolve to known kinds."""
    for mapping in (PENSION_TYPES, DEBT_TYPES, ASSET_TYPES):
        for kind in mapping.values():
            assert kind in K.all_kinds()


def test_kind_prefix_semantics():
    """Test behavior-based family detection remains stable."""
    for k in (K.A_SAVING, K.A_REAL_ESTATE, K.A_ASSET_GENERAL, K.A_ASSET_INCOME):
        assert k.split(".")[0] == "a"
    for k in (K.P_PENSION_NATIONAL, K.P_PENSION_PERSONAL):
        assert k.split(".")[0] == "p"
    for k in (K.L_DEBT_BULLET, K.L_DEBT_GRACE):
        assert k.split(".")[0] == "l"
    for k in (K.F_INCOME_RECURRING, K.F_EXPENSE_RECURRING):
        assert k.split(".")[0] == "f"
