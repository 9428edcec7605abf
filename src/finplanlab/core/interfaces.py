"""
Strategy interface protocols for FinPlanLab.
Defines the contracts that all instrument strategies must satisfy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    # Only imported for type checking to avoid runtime cycles
    from .context import ProjectionContext
    from .results import InstrumentOutput


@runtime_checkable
class IInstrumentStrategy(Protocol):
    """
    Contract shared by every instrument strategy.

    Strategies are stateless singletons held in the registries; all running
    state for one instrument lives inside ``simulate``.
    """

    def prepare(self, instrument: Any, ctx: ProjectionContext) -> None:
        """
        Validate inputs before simulation.
        Raises ConfigError for records that cannot be projected at all and warns
        (once per instrument) for records that are projected with degraded data.
        """
        ...

    def simulate(self, instrument: Any, ctx: ProjectionContext) -> InstrumentOutput:
        """
        Run the full-horizon projection for one instrument.

        Returns:
            InstrumentOutput with fields:
              - flows:  dict[category, np.ndarray[T]] of non-negative magnitudes
              - value:  np.ndarray[T] signed balance-sheet value (debts negative)
              - active: np.ndarray[T] of bool, True while the instrument is held
              - events: list[Event]
        """
        ...


@runtime_checkable
class IFlowStrategy(IInstrumentStrategy, Protocol):
    """
    Contract for CASH FLOW strategies (family='f').
    Responsibilities: generate recurring external income or expense.
    """


@runtime_checkable
class IValuationStrategy(IInstrumentStrategy, Protocol):
    """
    Contract for ASSET valuation strategies (family='a').
    Responsibilities: produce values over time plus purchase, income and sale flows.
    """


@runtime_checkable
class IPensionStrategy(IInstrumentStrategy, Protocol):
    """
    Contract for PENSION strategies (family='p').
    Responsibilities: accrue contributions and pay out over the payment window.
    """


@runtime_checkable
class IScheduleStrategy(IInstrumentStrategy, Protocol):
    """
    Contract for LIABILITY schedule strategies (family='l').
    Responsibilities: produce debt balances and payment schedules over time.
    """


__all__ = [
    "IInstrumentStrategy",
    "IFlowStrategy",
    "IValuationStrategy",
    "IPensionStrategy",
    "IScheduleStrategy",
]
