"""
Instrument classes for FinPlanLab household projections.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, ClassVar

from .errors import ConfigError
from .interfaces import IInstrumentStrategy
from .kinds import ASSET_TYPES, DEBT_TYPES, PENSION_TYPES, K
from .utils import pick, to_bool, to_float, to_int


def _base_fields(record: Mapping[str, Any]) -> dict[str, Any]:
    """Parse the fields every instrument shares from a raw record."""
    owner = str(pick(record, "id", "title", default=""))
    return {
        "id": str(pick(record, "id", default="")),
        "title": str(pick(record, "title", "name", default="")).strip(),
        "start_year": to_int(
            pick(record, "start_year", "startYear"), field="start_year", owner=owner
        ),
        "end_year": to_int(
            pick(record, "end_year", "endYear"), field="end_year", owner=owner
        ),
        "memo": str(pick(record, "memo", default="")),
    }


@dataclass(frozen=True)
class FamilyMember:
    """Household member used for age read-outs next to the main profile."""

    name: str
    birth_year: int
    relationship: str = ""

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> FamilyMember:
        name = str(pick(record, "name", default=""))
        return cls(
            name=name,
            birth_year=to_int(
                pick(record, "birth_year", "birthYear"), field="birth_year", owner=name
            ),
            relationship=str(pick(record, "relationship", "relation", default="")),
        )

    def age_in(self, year: int) -> int:
        return int(year) - self.birth_year


@dataclass(frozen=True)
class Profile:
    """
    Household profile driving the projection horizon.

    Attributes:
        birth_year: Birth year of the primary person (required)
        retirement_age: Planned retirement age
        current_cash: Cash balance at the start of the projection
        target_assets: Net worth the household aims for
        family_members: Other household members
        name: Display name

    Note:
        Ages are full years: age in year Y is ``Y - birth_year``.
    """

    birth_year: int
    retirement_age: int = 60
    current_cash: float = 0.0
    target_assets: float = 0.0
    family_members: tuple[FamilyMember, ...] = ()
    name: str = ""

    @classmethod
    def from_record(cls, record: Mapping[str, Any] | Profile) -> Profile:
        """
        Build a Profile from a raw record.

        Raises:
            ConfigError: If the record is not a mapping or has no usable birth year
        """
        if isinstance(record, Profile):
            return record
        if not isinstance(record, Mapping):
            raise ConfigError(
                f"profile must be a mapping or Profile, got {type(record).__name__}"
            )
        name = str(pick(record, "name", default=""))
        birth_year = to_int(
            pick(record, "birth_year", "birthYear"), field="birth_year", owner="profile"
        )
        if birth_year <= 0:
            raise ConfigError("profile.birth_year is required to derive ages")
        members = pick(record, "family_members", "familyMembers", "householdMembers", default=[])
        return cls(
            birth_year=birth_year,
            retirement_age=to_int(
                pick(record, "retirement_age", "retirementAge"),
                60,
                field="retirement_age",
                owner="profile",
            ),
            current_cash=to_float(
                pick(record, "current_cash", "currentCash"), field="current_cash", owner="profile"
            ),
            target_assets=to_float(
                pick(record, "target_assets", "targetAssets"),
                field="target_assets",
                owner="profile",
            ),
            family_members=tuple(
                m if isinstance(m, FamilyMember) else FamilyMember.from_record(m)
                for m in members or []
                if isinstance(m, (FamilyMember, Mapping))
            ),
            name=name,
        )

    def age_in(self, year: int) -> int:
        return int(year) - self.birth_year

    @property
    def retirement_year(self) -> int:
        return self.birth_year + self.retirement_age

    def family_ages(self, year: int) -> dict[str, int]:
        """Ages of every household member in the given year, keyed by name."""
        return {m.name: m.age_in(year) for m in self.family_members}


@dataclass(frozen=True)
class Instrument:
    """
    Base class for all financial instruments in FinPlanLab.

    Instruments are immutable inputs. The behavior is determined by the
    ``kind`` discriminator and the strategy registered for it; running state
    lives inside the strategy's year loop for a single projection.

    Attributes:
        id: Unique identifier (stable across edits)
        title: Display label, not guaranteed to be unique
        start_year: First active year (inclusive)
        end_year: Last active year (inclusive)
        memo: Free-text note, ignored by the engine
    """

    id: str = ""
    title: str = ""
    start_year: int = 0
    end_year: int = 0
    memo: str = ""

    family: ClassVar[str] = ""

    @property
    def kind(self) -> str:
        raise NotImplementedError

    @property
    def label(self) -> str:
        """Display label used in breakdowns and balance sheets."""
        return self.title or self.id

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Instrument:
        raise NotImplementedError


@dataclass(frozen=True)
class IncomeStream(Instrument):
    """
    Recurring income (salary, business income, side jobs).

    Attributes:
        amount: Periodic amount
        frequency: 'monthly' or 'yearly'
        growth_rate: Annual growth in PERCENT (2.5 means 2.5 %)
    """

    amount: float = 0.0
    frequency: str = "monthly"
    growth_rate: float = 0.0

    family: ClassVar[str] = "f"

    @property
    def kind(self) -> str:
        return K.F_INCOME_RECURRING

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> IncomeStream:
        base = _base_fields(record)
        owner = base["id"] or base["title"]
        return cls(
            **base,
            amount=to_float(pick(record, "amount"), field="amount", owner=owner),
            frequency=str(pick(record, "frequency", default="monthly")),
            growth_rate=to_float(
                pick(record, "growth_rate", "growthRate"), field="growth_rate", owner=owner
            ),
        )


@dataclass(frozen=True)
class ExpenseStream(IncomeStream):
    """
    Recurring expense (living costs, insurance, education).

    Same fields as IncomeStream, plus ``is_fixed_to_retirement_year`` which ends
    the expense at the profile's retirement year regardless of ``end_year``.
    """

    is_fixed_to_retirement_year: bool = False

    @property
    def kind(self) -> str:
        return K.F_EXPENSE_RECURRING

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> ExpenseStream:
        stream = IncomeStream.from_record(record)
        return cls(
            **{f.name: getattr(stream, f.name) for f in fields(stream)},
            is_fixed_to_retirement_year=to_bool(
                pick(record, "is_fixed_to_retirement_year", "isFixedToRetirementYear", default=False)
            ),
        )


@dataclass(frozen=True)
class SavingAccount(Instrument):
    """
    Savings or investment account with periodic contributions.

    Attributes:
        current_amount: Balance already held at start_year
        amount: Periodic contribution
        frequency: 'monthly', 'yearly' or 'one_time'
        interest_rate: Annual return on the held balance, FRACTION (0.03 = 3 %)
        yearly_growth_rate: Annual growth of the contribution amount, FRACTION
    """

    current_amount: float = 0.0
    amount: float = 0.0
    frequency: str = "monthly"
    interest_rate: float = 0.0
    yearly_growth_rate: float = 0.0

    family: ClassVar[str] = "a"

    @property
    def kind(self) -> str:
        return K.A_SAVING

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> SavingAccount:
        base = _base_fields(record)
        owner = base["id"] or base["title"]
        return cls(
            **base,
            current_amount=to_float(
                pick(record, "current_amount", "currentAmount"),
                field="current_amount",
                owner=owner,
            ),
            amount=to_float(pick(record, "amount"), field="amount", owner=owner),
            frequency=str(pick(record, "frequency", default="monthly")),
            interest_rate=to_float(
                pick(record, "interest_rate", "interestRate"),
                field="interest_rate",
                owner=owner,
            ),
            yearly_growth_rate=to_float(
                pick(record, "yearly_growth_rate", "yearlyGrowthRate"),
                field="yearly_growth_rate",
                owner=owner,
            ),
        )


@dataclass(frozen=True)
class Pension(Instrument):
    """
    Pension discriminated by ``type``.

    National pensions only pay out: ``monthly_amount`` indexed by
    ``inflation_rate`` (PERCENT, None = run default) over start_year..end_year.

    Other types (retirement, personal, severance) accrue over the contribution
    window and pay out in equal installments over the payment window:
        - current_amount: Balance held before contributions start
        - contribution_amount / contribution_frequency: Periodic contribution
        - return_rate: Annual return in PERCENT
        - payment_start_year / payment_end_year: Payout window
    """

    type: str = "national"
    monthly_amount: float = 0.0
    inflation_rate: float | None = None
    current_amount: float = 0.0
    contribution_amount: float = 0.0
    contribution_frequency: str = "monthly"
    contribution_start_year: int = 0
    contribution_end_year: int = 0
    return_rate: float = 0.0
    payment_start_year: int = 0
    payment_end_year: int = 0

    family: ClassVar[str] = "p"

    @property
    def kind(self) -> str:
        return PENSION_TYPES.get(self.type, f"p.pension.{self.type}")

    @property
    def is_national(self) -> bool:
        return self.type == "national"

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Pension:
        base = _base_fields(record)
        owner = base["id"] or base["title"]

        def _year(*keys: str) -> int:
            return to_int(pick(record, *keys), field=keys[0], owner=owner)

        inflation = pick(record, "inflation_rate", "inflationRate")
        pension = cls(
            **base,
            type=str(pick(record, "type", default="national")).strip().lower(),
            monthly_amount=to_float(
                pick(record, "monthly_amount", "monthlyAmount"),
                field="monthly_amount",
                owner=owner,
            ),
            inflation_rate=(
                None
                if inflation in (None, "")
                else to_float(inflation, field="inflation_rate", owner=owner)
            ),
            current_amount=to_float(
                pick(record, "current_amount", "currentAmount"),
                field="current_amount",
                owner=owner,
            ),
            contribution_amount=to_float(
                pick(record, "contribution_amount", "contributionAmount"),
                field="contribution_amount",
                owner=owner,
            ),
            contribution_frequency=str(
                pick(record, "contribution_frequency", "contributionFrequency", default="monthly")
            ),
            contribution_start_year=_year("contribution_start_year", "contributionStartYear"),
            contribution_end_year=_year("contribution_end_year", "contributionEndYear"),
            return_rate=to_float(
                pick(record, "return_rate", "returnRate"), field="return_rate", owner=owner
            ),
            payment_start_year=_year("payment_start_year", "paymentStartYear"),
            payment_end_year=_year("payment_end_year", "paymentEndYear"),
        )
        return pension


@dataclass(frozen=True)
class RealEstateHolding(Instrument):
    """
    Real estate held between start_year and end_year.

    Attributes:
        current_value: Value at start_year
        growth_rate: Annual appreciation in PERCENT
        is_purchase: Pay current_value from cash at start_year
        has_rental_income / monthly_rental_income: Rent credited inside
            rental_income_start_year..rental_income_end_year
        convert_to_pension / monthly_pension_amount: Reverse mortgage paid out
            over pension_start_year..pension_end_year (None = end_year), drawn
            down from the holding's value
    """

    current_value: float = 0.0
    growth_rate: float = 0.0
    is_purchase: bool = False
    has_rental_income: bool = False
    monthly_rental_income: float = 0.0
    rental_income_start_year: int = 0
    rental_income_end_year: int = 0
    convert_to_pension: bool = False
    pension_start_year: int = 0
    pension_end_year: int | None = None
    monthly_pension_amount: float = 0.0

    family: ClassVar[str] = "a"

    @property
    def kind(self) -> str:
        return K.A_REAL_ESTATE

    @property
    def reverse_mortgage_end_year(self) -> int:
        return self.end_year if self.pension_end_year is None else self.pension_end_year

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> RealEstateHolding:
        base = _base_fields(record)
        owner = base["id"] or base["title"]

        def _num(*keys: str) -> float:
            return to_float(pick(record, *keys), field=keys[0], owner=owner)

        pension_end = pick(record, "pension_end_year", "pensionEndYear")
        return cls(
            **base,
            current_value=_num("current_value", "currentValue"),
            growth_rate=_num("growth_rate", "growthRate"),
            is_purchase=to_bool(pick(record, "is_purchase", "isPurchase", default=False)),
            has_rental_income=to_bool(
                pick(record, "has_rental_income", "hasRentalIncome", default=False)
            ),
            monthly_rental_income=_num("monthly_rental_income", "monthlyRentalIncome"),
            rental_income_start_year=int(
                _num("rental_income_start_year", "rentalIncomeStartYear")
            ),
            rental_income_end_year=int(_num("rental_income_end_year", "rentalIncomeEndYear")),
            convert_to_pension=to_bool(
                pick(record, "convert_to_pension", "convertToPension", default=False)
            ),
            pension_start_year=int(_num("pension_start_year", "pensionStartYear")),
            pension_end_year=(
                None
                if pension_end in (None, "")
                else to_int(pension_end, field="pension_end_year", owner=owner)
            ),
            monthly_pension_amount=_num("monthly_pension_amount", "monthlyPensionAmount"),
        )


@dataclass(frozen=True)
class Asset(Instrument):
    """
    General or income-producing asset.

    Attributes:
        current_value: Value at start_year
        growth_rate: Annual appreciation, FRACTION
        asset_type: 'general' or 'income'
        income_rate: Annual yield on the current value, FRACTION (income type only)
        is_purchase: Pay current_value from cash at start_year
    """

    current_value: float = 0.0
    growth_rate: float = 0.0
    asset_type: str = "general"
    income_rate: float = 0.0
    is_purchase: bool = False

    family: ClassVar[str] = "a"

    @property
    def kind(self) -> str:
        return ASSET_TYPES.get(self.asset_type, K.A_ASSET_GENERAL)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Asset:
        base = _base_fields(record)
        owner = base["id"] or base["title"]
        return cls(
            **base,
            current_value=to_float(
                pick(record, "current_value", "currentValue"),
                field="current_value",
                owner=owner,
            ),
            growth_rate=to_float(
                pick(record, "growth_rate", "growthRate"), field="growth_rate", owner=owner
            ),
            asset_type=str(pick(record, "asset_type", "assetType", default="general")),
            income_rate=to_float(
                pick(record, "income_rate", "incomeRate"), field="income_rate", owner=owner
            ),
            is_purchase=to_bool(pick(record, "is_purchase", "isPurchase", default=False)),
        )


@dataclass(frozen=True)
class Debt(Instrument):
    """
    Debt repaid over start_year..end_year.

    Attributes:
        debt_amount: Principal
        interest_rate: Annual rate, FRACTION (0.035 = 3.5 %)
        debt_type: 'bullet', 'equal', 'principal' or 'grace'
        grace_period: Interest-only years before repayment ('grace' only)
        add_cash_to_flow: Credit the principal to cash at start_year
    """

    debt_amount: float = 0.0
    interest_rate: float = 0.0
    debt_type: str = "bullet"
    grace_period: int = 0
    add_cash_to_flow: bool = False

    family: ClassVar[str] = "l"

    @property
    def kind(self) -> str:
        return DEBT_TYPES.get(self.debt_type, f"l.debt.{self.debt_type}")

    @property
    def term_years(self) -> int:
        return self.end_year - self.start_year + 1

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Debt:
        base = _base_fields(record)
        owner = base["id"] or base["title"]
        return cls(
            **base,
            debt_amount=to_float(
                pick(record, "debt_amount", "debtAmount", "principal", "principalAmount"),
                field="debt_amount",
                owner=owner,
            ),
            interest_rate=to_float(
                pick(record, "interest_rate", "interestRate", "rate"),
                field="interest_rate",
                owner=owner,
            ),
            debt_type=str(
                pick(record, "debt_type", "debtType", "repaymentType", default="bullet")
            ).strip().lower(),
            grace_period=to_int(
                pick(record, "grace_period", "gracePeriod"), field="grace_period", owner=owner
            ),
            add_cash_to_flow=to_bool(
                pick(record, "add_cash_to_flow", "addCashToFlow", default=False)
            ),
        )


# Global registries mapping kind strings to strategy implementations
FlowRegistry: dict[str, IInstrumentStrategy] = {}
ValuationRegistry: dict[str, IInstrumentStrategy] = {}
PensionRegistry: dict[str, IInstrumentStrategy] = {}
ScheduleRegistry: dict[str, IInstrumentStrategy] = {}

_REGISTRIES = {
    "f": ("flow", FlowRegistry),
    "a": ("valuation", ValuationRegistry),
    "p": ("pension", PensionRegistry),
    "l": ("schedule", ScheduleRegistry),
}


def resolve_strategy(instrument: Instrument) -> IInstrumentStrategy:
    """
    Look up the strategy for an instrument based on its family and kind.

    Instruments are frozen, so the strategy is returned rather than attached.

    Raises:
        ConfigError: If the family or kind is not registered
    """
    if instrument.family not in _REGISTRIES:
        raise ConfigError(f"Unknown instrument family: {instrument.family!r}")
    name, registry = _REGISTRIES[instrument.family]
    if instrument.kind not in registry:
        raise ConfigError(f"Unknown {name} strategy: {instrument.kind}")
    return registry[instrument.kind]


@dataclass(frozen=True)
class Collections:
    """Instrument collections for one household, in projection order."""

    incomes: tuple[IncomeStream, ...] = ()
    expenses: tuple[ExpenseStream, ...] = ()
    savings: tuple[SavingAccount, ...] = ()
    pensions: tuple[Pension, ...] = ()
    real_estates: tuple[RealEstateHolding, ...] = ()
    assets: tuple[Asset, ...] = ()
    debts: tuple[Debt, ...] = ()

    field_types: ClassVar[dict[str, type[Instrument]]] = {
        "incomes": IncomeStream,
        "expenses": ExpenseStream,
        "savings": SavingAccount,
        "pensions": Pension,
        "real_estates": RealEstateHolding,
        "assets": Asset,
        "debts": Debt,
    }

    def all(self) -> list[Instrument]:
        return [
            *self.incomes,
            *self.expenses,
            *self.savings,
            *self.pensions,
            *self.real_estates,
            *self.assets,
            *self.debts,
        ]


__all__ = [
    "FamilyMember",
    "Profile",
    "Instrument",
    "IncomeStream",
    "ExpenseStream",
    "SavingAccount",
    "Pension",
    "RealEstateHolding",
    "Asset",
    "Debt",
    "Collections",
    "FlowRegistry",
    "ValuationRegistry",
    "PensionRegistry",
    "ScheduleRegistry",
    "resolve_strategy",
]

