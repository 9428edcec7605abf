"""
Tests for instrument records and strategy resolution.
"""

import dataclasses

import pytest
from finplanlab.core.errors import ConfigError
from finplanlab.core.instruments import (
    Asset,
    Debt,
    ExpenseStream,
    IncomeStream,
    Pension,
    RealEstateHolding,
    SavingAccount,
    resolve_strategy,
)
from finplanlab.core.kinds import K
from finplanlab.strategies import (
    PensionAccrual,
    ScheduleDebtEqualPayment,
    ValuationIncomeAsset,
)


class TestFromRecord:
    """Test parsing of camelCase and snake_case records."""

    def test_income(self):
        income = IncomeStream.from_record(
            {
                "id": "salary",
                "title": "Salary",
                "amount": "4,000",
                "frequency": "monthly",
                "startYear": 2025,
                "endYear": 2044,
                "growthRate": 2.5,
            }
        )
        assert income.amount == 4000.0
        assert income.growth_rate == 2.5
        assert (income.start_year, income.end_year) == (2025, 2044)
        assert income.kind == K.F_INCOME_RECURRING

    def test_expense_keeps_retirement_flag(self):
        expense = ExpenseStream.from_record(
            {
                "title": "Insurance",
                "amount": 200,
                "start_year": 2025,
                "end_year": 2060,
                "isFixedToRetirementYear": True,
            }
        )
        assert expense.is_fixed_to_retirement_year is True
        assert expense.amount == 200.0
        assert expense.kind == K.F_EXPENSE_RECURRING

    def test_saving(self):
        saving = SavingAccount.from_record(
            {
                "currentAmount": 5000,
                "amount": 100,
                "frequency": "one_time",
                "interestRate": 0.03,
                "yearlyGrowthRate": 0.01,
            }
        )
        assert saving.current_amount == 5000.0
        assert saving.frequency == "one_time"
        assert saving.interest_rate == 0.03
        assert saving.yearly_growth_rate == 0.01

    def test_national_pension_without_inflation(self):
        pension = Pension.from_record({"type": "national", "monthlyAmount": 900})
        assert pension.inflation_rate is None
        assert pension.is_national
        assert pension.kind == K.P_PENSION_NATIONAL

    def test_personal_pension(self):
        pension = Pension.from_record(
            {
                "type": "Personal",
                "contributionAmount": 300,
                "contributionStartYear": 2025,
                "contributionEndYear": 2040,
                "returnRate": 4,
                "paymentStartYear": 2045,
                "paymentEndYear": 2064,
            }
        )
        assert pension.type == "personal"
        assert pension.kind == K.P_PENSION_PERSONAL
        assert pension.payment_end_year == 2064

    def test_real_estate_pension_end_defaults_to_end_year(self):
        home = RealEstateHolding.from_record(
            {"currentValue": 300_000, "startYear": 2025, "endYear": 2070}
        )
        assert home.pension_end_year is None
        assert home.reverse_mortgage_end_year == 2070

    def test_asset(self):
        asset = Asset.from_record(
            {"currentValue": 1000, "assetType": "income", "incomeRate": 0.04}
        )
        assert asset.kind == K.A_ASSET_INCOME
        assert asset.income_rate == 0.04

    def test_debt(self):
        debt = Debt.from_record(
            {
                "debtAmount": "10,000",
                "interestRate": 0.05,
                "debtType": "equal",
                "startYear": 2025,
                "endYear": 2029,
                "addCashToFlow": "true",
            }
        )
        assert debt.debt_amount == 10_000.0
        assert debt.kind == K.L_DEBT_EQUAL_PAYMENT
        assert debt.term_years == 5
        assert debt.add_cash_to_flow is True

    def test_instruments_are_frozen(self):
        debt = Debt(id="d", debt_amount=1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            debt.debt_amount = 2.0

    def test_label_falls_back_to_id(self):
        assert Debt(id="d-1").label == "d-1"
        assert Debt(id="d-1", title="Car loan").label == "Car loan"


class TestResolveStrategy:
    """Test kind-based strategy lookup."""

    def test_known_kinds(self):
        assert isinstance(resolve_strategy(Debt(debt_type="equal")), ScheduleDebtEqualPayment)
        assert isinstance(resolve_strategy(Pension(type="severance")), PensionAccrual)
        assert isinstance(
            resolve_strategy(Asset(asset_type="income")), ValuationIncomeAsset
        )

    def test_unknown_debt_type_raises(self):
        with pytest.raises(ConfigError, match="l.debt.balloon"):
            resolve_strategy(Debt(debt_type="balloon"))

    def test_unknown_pension_type_raises(self):
        with pytest.raises(ConfigError, match="Unknown pension strategy"):
            resolve_strategy(Pension(type="military"))
