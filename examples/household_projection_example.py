"""
Walk-through of a household projection: mortgage, pensions and a reverse mortgage.
"""

from __future__ import annotations

import json

from finplanlab import (
    Debt,
    Household,
    IncomeStream,
    Pension,
    ProjectionConfig,
    RealEstateHolding,
    lifetime_cashflow_totals,
    net_worth_at_age,
)
from finplanlab.core.instruments import Collections, Profile
from finplanlab.strategies.schedule import ScheduleDebtEqualPayment


def pretty(data: dict) -> str:
    """Return JSON formatted output."""
    return json.dumps(data, indent=2, sort_keys=True, default=str)


def build_household() -> Household:
    profile = Profile(birth_year=1980, retirement_age=62, current_cash=30_000, target_assets=800_000)
    home = RealEstateHolding(
        id="home",
        title="Home",
        start_year=2025,
        end_year=2070,
        current_value=450_000,
        growth_rate=2.0,
        is_purchase=True,
        convert_to_pension=True,
        pension_start_year=2050,
        monthly_pension_amount=1_500,
    )
    mortgage = Debt(
        id="mortgage",
        title="Mortgage",
        start_year=2025,
        end_year=2054,
        debt_amount=360_000,
        interest_rate=0.038,
        debt_type="equal",
        add_cash_to_flow=True,
    )
    return Household(
        profile=profile,
        collections=Collections(
            incomes=(
                IncomeStream(
                    id="salary",
                    title="Salary",
                    start_year=2025,
                    end_year=2041,
                    amount=6_500,
                    frequency="monthly",
                    growth_rate=2.5,
                ),
            ),
            pensions=(
                Pension(
                    id="state",
                    title="National pension",
                    type="national",
                    start_year=2045,
                    end_year=2070,
                    monthly_amount=1_400,
                ),
                Pension(
                    id="plan",
                    title="Personal plan",
                    type="personal",
                    contribution_amount=400,
                    contribution_start_year=2025,
                    contribution_end_year=2041,
                    return_rate=4.0,
                    payment_start_year=2042,
                    payment_end_year=2061,
                ),
            ),
            real_estates=(home,),
            debts=(mortgage,),
        ),
    )


def main() -> None:
    household = build_household()
    results = household.run(ProjectionConfig(current_year=2025))

    print("=== Summary ===")
    print(pretty(results.summary()))

    print("\n=== Mortgage schedule (first 3 years) ===")
    for row in ScheduleDebtEqualPayment().schedule(household.collections.debts[0])[:3]:
        print(row)

    print("\n=== Net worth at 65 ===")
    print(f"{net_worth_at_age(results.balance_sheet, 65):,.0f}")

    print("\n=== Largest lifetime outflows ===")
    print(lifetime_cashflow_totals(results.cashflow)["demand"].head())

    print("\n=== Balance sheet every 10 years ===")
    frame = results.balance_sheet_frame()
    print(frame.loc[frame.index % 10 == 5, ["age", "cash", "total_debt", "total_amount"]])

    print("\n=== Events ===")
    for event in results.events:
        print(f"{event.year}  {event.kind:<22} {event.message}")


if __name__ == "__main__":
    main()
