"""
FinPlanLab Kind Constants (behavior-centric, extensible).
"""


class K:
    # === Assets (value-producing or appreciating) ===
    A_SAVING = "a.saving"  # Deposits, installment savings, investment accounts
    A_REAL_ESTATE = "a.real_estate"  # Homes, land, rental property
    A_ASSET_GENERAL = "a.asset.general"  # Vehicles, collectibles, other holdings
    A_ASSET_INCOME = "a.asset.income"  # Holdings that pay a yield

    # === Pensions (accrual and payout) ===
    P_PENSION_NATIONAL = "p.pension.national"  # State pension, payout only
    P_PENSION_RETIREMENT = "p.pension.retirement"  # Occupational, employer-funded
    P_PENSION_PERSONAL = "p.pension.personal"  # Own contributions from cash
    P_PENSION_SEVERANCE = "p.pension.severance"  # Severance pay accrual

    # === Liabilities (obligations & amortization) ===
    L_DEBT_BULLET = "l.debt.bullet"  # Interest only, principal at maturity
    L_DEBT_EQUAL_PAYMENT = "l.debt.equal_payment"  # Annuity
    L_DEBT_EQUAL_PRINCIPAL = "l.debt.equal_principal"  # Linear amortization
    L_DEBT_GRACE = "l.debt.grace"  # Interest-only grace, then linear

    # === External flows (in/out from the world) ===
    F_INCOME_RECURRING = "f.income.recurring"  # Salary, business income
    F_EXPENSE_RECURRING = "f.expense.recurring"  # Living costs, insurance

    @classmethod
    def all_kinds(cls) -> list[str]:
        """Enumerate all known kinds (for validation and docs)."""
        return [
            # assets
            cls.A_SAVING,
            cls.A_REAL_ESTATE,
            cls.A_ASSET_GENERAL,
            cls.A_ASSET_INCOME,
            # pensions
            cls.P_PENSION_NATIONAL,
            cls.P_PENSION_RETIREMENT,
            cls.P_PENSION_PERSONAL,
            cls.P_PENSION_SEVERANCE,
            # liabilities
            cls.L_DEBT_BULLET,
            cls.L_DEBT_EQUAL_PAYMENT,
            cls.L_DEBT_EQUAL_PRINCIPAL,
            cls.L_DEBT_GRACE,
            # flows
            cls.F_INCOME_RECURRING,
            cls.F_EXPENSE_RECURRING,
        ]


# Record discriminators as entered by users -> kinds
PENSION_TYPES = {
    "national": K.P_PENSION_NATIONAL,
    "retirement": K.P_PENSION_RETIREMENT,
    "personal": K.P_PENSION_PERSONAL,
    "severance": K.P_PENSION_SEVERANCE,
}

DEBT_TYPES = {
    "bullet": K.L_DEBT_BULLET,
    "equal": K.L_DEBT_EQUAL_PAYMENT,
    "principal": K.L_DEBT_EQUAL_PRINCIPAL,
    "grace": K.L_DEBT_GRACE,
}

ASSET_TYPES = {
    "general": K.A_ASSET_GENERAL,
    "income": K.A_ASSET_INCOME,
}
