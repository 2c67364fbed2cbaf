from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Expense:
    name: str
    amount: Decimal  # Monthly
    category: str = "fixed"  # "fixed" or "variable"


@dataclass(frozen=True)
class BudgetConfig:
    gross_annual_salary: Decimal = Decimal("0")
    tax_rate_percent: Decimal = Decimal("25")
    other_monthly_income: Decimal = Decimal("0")
    minimum_loan_payment: Decimal = Decimal("0")
    extra_debt_percent: Decimal = Decimal("0")  # Share of leftover income sent to debt


@dataclass
class BudgetBreakdown:
    monthly_net_income: Decimal = Decimal("0")
    total_monthly_income: Decimal = Decimal("0")
    total_expenses: Decimal = Decimal("0")
    remaining_after_expenses: Decimal = Decimal("0")
    minimum_payment: Decimal = Decimal("0")
    extra_payment: Decimal = Decimal("0")
    total_debt_payment: Decimal = Decimal("0")
    remaining_after_all: Decimal = Decimal("0")
