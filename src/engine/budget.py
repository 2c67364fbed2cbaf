"""Monthly payment capacity from income, taxes and expenses.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from collections.abc import Iterable
from decimal import Decimal

from src.models.budget import BudgetBreakdown, BudgetConfig, Expense
from src.models.money import ZERO, cents


def _salary_net_monthly(budget: BudgetConfig) -> Decimal:
    annual_net = budget.gross_annual_salary * (1 - budget.tax_rate_percent / 100)
    return cents(annual_net / 12)


def monthly_net_income(budget: BudgetConfig) -> Decimal:
    """After-tax salary per month plus other monthly income."""
    return _salary_net_monthly(budget) + budget.other_monthly_income


def total_expenses(expenses: Iterable[Expense]) -> Decimal:
    return sum((e.amount for e in expenses), ZERO)


def monthly_debt_payment(budget: BudgetConfig, expenses: Iterable[Expense]) -> Decimal:
    """Minimum payment plus the configured share of what is left after expenses.

    A budget already in the red reduces the payment below the minimum.
    """
    return budget_breakdown(budget, expenses).total_debt_payment


def budget_breakdown(budget: BudgetConfig, expenses: Iterable[Expense]) -> BudgetBreakdown:
    income = monthly_net_income(budget)
    spent = total_expenses(expenses)
    remaining = income - spent
    extra = cents(remaining * budget.extra_debt_percent / 100)
    debt_payment = budget.minimum_loan_payment + extra

    return BudgetBreakdown(
        monthly_net_income=_salary_net_monthly(budget),
        total_monthly_income=income,
        total_expenses=spent,
        remaining_after_expenses=remaining,
        minimum_payment=budget.minimum_loan_payment,
        extra_payment=extra,
        total_debt_payment=debt_payment,
        remaining_after_all=remaining - debt_payment,
    )
