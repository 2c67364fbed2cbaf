"""Canonical loan snapshots used across engine and API tests.

Two-loan fixture: A $1,000 at 10%, B $1,000 at 5%.
Student portfolio: seven active federal loans (~$78K) plus three paid off.
"""

import pytest
from datetime import date
from decimal import Decimal

from src.models.budget import BudgetConfig, Expense
from src.models.loan import Loan, LoanStatus


START = date(2026, 1, 1)


@pytest.fixture
def start_date() -> date:
    return START


@pytest.fixture
def two_loans() -> list[Loan]:
    """A at 10% and B at 5%, $1,000 each, different types."""
    return [
        Loan(id="A", balance=Decimal("1000"), annual_rate_percent=Decimal("10"), loan_type="Grad PLUS"),
        Loan(id="B", balance=Decimal("1000"), annual_rate_percent=Decimal("5"), loan_type="Subsidized"),
    ]


@pytest.fixture
def single_small_loan() -> list[Loan]:
    """$50 at 6%: interest $0.25 for a month."""
    return [Loan(id="S", balance=Decimal("50"), annual_rate_percent=Decimal("6"), loan_type="Unsubsidized")]


@pytest.fixture
def student_portfolio() -> list[Loan]:
    """Grad + undergrad federal loans, listed in servicer priority order."""
    def loan(loan_id, loan_type, balance, rate, priority, status=LoanStatus.ACTIVE):
        return Loan(
            id=loan_id,
            balance=Decimal(balance),
            annual_rate_percent=Decimal(rate),
            loan_type=loan_type,
            status=status,
            priority=priority,
        )

    return [
        loan("2-04", "Grad PLUS", "12670.00", "7.540", 1),
        loan("2-03", "Grad PLUS", "18450.00", "6.280", 2),
        loan("2-01", "Unsubsidized", "17340.00", "5.280", 3),
        loan("1-06", "Unsubsidized", "5875.00", "5.050", 4),
        loan("2-02", "Unsubsidized", "16890.00", "4.990", 5),
        loan("1-05", "Subsidized", "4210.00", "5.050", 6),
        loan("1-03", "Subsidized", "2890.00", "4.450", 7),
        loan("1-01", "Subsidized", "0", "3.730", 99, LoanStatus.PAID_OFF),
        loan("1-02", "Unsubsidized", "0", "3.730", 99, LoanStatus.PAID_OFF),
        loan("1-04", "Unsubsidized", "0", "4.450", 99, LoanStatus.PAID_OFF),
    ]


@pytest.fixture
def household_budget() -> tuple[BudgetConfig, list[Expense]]:
    """$95K salary at 28% tax, $3,640/mo expenses, $850 minimum, 60% of surplus to debt."""
    budget = BudgetConfig(
        gross_annual_salary=Decimal("95000"),
        tax_rate_percent=Decimal("28"),
        other_monthly_income=Decimal("0"),
        minimum_loan_payment=Decimal("850"),
        extra_debt_percent=Decimal("60"),
    )
    expenses = [
        Expense("Rent", Decimal("1800")),
        Expense("Car Payment", Decimal("450")),
        Expense("Car Insurance", Decimal("165")),
        Expense("Utilities", Decimal("195")),
        Expense("Groceries", Decimal("480"), "variable"),
        Expense("Health Insurance", Decimal("210")),
        Expense("Phone / Internet", Decimal("135")),
        Expense("Subscriptions", Decimal("45"), "variable"),
        Expense("Gas / Transport", Decimal("160"), "variable"),
    ]
    return budget, expenses
