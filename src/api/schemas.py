"""Pydantic schemas for API request/response models."""

from datetime import date
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from src.models.budget import BudgetConfig, Expense
from src.models.loan import Loan, LoanStatus


# ---- Request schemas ----

class LoanIn(BaseModel):
    id: str = Field(..., description="Stable loan identifier, e.g. servicer loan number")
    balance: Decimal = Field(..., ge=0)
    annual_rate_percent: Decimal = Field(..., ge=0, description="5.28 means 5.28%/yr")
    loan_type: str = ""
    status: Literal["active", "paid_off"] = "active"
    priority: int | None = Field(None, description="Tie-break order for equal rates")

    def to_domain(self) -> Loan:
        return Loan(
            id=self.id,
            balance=self.balance,
            annual_rate_percent=self.annual_rate_percent,
            loan_type=self.loan_type,
            status=LoanStatus(self.status),
            priority=self.priority,
        )


class LoansRequest(BaseModel):
    loans: list[LoanIn]

    def domain_loans(self) -> list[Loan]:
        return [loan.to_domain() for loan in self.loans]


class PortfolioRequest(LoansRequest):
    last_payment_date: date | None = None
    as_of: date | None = None


class AmortizationRequest(LoansRequest):
    monthly_payment: Decimal
    start_date: date | None = Field(None, description="Any day in the first payment month")


class ExpenseIn(BaseModel):
    name: str
    amount: Decimal = Field(..., ge=0)
    category: str = "fixed"

    def to_domain(self) -> Expense:
        return Expense(name=self.name, amount=self.amount, category=self.category)


class BudgetIn(BaseModel):
    gross_annual_salary: Decimal = Decimal("0")
    tax_rate_percent: Decimal = Field(Decimal("25"), ge=0, le=100)
    other_monthly_income: Decimal = Decimal("0")
    minimum_loan_payment: Decimal | None = None
    extra_debt_percent: Decimal = Field(Decimal("0"), ge=0, le=100)

    def to_domain(self, default_minimum: Decimal = Decimal("0")) -> BudgetConfig:
        return BudgetConfig(
            gross_annual_salary=self.gross_annual_salary,
            tax_rate_percent=self.tax_rate_percent,
            other_monthly_income=self.other_monthly_income,
            minimum_loan_payment=(
                self.minimum_loan_payment
                if self.minimum_loan_payment is not None
                else default_minimum
            ),
            extra_debt_percent=self.extra_debt_percent,
        )


class BudgetRequest(BaseModel):
    budget: BudgetIn
    expenses: list[ExpenseIn] = []


class ScenarioIn(BaseModel):
    label: str
    monthly_payment: Decimal


class CompareRequest(LoansRequest):
    """Either explicit scenarios, or a budget to derive the standard ladder from."""
    scenarios: list[ScenarioIn] | None = None
    budget: BudgetIn | None = None
    expenses: list[ExpenseIn] = []
    custom_amount: Decimal | None = None
    start_date: date | None = None


class AllocationRequest(LoansRequest):
    amount: Decimal
    payment_date: date | None = Field(None, description="Date stamped on payment records")
    include_impact: bool = True


# ---- Response schemas ----

class _FromEngine(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class SchedulePeriodResponse(_FromEngine):
    period: int
    date: date
    payment_made: Decimal
    interest_accrued: Decimal
    principal_applied: Decimal
    total_balance_after: Decimal
    cumulative_interest: Decimal
    cumulative_principal: Decimal
    balance_by_type: dict[str, Decimal]
    loans_remaining: int
    percent_paid_off: Decimal


class ScenarioSummaryResponse(_FromEngine):
    months: int
    total_interest: Decimal
    total_paid: Decimal
    payoff_date: date | None = None
    final_balance: Decimal
    is_paid_off: bool


class AmortizationResponse(BaseModel):
    schedule: list[SchedulePeriodResponse]
    summary: ScenarioSummaryResponse


class ScenarioOutcomeResponse(_FromEngine):
    label: str
    monthly_payment: Decimal
    summary: ScenarioSummaryResponse
    interest_vs_baseline: Decimal


class CompareResponse(BaseModel):
    scenarios: list[ScenarioOutcomeResponse]


class AllocationLineResponse(_FromEngine):
    loan_id: str
    loan_type: str
    annual_rate_percent: Decimal
    balance_before: Decimal
    interest_covered: Decimal
    principal_applied: Decimal
    total_paid: Decimal
    balance_after: Decimal
    is_paid_off: bool


class AllocationResultResponse(_FromEngine):
    lines: list[AllocationLineResponse]
    total_principal: Decimal
    total_interest_paid: Decimal
    total_interest_due: Decimal
    interest_fully_covered: bool
    new_total_balance: Decimal
    leftover: Decimal
    paid_off: list[AllocationLineResponse]


class PayoffImpactResponse(_FromEngine):
    baseline_payment: Decimal
    baseline: ScenarioSummaryResponse
    chosen_payment: Decimal
    chosen: ScenarioSummaryResponse
    months_saved: int
    interest_saved: Decimal


class PaymentRecordResponse(BaseModel):
    payment_date: date
    loan_id: str
    amount: Decimal
    principal: Decimal
    interest: Decimal
    new_balance: Decimal
    new_status: str
    notes: str


class AllocationResponse(BaseModel):
    allocation: AllocationResultResponse | None = None
    impact: PayoffImpactResponse | None = None
    payment_records: list[PaymentRecordResponse] = []


class PaymentPresetsResponse(BaseModel):
    presets: list[Decimal]
    interest_only: Decimal  # Smallest round amount that clears this month's interest


class OrderResponse(BaseModel):
    loan_ids: list[str]


class PortfolioResponse(_FromEngine):
    active_loans: int
    total_balance: Decimal
    weighted_average_rate: Decimal
    monthly_interest: Decimal
    daily_interest: Decimal
    balance_by_type: dict[str, Decimal]
    interest_since_last_payment: Decimal | None = None


class BudgetResponse(_FromEngine):
    monthly_net_income: Decimal
    total_monthly_income: Decimal
    total_expenses: Decimal
    remaining_after_expenses: Decimal
    minimum_payment: Decimal
    extra_payment: Decimal
    total_debt_payment: Decimal
    remaining_after_all: Decimal
