from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.models.loan import LoanStatus


@dataclass
class SchedulePeriod:
    period: int
    date: date

    # Cash movement this period
    payment_made: Decimal = Decimal("0")
    interest_accrued: Decimal = Decimal("0")
    principal_applied: Decimal = Decimal("0")  # Negative when payment < interest

    # Position after the period
    total_balance_after: Decimal = Decimal("0")
    cumulative_interest: Decimal = Decimal("0")
    cumulative_principal: Decimal = Decimal("0")
    balance_by_type: dict[str, Decimal] = field(default_factory=dict)
    loans_remaining: int = 0
    percent_paid_off: Decimal = Decimal("0")  # Fraction, 0..1


@dataclass
class ScenarioSummary:
    months: int = 0
    total_interest: Decimal = Decimal("0")
    total_paid: Decimal = Decimal("0")
    payoff_date: date | None = None
    final_balance: Decimal = Decimal("0")  # > 0.01 when truncated at the period cap

    @property
    def is_paid_off(self) -> bool:
        return self.months > 0 and self.final_balance <= Decimal("0.01")


@dataclass
class ScenarioOutcome:
    label: str
    monthly_payment: Decimal
    summary: ScenarioSummary
    interest_vs_baseline: Decimal = Decimal("0")  # Relative to the first scenario compared


@dataclass
class PayoffImpact:
    """Chosen payment vs paying just over the monthly interest."""

    baseline_payment: Decimal
    baseline: ScenarioSummary
    chosen_payment: Decimal
    chosen: ScenarioSummary
    months_saved: int = 0
    interest_saved: Decimal = Decimal("0")


@dataclass
class AllocationLine:
    loan_id: str
    loan_type: str
    annual_rate_percent: Decimal
    balance_before: Decimal
    interest_covered: Decimal = Decimal("0")
    principal_applied: Decimal = Decimal("0")
    total_paid: Decimal = Decimal("0")
    balance_after: Decimal = Decimal("0")
    is_paid_off: bool = False


@dataclass
class AllocationResult:
    lines: list[AllocationLine] = field(default_factory=list)
    total_principal: Decimal = Decimal("0")
    total_interest_paid: Decimal = Decimal("0")
    new_total_balance: Decimal = Decimal("0")
    leftover: Decimal = Decimal("0")  # > 0.01 means the payment exceeded all debt
    paid_off: list[AllocationLine] = field(default_factory=list)
    total_interest_due: Decimal = Decimal("0")
    interest_fully_covered: bool = True  # False when interest was split pro rata


@dataclass(frozen=True)
class PaymentRecord:
    """A realized payment, ready for the persistence layer."""

    payment_date: date
    loan_id: str
    amount: Decimal
    principal: Decimal
    interest: Decimal
    new_balance: Decimal
    new_status: LoanStatus
    notes: str = ""


@dataclass
class PortfolioSnapshot:
    active_loans: int = 0
    total_balance: Decimal = Decimal("0")
    weighted_average_rate: Decimal = Decimal("0")  # Percent
    monthly_interest: Decimal = Decimal("0")
    daily_interest: Decimal = Decimal("0")
    balance_by_type: dict[str, Decimal] = field(default_factory=dict)
