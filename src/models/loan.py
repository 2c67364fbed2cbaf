from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from src.models.money import to_decimal


class LoanStatus(Enum):
    ACTIVE = "active"
    PAID_OFF = "paid_off"


@dataclass(frozen=True)
class Loan:
    """Read-only snapshot of a loan as supplied by the loan repository."""

    id: str
    balance: Decimal  # Current principal owed
    annual_rate_percent: Decimal  # e.g. Decimal("5.28") for 5.28%/yr
    loan_type: str = ""  # Reporting only, never used for ordering
    status: LoanStatus = LoanStatus.ACTIVE
    priority: int | None = None  # Caller sequence, breaks rate ties

    def __post_init__(self):
        # Overpaid (negative) balances are kept; is_active excludes them
        object.__setattr__(self, "balance", to_decimal(self.balance))
        object.__setattr__(self, "annual_rate_percent", to_decimal(self.annual_rate_percent))
        if self.annual_rate_percent < 0:
            raise ValueError(f"Loan {self.id}: annual rate cannot be negative")

    @property
    def is_active(self) -> bool:
        return self.status is LoanStatus.ACTIVE and self.balance > 0

    @property
    def monthly_rate(self) -> Decimal:
        return self.annual_rate_percent / 100 / 12
