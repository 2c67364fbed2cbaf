"""Split one lump payment across a loan portfolio for a single period.

Pure functions: Decimal in, dataclass out. No I/O.

Interest is covered first on every loan (pro rata if the payment is short),
then principal is paid down in avalanche order.
"""

import logging
from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.engine.amortization import PAYOFF_EPSILON
from src.engine.ordering import active_loans, avalanche_order
from src.models.loan import Loan, LoanStatus
from src.models.money import ZERO, cents, to_decimal
from src.models.results import AllocationLine, AllocationResult, PaymentRecord

logger = logging.getLogger(__name__)

NOISE_THRESHOLD = Decimal("0.005")  # Lines paying less than this are not reported
DEFAULT_PAYMENT_NOTE = "Payment allocation"


def allocate_lump_payment(loans: Iterable[Loan], amount: Decimal) -> AllocationResult | None:
    """Allocate `amount` across loans: interest first, then principal by rate.

    Returns None when there is nothing to do (amount <= 0 or no active
    loans). A positive leftover means the payment exceeded the full debt.
    """
    amount = to_decimal(amount)
    ordered = avalanche_order(active_loans(loans))
    if amount <= 0 or not ordered:
        return None

    interest_due = {loan.id: loan.balance * loan.monthly_rate for loan in ordered}
    total_interest = sum(interest_due.values(), ZERO)

    if amount >= total_interest:
        interest_covered = dict(interest_due)
        remaining = amount - total_interest
        fully_covered = True
    else:
        # Short of the month's interest: every loan gets the same fraction of
        # what it owes and nothing reaches principal.
        ratio = amount / total_interest if total_interest > 0 else ZERO
        interest_covered = {loan_id: due * ratio for loan_id, due in interest_due.items()}
        remaining = ZERO
        fully_covered = False
        logger.debug("Payment %s covers %s of interest due %s", amount, ratio, total_interest)

    balances = {loan.id: loan.balance for loan in ordered}
    principal = {loan.id: ZERO for loan in ordered}
    for loan in ordered:
        if remaining <= 0:
            break
        pay = min(remaining, balances[loan.id])
        principal[loan.id] = pay
        balances[loan.id] -= pay
        remaining -= pay

    all_lines = [
        AllocationLine(
            loan_id=loan.id,
            loan_type=loan.loan_type,
            annual_rate_percent=loan.annual_rate_percent,
            balance_before=cents(loan.balance),
            interest_covered=cents(interest_covered[loan.id]),
            principal_applied=cents(principal[loan.id]),
            total_paid=cents(interest_covered[loan.id] + principal[loan.id]),
            balance_after=cents(balances[loan.id]),
            is_paid_off=principal[loan.id] > 0 and balances[loan.id] < PAYOFF_EPSILON,
        )
        for loan in ordered
    ]

    return AllocationResult(
        lines=[line for line in all_lines if line.total_paid > NOISE_THRESHOLD],
        total_principal=sum((line.principal_applied for line in all_lines), ZERO),
        total_interest_paid=sum((line.interest_covered for line in all_lines), ZERO),
        new_total_balance=sum((line.balance_after for line in all_lines), ZERO),
        leftover=cents(remaining),
        paid_off=[line for line in all_lines if line.is_paid_off],
        total_interest_due=cents(total_interest),
        interest_fully_covered=fully_covered,
    )


def payment_records(
    result: AllocationResult,
    payment_date: date,
    notes: str = DEFAULT_PAYMENT_NOTE,
) -> list[PaymentRecord]:
    """One PaymentRecord per reported allocation line, for the caller to persist."""
    return [
        PaymentRecord(
            payment_date=payment_date,
            loan_id=line.loan_id,
            amount=line.total_paid,
            principal=line.principal_applied,
            interest=line.interest_covered,
            new_balance=line.balance_after,
            new_status=LoanStatus.PAID_OFF if line.is_paid_off else LoanStatus.ACTIVE,
            notes=notes,
        )
        for line in result.lines
    ]
