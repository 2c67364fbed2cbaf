"""Month-by-month payoff projection for a loan portfolio under the avalanche method.

Pure functions: Decimal in, dataclass out. No I/O.

Balances are carried unrounded between periods; only the fields written into
each SchedulePeriod are quantized to cents.
"""

import logging
from collections.abc import Iterable
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from src.engine.ordering import active_loans, avalanche_order
from src.models.loan import Loan
from src.models.money import FOUR_PLACES, ZERO, cents, to_decimal
from src.models.results import SchedulePeriod

logger = logging.getLogger(__name__)

MAX_PERIODS = 360  # 30 years
PAYOFF_EPSILON = Decimal("0.01")


def add_months(value: date, months: int) -> date:
    """First of the month `months` after value's month."""
    month_index = value.month - 1 + months
    return date(value.year + month_index // 12, month_index % 12 + 1, 1)


def first_period_date(start_date: date | None = None) -> date:
    """First of start_date's month, or first of next month when not given."""
    if start_date is not None:
        return start_date.replace(day=1)
    return add_months(date.today(), 1)


def _total(balances: dict[str, Decimal]) -> Decimal:
    return sum((max(b, ZERO) for b in balances.values()), ZERO)


def _balance_by_type(ordered: list[Loan], balances: dict[str, Decimal]) -> dict[str, Decimal]:
    by_type: dict[str, Decimal] = {}
    for loan in ordered:
        by_type[loan.loan_type] = by_type.get(loan.loan_type, ZERO) + max(balances[loan.id], ZERO)
    return {loan_type: cents(amount) for loan_type, amount in by_type.items()}


def simulate_amortization(
    loans: Iterable[Loan],
    monthly_payment: Decimal,
    start_date: date | None = None,
) -> list[SchedulePeriod]:
    """Project the payoff of all active loans paying a fixed amount each month.

    Each period accrues one month of interest on every open balance, pays that
    interest first, then sends whatever is left to principal in avalanche
    order (rank fixed once for the whole run). The last period's payment is
    capped at what is owed. Stops at payoff or after MAX_PERIODS periods.

    When the payment does not cover the month's interest, the unpaid interest
    is dropped rather than capitalized, so balances never grow; the period
    then reports a negative principal_applied.

    Args:
        loans: Loan snapshot. Inactive and zero or negative balance loans are ignored.
        monthly_payment: Total paid across all loans every month.
        start_date: Any day in the month of period 1. Defaults to next month.

    Returns:
        One SchedulePeriod per month, or [] for no loans / no payment.
    """
    monthly_payment = to_decimal(monthly_payment)
    ordered = avalanche_order(active_loans(loans))
    if not ordered or monthly_payment <= 0:
        return []

    first_date = first_period_date(start_date)
    balances = {loan.id: loan.balance for loan in ordered}
    original_total = _total(balances)

    schedule: list[SchedulePeriod] = []
    cumulative_interest = ZERO
    cumulative_principal = ZERO
    total_balance = original_total

    for period in range(1, MAX_PERIODS + 1):
        if total_balance <= PAYOFF_EPSILON:
            break

        interest = {
            loan.id: balances[loan.id] * loan.monthly_rate
            for loan in ordered
            if balances[loan.id] > 0
        }
        total_interest = sum(interest.values(), ZERO)
        actual_payment = min(monthly_payment, total_balance + total_interest)

        # Interest is debited even past zero; any shortfall is simply lost.
        remaining = actual_payment
        for loan in ordered:
            remaining -= interest.get(loan.id, ZERO)

        for loan in ordered:
            if remaining <= 0:
                break
            if balances[loan.id] > 0:
                pay = min(balances[loan.id], remaining)
                balances[loan.id] -= pay
                remaining -= pay

        principal_payment = actual_payment - total_interest
        cumulative_interest += total_interest
        cumulative_principal += principal_payment
        total_balance = _total(balances)

        schedule.append(SchedulePeriod(
            period=period,
            date=add_months(first_date, period - 1),
            payment_made=cents(actual_payment),
            interest_accrued=cents(total_interest),
            principal_applied=cents(principal_payment),
            total_balance_after=cents(total_balance),
            cumulative_interest=cents(cumulative_interest),
            cumulative_principal=cents(cumulative_principal),
            balance_by_type=_balance_by_type(ordered, balances),
            loans_remaining=sum(1 for b in balances.values() if b > PAYOFF_EPSILON),
            percent_paid_off=(1 - total_balance / original_total).quantize(
                FOUR_PLACES, ROUND_HALF_UP
            ),
        ))

    if total_balance > PAYOFF_EPSILON:
        logger.warning(
            "Payoff not reached within %d periods at %s/month; %s still owed",
            MAX_PERIODS, monthly_payment, cents(total_balance),
        )
    else:
        logger.debug("Paid off %d loans in %d periods", len(ordered), len(schedule))

    return schedule
