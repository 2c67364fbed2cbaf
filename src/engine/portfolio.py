"""Portfolio-level metrics: weighted rate and interest run-rate.

Pure functions. No I/O.
"""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from src.engine.ordering import active_loans
from src.models.loan import Loan
from src.models.money import FOUR_PLACES, ZERO, cents
from src.models.results import PortfolioSnapshot

DAYS_PER_YEAR = 365


def monthly_interest(loan: Loan) -> Decimal:
    """One month of interest on the current balance, unrounded."""
    return loan.balance * loan.monthly_rate


def daily_interest(loan: Loan) -> Decimal:
    return loan.balance * loan.annual_rate_percent / 100 / DAYS_PER_YEAR


def total_monthly_interest(loans: Iterable[Loan]) -> Decimal:
    return sum((monthly_interest(loan) for loan in active_loans(loans)), ZERO)


def weighted_average_rate(loans: Iterable[Loan]) -> Decimal:
    """Balance-weighted annual rate, in percent."""
    eligible = active_loans(loans)
    total_balance = sum((loan.balance for loan in eligible), ZERO)
    if total_balance == 0:
        return ZERO
    weighted = sum((loan.balance * loan.annual_rate_percent for loan in eligible), ZERO)
    return (weighted / total_balance).quantize(FOUR_PLACES, ROUND_HALF_UP)


def interest_since(
    loans: Iterable[Loan],
    last_payment_date: date | None,
    as_of: date | None = None,
) -> Decimal | None:
    """Interest accrued (simple daily) since the last recorded payment.

    None when there is no prior payment to measure from.
    """
    if last_payment_date is None:
        return None
    days = max(((as_of or date.today()) - last_payment_date).days, 0)
    per_day = sum((daily_interest(loan) for loan in active_loans(loans)), ZERO)
    return cents(per_day * days)


def portfolio_snapshot(loans: Iterable[Loan]) -> PortfolioSnapshot:
    eligible = active_loans(loans)
    by_type: dict[str, Decimal] = {}
    for loan in eligible:
        by_type[loan.loan_type] = by_type.get(loan.loan_type, ZERO) + loan.balance

    return PortfolioSnapshot(
        active_loans=len(eligible),
        total_balance=sum((loan.balance for loan in eligible), ZERO),
        weighted_average_rate=weighted_average_rate(eligible),
        monthly_interest=cents(total_monthly_interest(eligible)),
        daily_interest=cents(sum((daily_interest(loan) for loan in eligible), ZERO)),
        balance_by_type=by_type,
    )
