"""Avalanche ordering: highest annual rate first.

Pure functions. No I/O.
"""

from collections.abc import Iterable

from src.models.loan import Loan


def active_loans(loans: Iterable[Loan]) -> list[Loan]:
    """Loans the engine works on: status active and a positive balance."""
    return [loan for loan in loans if loan.is_active]


def _tie_key(loan: Loan) -> tuple[bool, int]:
    # Loans without a caller priority sort after prioritized ones on a tie;
    # sorted() is stable, so input position settles anything left.
    return (loan.priority is None, loan.priority or 0)


def avalanche_order(loans: Iterable[Loan]) -> list[Loan]:
    """Sort loans by annual rate descending, stable on ties.

    Equal rates keep the caller's priority order, then input order, so two
    runs on the same snapshot always allocate in the same sequence.
    """
    return sorted(loans, key=lambda loan: (-loan.annual_rate_percent, *_tie_key(loan)))


def order_by_avalanche(loans: Iterable[Loan]) -> list[str]:
    """Loan ids of the active loans in avalanche order."""
    return [loan.id for loan in avalanche_order(active_loans(loans))]
