"""CLI for running payoff projections against a JSON loan snapshot.

The snapshot file holds {"loans": [{"id": ..., "balance": ..., "annual_rate_percent": ...,
"loan_type": ..., "status": "active", "priority": 1}, ...]}.

Usage:
    python -m src.cli loans.json schedule --payment 2000
    python -m src.cli loans.json summary --payment 2000 --start 2026-11-01
    python -m src.cli loans.json compare --payments 1200 2000 3000
    python -m src.cli loans.json allocate --amount 1500
"""

import argparse
import logging
import sys
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path

from pydantic import ValidationError

from src.api.schemas import LoansRequest
from src.config import settings
from src.engine.allocation import allocate_lump_payment
from src.engine.amortization import simulate_amortization
from src.engine.ordering import order_by_avalanche
from src.engine.portfolio import portfolio_snapshot
from src.engine.scenarios import compare_scenarios, payoff_impact, summarize_scenario
from src.models.loan import Loan


def _dollar(v) -> str:
    return f"${float(v):,.2f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 72}")
    print(f"  {title}")
    print(f"{'=' * 72}")


def load_loans(path: Path) -> list[Loan]:
    return LoansRequest.model_validate_json(path.read_text()).domain_loans()


def print_portfolio(loans: list[Loan]) -> None:
    snap = portfolio_snapshot(loans)
    _header("Portfolio")
    print(f"  Active loans:       {snap.active_loans}")
    print(f"  Total balance:      {_dollar(snap.total_balance)}")
    print(f"  Weighted rate:      {snap.weighted_average_rate:.2f}%")
    print(f"  Monthly interest:   {_dollar(snap.monthly_interest)}")
    print(f"  Avalanche order:    {', '.join(order_by_avalanche(loans))}")


def print_schedule(loans: list[Loan], payment: Decimal, start: date | None, limit: int) -> None:
    schedule = simulate_amortization(loans, payment, start)
    _header(f"Schedule at {_dollar(payment)}/month")
    print(f"  {'#':>4}  {'Date':<10}  {'Payment':>12}  {'Interest':>10}  {'Principal':>12}  {'Balance':>14}  Open")
    for p in (schedule[:limit] if limit else schedule):
        print(
            f"  {p.period:>4}  {p.date.isoformat():<10}  {_dollar(p.payment_made):>12}"
            f"  {_dollar(p.interest_accrued):>10}  {_dollar(p.principal_applied):>12}"
            f"  {_dollar(p.total_balance_after):>14}  {p.loans_remaining:>4}"
        )
    if limit and len(schedule) > limit:
        print(f"  ... {len(schedule) - limit} more periods")


def print_summary(loans: list[Loan], payment: Decimal, start: date | None) -> None:
    s = summarize_scenario(loans, payment, start)
    _header(f"Summary at {_dollar(payment)}/month")
    print(f"  Months:             {s.months}")
    print(f"  Total interest:     {_dollar(s.total_interest)}")
    print(f"  Total paid:         {_dollar(s.total_paid)}")
    print(f"  Payoff date:        {s.payoff_date.isoformat() if s.payoff_date else 'n/a'}")
    if s.months and not s.is_paid_off:
        print(f"  Not paid off within the projection; {_dollar(s.final_balance)} left")


def print_comparison(loans: list[Loan], payments: list[Decimal], start: date | None) -> None:
    outcomes = compare_scenarios(loans, [(_dollar(p), p) for p in payments], start)
    _header("Scenario comparison")
    print(f"  {'Payment':>12}  {'Months':>6}  {'Interest':>14}  {'vs first':>14}  Payoff")
    for o in outcomes:
        payoff = o.summary.payoff_date.isoformat() if o.summary.payoff_date else "n/a"
        print(
            f"  {o.label:>12}  {o.summary.months:>6}  {_dollar(o.summary.total_interest):>14}"
            f"  {_dollar(o.interest_vs_baseline):>14}  {payoff}"
        )


def print_allocation(loans: list[Loan], amount: Decimal) -> None:
    result = allocate_lump_payment(loans, amount)
    _header(f"Allocation of {_dollar(amount)}")
    if result is None:
        print("  Nothing to allocate.")
        return

    print(f"  {'Loan':<10}  {'Rate':>7}  {'Interest':>10}  {'Principal':>12}  {'New balance':>14}")
    for line in result.lines:
        flag = "  PAID OFF" if line.is_paid_off else ""
        print(
            f"  {line.loan_id:<10}  {line.annual_rate_percent:>6.2f}%  {_dollar(line.interest_covered):>10}"
            f"  {_dollar(line.principal_applied):>12}  {_dollar(line.balance_after):>14}{flag}"
        )
    print()
    print(f"  To principal:       {_dollar(result.total_principal)}")
    print(f"  To interest:        {_dollar(result.total_interest_paid)}")
    print(f"  New total balance:  {_dollar(result.new_total_balance)}")
    if not result.interest_fully_covered:
        print(f"  Short of this month's interest ({_dollar(result.total_interest_due)} due)")
    if result.leftover > Decimal("0.01"):
        print(f"  Leftover:           {_dollar(result.leftover)} (all debt covered)")

    impact = payoff_impact(loans, amount, cushion=settings.impact_baseline_cushion)
    print(
        f"  As a monthly payment vs {_dollar(impact.baseline_payment)}: "
        f"{impact.months_saved} months and {_dollar(impact.interest_saved)} interest saved"
    )


def _decimal(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Avalanche loan payoff planner")
    parser.add_argument("loans", type=Path, help="JSON loan snapshot")
    parser.add_argument("--start", type=date.fromisoformat, help="First payment month (YYYY-MM-DD)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_schedule = sub.add_parser("schedule", help="Month-by-month schedule")
    p_schedule.add_argument("--payment", type=_decimal, required=True)
    p_schedule.add_argument("--limit", type=int, default=24, help="Rows to print (0 = all)")

    p_summary = sub.add_parser("summary", help="Months, interest and payoff date")
    p_summary.add_argument("--payment", type=_decimal, required=True)

    p_compare = sub.add_parser("compare", help="Compare several monthly payments")
    p_compare.add_argument("--payments", type=_decimal, nargs="+", required=True)

    p_allocate = sub.add_parser("allocate", help="Split a lump payment across loans")
    p_allocate.add_argument("--amount", type=_decimal, required=True)

    args = parser.parse_args(argv)
    logging.basicConfig(level="DEBUG" if args.verbose else settings.log_level)

    try:
        loans = load_loans(args.loans)
    except OSError as e:
        parser.error(f"cannot read {args.loans}: {e}")
    except ValidationError as e:
        parser.error(f"invalid loan snapshot {args.loans}:\n{e}")

    print_portfolio(loans)
    if args.command == "schedule":
        print_schedule(loans, args.payment, args.start, args.limit)
    elif args.command == "summary":
        print_summary(loans, args.payment, args.start)
    elif args.command == "compare":
        print_comparison(loans, args.payments, args.start)
    elif args.command == "allocate":
        print_allocation(loans, args.amount)
    print()


if __name__ == "__main__":
    main(sys.argv[1:])
