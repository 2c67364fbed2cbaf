"""Scenario summaries: what a monthly payment amount buys you.

Pure functions. No I/O.
"""

from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from src.engine.amortization import simulate_amortization
from src.engine.ordering import active_loans
from src.engine.portfolio import total_monthly_interest
from src.models.loan import Loan
from src.models.money import cents, to_decimal
from src.models.results import PayoffImpact, ScenarioOutcome, ScenarioSummary

DEFAULT_BASELINE_CUSHION = Decimal("50")


def summarize_scenario(
    loans: Iterable[Loan],
    monthly_payment: Decimal,
    start_date: date | None = None,
) -> ScenarioSummary:
    """Months to payoff, total interest, total paid and payoff date.

    Read off the final period of the simulated schedule. Zero summary when
    there is nothing to simulate.
    """
    schedule = simulate_amortization(loans, monthly_payment, start_date)
    if not schedule:
        return ScenarioSummary()

    last = schedule[-1]
    return ScenarioSummary(
        months=last.period,
        total_interest=last.cumulative_interest,
        total_paid=last.cumulative_interest + last.cumulative_principal,
        payoff_date=last.date,
        final_balance=last.total_balance_after,
    )


def compare_scenarios(
    loans: Iterable[Loan],
    scenarios: Sequence[tuple[str, Decimal]],
    start_date: date | None = None,
) -> list[ScenarioOutcome]:
    """Summarize each (label, monthly_payment) pair against the same snapshot.

    interest_vs_baseline is each outcome's total interest minus the first
    scenario's, so a faster plan shows a negative number.
    """
    snapshot = list(loans)
    outcomes = [
        ScenarioOutcome(
            label=label,
            monthly_payment=to_decimal(payment),
            summary=summarize_scenario(snapshot, payment, start_date),
        )
        for label, payment in scenarios
    ]
    if outcomes:
        baseline = outcomes[0].summary.total_interest
        for outcome in outcomes:
            outcome.interest_vs_baseline = outcome.summary.total_interest - baseline
    return outcomes


def default_scenarios(
    minimum_payment: Decimal,
    current_plan: Decimal,
    presets: Iterable[Decimal] = (),
    custom: Decimal | None = None,
) -> list[tuple[str, Decimal]]:
    """Standard what-if ladder: minimum, current plan, preset tiers, custom.

    Presets are labelled in ascending order of amount.
    """
    labels = ["Aggressive", "Very Aggressive", "Maximum"]
    scenarios = [
        ("Minimum Only", to_decimal(minimum_payment)),
        ("Current Plan", to_decimal(current_plan).quantize(Decimal("1"), ROUND_HALF_UP)),
    ]
    for i, amount in enumerate(sorted(to_decimal(p) for p in presets)):
        label = labels[i] if i < len(labels) else f"Tier {i + 1}"
        scenarios.append((label, amount))
    if custom is not None:
        scenarios.append(("Custom", to_decimal(custom)))
    return scenarios


def payoff_impact(
    loans: Iterable[Loan],
    monthly_payment: Decimal,
    cushion: Decimal = DEFAULT_BASELINE_CUSHION,
    start_date: date | None = None,
) -> PayoffImpact:
    """Compare paying monthly_payment with paying interest plus a small cushion.

    The baseline is the portfolio's current monthly interest plus `cushion`,
    roughly the least that still makes progress every month.
    """
    snapshot = active_loans(loans)
    chosen_payment = to_decimal(monthly_payment)
    baseline_payment = cents(total_monthly_interest(snapshot) + to_decimal(cushion))

    baseline = summarize_scenario(snapshot, baseline_payment, start_date)
    chosen = summarize_scenario(snapshot, chosen_payment, start_date)
    return PayoffImpact(
        baseline_payment=baseline_payment,
        baseline=baseline,
        chosen_payment=chosen_payment,
        chosen=chosen,
        months_saved=baseline.months - chosen.months,
        interest_saved=baseline.total_interest - chosen.total_interest,
    )
