from datetime import date
from decimal import Decimal

from src.engine.amortization import MAX_PERIODS, simulate_amortization
from src.engine.scenarios import (
    compare_scenarios,
    default_scenarios,
    payoff_impact,
    summarize_scenario,
)
from src.models.loan import Loan


class TestSummarizeScenario:
    def test_single_loan(self, single_small_loan, start_date):
        summary = summarize_scenario(single_small_loan, Decimal("1000"), start_date)
        assert summary.months == 1
        assert summary.total_interest == Decimal("0.25")
        assert summary.total_paid == Decimal("50.25")
        assert summary.payoff_date == date(2026, 1, 1)
        assert summary.is_paid_off

    def test_matches_last_period(self, student_portfolio, start_date):
        schedule = simulate_amortization(student_portfolio, Decimal("2000"), start_date)
        summary = summarize_scenario(student_portfolio, Decimal("2000"), start_date)
        last = schedule[-1]
        assert summary.months == last.period == len(schedule)
        assert summary.total_interest == last.cumulative_interest
        assert summary.total_paid == last.cumulative_interest + last.cumulative_principal
        assert summary.payoff_date == last.date

    def test_total_paid_is_principal_plus_interest(self, two_loans, start_date):
        summary = summarize_scenario(two_loans, Decimal("100"), start_date)
        assert summary.total_paid - summary.total_interest == Decimal("2000.00")

    def test_empty_is_zero(self, start_date):
        summary = summarize_scenario([], Decimal("500"), start_date)
        assert summary.months == 0
        assert summary.total_interest == Decimal("0")
        assert summary.total_paid == Decimal("0")
        assert summary.payoff_date is None
        assert not summary.is_paid_off

    def test_zero_payment_is_zero(self, two_loans, start_date):
        assert summarize_scenario(two_loans, Decimal("0"), start_date).months == 0

    def test_truncation_visible(self, start_date):
        loans = [Loan(id="big", balance=Decimal("100000"), annual_rate_percent=Decimal("10"))]
        summary = summarize_scenario(loans, Decimal("850"), start_date)
        assert summary.months == MAX_PERIODS
        assert summary.final_balance > Decimal("0.01")
        assert not summary.is_paid_off


class TestCompareScenarios:
    def test_bigger_payment_pays_off_sooner(self, student_portfolio, start_date):
        outcomes = compare_scenarios(
            student_portfolio,
            [("Minimum Only", Decimal("1200")), ("Aggressive", Decimal("2500"))],
            start_date,
        )
        minimum, aggressive = outcomes
        assert aggressive.summary.months < minimum.summary.months
        assert aggressive.summary.total_interest < minimum.summary.total_interest
        assert minimum.interest_vs_baseline == Decimal("0")
        assert aggressive.interest_vs_baseline == (
            aggressive.summary.total_interest - minimum.summary.total_interest
        )
        assert aggressive.interest_vs_baseline < 0

    def test_accepts_generator_input(self, two_loans, start_date):
        outcomes = compare_scenarios(
            (loan for loan in two_loans), [("a", 100), ("b", 200)], start_date
        )
        assert all(o.summary.months > 0 for o in outcomes)
        assert outcomes[0].monthly_payment == Decimal("100")

    def test_no_scenarios(self, two_loans):
        assert compare_scenarios(two_loans, []) == []


class TestDefaultScenarios:
    def test_ladder(self):
        scenarios = default_scenarios(
            Decimal("850"),
            Decimal("2086.40"),
            presets=[Decimal("4000"), Decimal("2500"), Decimal("3000")],
            custom=Decimal("1800"),
        )
        assert scenarios == [
            ("Minimum Only", Decimal("850")),
            ("Current Plan", Decimal("2086")),
            ("Aggressive", Decimal("2500")),
            ("Very Aggressive", Decimal("3000")),
            ("Maximum", Decimal("4000")),
            ("Custom", Decimal("1800")),
        ]

    def test_extra_presets_get_tier_labels(self):
        scenarios = default_scenarios(100, 200, presets=[1, 2, 3, 4])
        assert scenarios[-1] == ("Tier 4", Decimal("4"))


class TestPayoffImpact:
    def test_baseline_is_interest_plus_cushion(self, two_loans, start_date):
        impact = payoff_impact(two_loans, Decimal("500"), start_date=start_date)
        assert impact.baseline_payment == Decimal("62.50")
        assert impact.chosen_payment == Decimal("500")
        assert impact.months_saved == impact.baseline.months - impact.chosen.months
        assert impact.months_saved > 0
        assert impact.interest_saved > 0

    def test_custom_cushion(self, two_loans, start_date):
        impact = payoff_impact(two_loans, Decimal("500"), cushion=Decimal("100"), start_date=start_date)
        assert impact.baseline_payment == Decimal("112.50")
