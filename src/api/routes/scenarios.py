"""What-if scenario routes."""

from fastapi import APIRouter, Depends

from src.api.schemas import (
    AmortizationRequest,
    CompareRequest,
    CompareResponse,
    ScenarioOutcomeResponse,
    ScenarioSummaryResponse,
)
from src.api.deps import get_settings
from src.config import Settings
from src.engine.budget import monthly_debt_payment
from src.engine.scenarios import compare_scenarios, default_scenarios, summarize_scenario
from src.models.budget import BudgetConfig

router = APIRouter(prefix="/api/v1/scenarios", tags=["scenarios"])


@router.post("/summary", response_model=ScenarioSummaryResponse)
async def scenario_summary(req: AmortizationRequest):
    summary = summarize_scenario(req.domain_loans(), req.monthly_payment, req.start_date)
    return ScenarioSummaryResponse.model_validate(summary)


@router.post("/compare", response_model=CompareResponse)
async def compare(req: CompareRequest, settings: Settings = Depends(get_settings)):
    """Compare explicit scenarios, or the standard ladder derived from a budget."""
    if req.scenarios is not None:
        scenarios = [(s.label, s.monthly_payment) for s in req.scenarios]
    else:
        budget = (
            req.budget.to_domain(default_minimum=settings.default_minimum_payment)
            if req.budget is not None
            else BudgetConfig(minimum_loan_payment=settings.default_minimum_payment)
        )
        current_plan = monthly_debt_payment(budget, [e.to_domain() for e in req.expenses])
        scenarios = default_scenarios(
            minimum_payment=budget.minimum_loan_payment,
            current_plan=current_plan,
            presets=settings.scenario_presets,
            custom=req.custom_amount,
        )

    outcomes = compare_scenarios(req.domain_loans(), scenarios, req.start_date)
    return CompareResponse(
        scenarios=[ScenarioOutcomeResponse.model_validate(o) for o in outcomes]
    )
