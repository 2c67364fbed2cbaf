"""Amortization schedule routes."""

from fastapi import APIRouter

from src.api.schemas import (
    AmortizationRequest,
    AmortizationResponse,
    SchedulePeriodResponse,
    ScenarioSummaryResponse,
)
from src.engine.amortization import simulate_amortization
from src.engine.scenarios import summarize_scenario

router = APIRouter(prefix="/api/v1", tags=["amortization"])


@router.post("/amortization", response_model=AmortizationResponse)
async def amortization(req: AmortizationRequest):
    """Month-by-month avalanche payoff schedule for a fixed monthly payment."""
    loans = req.domain_loans()
    schedule = simulate_amortization(loans, req.monthly_payment, req.start_date)
    summary = summarize_scenario(loans, req.monthly_payment, req.start_date)
    return AmortizationResponse(
        schedule=[SchedulePeriodResponse.model_validate(p) for p in schedule],
        summary=ScenarioSummaryResponse.model_validate(summary),
    )
