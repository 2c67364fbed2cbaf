"""Budget routes: how much can go to debt each month."""

from fastapi import APIRouter, Depends

from src.api.schemas import BudgetRequest, BudgetResponse
from src.api.deps import get_settings
from src.config import Settings
from src.engine.budget import budget_breakdown

router = APIRouter(prefix="/api/v1/budget", tags=["budget"])


@router.post("", response_model=BudgetResponse)
async def breakdown(req: BudgetRequest, settings: Settings = Depends(get_settings)):
    budget = req.budget.to_domain(default_minimum=settings.default_minimum_payment)
    result = budget_breakdown(budget, [e.to_domain() for e in req.expenses])
    return BudgetResponse.model_validate(result)
