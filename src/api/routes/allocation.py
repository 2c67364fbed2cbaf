"""Lump payment allocation routes."""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from fastapi import APIRouter, Depends

from src.api.schemas import (
    AllocationRequest,
    AllocationResponse,
    AllocationResultResponse,
    LoansRequest,
    PaymentPresetsResponse,
    PaymentRecordResponse,
    PayoffImpactResponse,
)
from src.api.deps import get_settings
from src.config import Settings
from src.engine.allocation import allocate_lump_payment, payment_records
from src.engine.portfolio import total_monthly_interest
from src.engine.scenarios import payoff_impact

router = APIRouter(prefix="/api/v1/allocation", tags=["allocation"])


@router.post("", response_model=AllocationResponse)
async def allocate(req: AllocationRequest, settings: Settings = Depends(get_settings)):
    """Split one payment across loans. `allocation` is null when there is nothing to pay."""
    loans = req.domain_loans()
    result = allocate_lump_payment(loans, req.amount)
    if result is None:
        return AllocationResponse()

    impact = None
    if req.include_impact:
        impact = PayoffImpactResponse.model_validate(
            payoff_impact(loans, req.amount, cushion=settings.impact_baseline_cushion)
        )

    records = payment_records(result, req.payment_date or date.today())
    return AllocationResponse(
        allocation=AllocationResultResponse.model_validate(result),
        impact=impact,
        payment_records=[
            PaymentRecordResponse(
                payment_date=r.payment_date,
                loan_id=r.loan_id,
                amount=r.amount,
                principal=r.principal,
                interest=r.interest,
                new_balance=r.new_balance,
                new_status=r.new_status.value,
                notes=r.notes,
            )
            for r in records
        ],
    )


@router.post("/presets", response_model=PaymentPresetsResponse)
async def presets(req: LoansRequest, settings: Settings = Depends(get_settings)):
    interest = total_monthly_interest(req.domain_loans())
    return PaymentPresetsResponse(
        presets=settings.lump_payment_presets,
        interest_only=(interest + 1).quantize(Decimal("1"), ROUND_HALF_UP),
    )
