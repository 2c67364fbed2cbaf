"""Loan portfolio routes: avalanche order and headline metrics."""

from dataclasses import asdict

from fastapi import APIRouter

from src.api.schemas import LoansRequest, OrderResponse, PortfolioRequest, PortfolioResponse
from src.engine.ordering import order_by_avalanche
from src.engine.portfolio import interest_since, portfolio_snapshot

router = APIRouter(prefix="/api/v1/loans", tags=["loans"])


@router.post("/order", response_model=OrderResponse)
async def avalanche_order(req: LoansRequest):
    """Active loan ids, highest rate first."""
    return OrderResponse(loan_ids=order_by_avalanche(req.domain_loans()))


@router.post("/portfolio", response_model=PortfolioResponse)
async def portfolio(req: PortfolioRequest):
    loans = req.domain_loans()
    snapshot = portfolio_snapshot(loans)
    return PortfolioResponse(
        **asdict(snapshot),
        interest_since_last_payment=interest_since(loans, req.last_payment_date, req.as_of),
    )
