"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes import allocation, amortization, budget, loans, scenarios
from src.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Loan Payoff Planner",
    description="Avalanche payoff projections and lump payment allocation",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(loans.router)
app.include_router(amortization.router)
app.include_router(scenarios.router)
app.include_router(allocation.router)
app.include_router(budget.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
