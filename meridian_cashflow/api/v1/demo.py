"""Demo endpoints serving generated sample transactions and their analysis"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, Request

from meridian_cashflow.api.v1.schemas import CashFlowSummaryResponse, DemoTransactionsResponse, TransactionSchema
from meridian_cashflow.api.v1.cashflow import run_analysis
from meridian_cashflow.api.dependencies import get_demo_integration_service, get_request_id
from meridian_cashflow.domain.integration import DataIntegrationService
from meridian_cashflow.domain.sample_data import generate_sample_transactions

router = APIRouter()


@router.get("/demo/transactions", response_model=DemoTransactionsResponse)
def get_demo_transactions(seed: Optional[int] = Query(None, description="Seed for reproducible data")):
    """Six months of generated transactions, newest first"""
    transactions = generate_sample_transactions(seed=seed)
    return DemoTransactionsResponse(
        transactions=[TransactionSchema.model_validate(t) for t in transactions],
    )


@router.get("/demo/cashflow", response_model=CashFlowSummaryResponse)
def get_demo_cashflow(
    request: Request,
    seed: Optional[int] = Query(None, description="Seed for reproducible data"),
    service: DataIntegrationService = Depends(get_demo_integration_service),
):
    """Analysis of the demo data set (not persisted)"""
    transactions = generate_sample_transactions(seed=seed)
    return run_analysis(service, transactions, get_request_id(request))
