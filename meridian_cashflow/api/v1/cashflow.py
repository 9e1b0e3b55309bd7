"""Cash flow analysis endpoints"""

import time
import logging
from typing import Optional, Sequence
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from meridian_cashflow.api.v1.schemas import AnalyzeRequest, CashFlowSummaryResponse
from meridian_cashflow.api.dependencies import get_integration_service, get_transaction_source_client, get_request_id
from meridian_cashflow.infrastructure.database.session import get_db
from meridian_cashflow.infrastructure.database.repositories import SnapshotRepository
from meridian_cashflow.infrastructure.clients.transactions import TransactionSourceClient
from meridian_cashflow.domain.integration import DataIntegrationService
from meridian_cashflow.domain.models import Transaction
from meridian_cashflow.domain.transactions import normalize_transactions
from meridian_cashflow.domain.exceptions import TransactionSourceError
from meridian_cashflow.infrastructure.observability.metrics import record_analysis, source_fetch_failures_counter
from meridian_cashflow.infrastructure.observability.logging import log_analysis

router = APIRouter()


def run_analysis(
    service: DataIntegrationService,
    transactions: Sequence[Transaction],
    request_id: str,
    user_id: Optional[str] = None,
    db: Optional[Session] = None,
) -> CashFlowSummaryResponse:
    """
    Analyze, optionally persist a snapshot, then record metrics and logs.

    A snapshot is only written when both a user_id and a session are given.
    """
    start_time = time.time()

    summary = service.integrate(transactions)

    snapshot_id = None
    if user_id and db is not None:
        snapshot = SnapshotRepository(db).create_snapshot(
            user_id=user_id,
            transaction_count=len(transactions),
            summary=summary,
        )
        db.commit()
        snapshot_id = snapshot.id

    duration = time.time() - start_time
    overall_risk = summary.volatility_metrics.overall_risk
    record_analysis(overall_risk, len(transactions), duration)
    log_analysis(request_id, user_id, len(transactions), overall_risk, duration * 1000)

    response = CashFlowSummaryResponse.model_validate(summary)
    return response.model_copy(update={"snapshot_id": snapshot_id})


@router.post("/cashflow/analyze", response_model=CashFlowSummaryResponse)
def analyze_cashflow(
    request_body: AnalyzeRequest,
    request: Request,
    db: Session = Depends(get_db),
    service: DataIntegrationService = Depends(get_integration_service),
):
    """
    Derive a cash flow summary from a caller-supplied transaction list.

    The historical series in the response is synthetic display data.
    """
    request_id = get_request_id(request)
    transactions = [Transaction(**t.model_dump()) for t in request_body.transactions]

    try:
        return run_analysis(service, transactions, request_id, request_body.user_id, db)
    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/cashflow/users/{user_id}", response_model=CashFlowSummaryResponse)
async def analyze_user_cashflow(
    user_id: str,
    request: Request,
    db: Session = Depends(get_db),
    service: DataIntegrationService = Depends(get_integration_service),
    source_client: TransactionSourceClient = Depends(get_transaction_source_client),
):
    """
    Fetch a user's stored transactions and analyze them.

    Flow:
    1. Load the raw transaction list from the transaction source
    2. Fill merchant/description defaults
    3. Analyze and persist a snapshot
    """
    request_id = get_request_id(request)

    try:
        transactions = await source_client.get_transactions(user_id)
        return run_analysis(service, normalize_transactions(transactions), request_id, user_id, db)

    except TransactionSourceError as e:
        source_fetch_failures_counter.inc()
        logging.error(f"Transaction source error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Transaction source unavailable")

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
