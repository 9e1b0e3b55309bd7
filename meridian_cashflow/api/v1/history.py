"""GET /v1/cashflow/history - Fetch a user's analysis snapshots"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from meridian_cashflow.api.v1.schemas import SnapshotHistoryResponse, SnapshotItem
from meridian_cashflow.infrastructure.database.session import get_db
from meridian_cashflow.infrastructure.database.repositories import SnapshotRepository

router = APIRouter()


@router.get("/cashflow/history", response_model=SnapshotHistoryResponse)
def get_snapshot_history(
    user_id: str = Query(..., min_length=1, description="User identifier"),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
):
    """
    Retrieve recent analyses for a user.

    Returns:
        Headline figures of each analysis, newest first
    """
    snapshots = SnapshotRepository(db).get_snapshots_by_user(user_id, limit=limit)

    items = [
        SnapshotItem(
            snapshot_id=s.id,
            transaction_count=s.transaction_count,
            monthly_income=s.monthly_income,
            monthly_expenses=s.monthly_expenses,
            net_cash_flow=s.net_cash_flow,
            overall_risk=s.overall_risk,
            confidence_score=s.confidence_score,
            created_at=s.created_at.isoformat(),
        )
        for s in snapshots
    ]

    return SnapshotHistoryResponse(user_id=user_id, snapshots=items)
