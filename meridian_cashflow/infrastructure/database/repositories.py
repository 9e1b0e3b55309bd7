"""Data access layer for analysis snapshots"""

from typing import List
from sqlalchemy.orm import Session
from meridian_cashflow.infrastructure.database.models import AnalysisSnapshot
from meridian_cashflow.domain.models import CashFlowSummary


class SnapshotRepository:
    """Repository for analysis snapshots"""

    def __init__(self, db: Session):
        self.db = db

    def create_snapshot(
        self,
        user_id: str,
        transaction_count: int,
        summary: CashFlowSummary,
    ) -> AnalysisSnapshot:
        """Persist the headline figures of an analysis"""
        snapshot = AnalysisSnapshot(
            user_id=user_id,
            transaction_count=transaction_count,
            monthly_income=summary.monthly_income,
            monthly_expenses=summary.monthly_expenses,
            net_cash_flow=summary.net_cash_flow,
            income_stream_count=len(summary.income_streams),
            expense_category_count=len(summary.expense_categories),
            overall_risk=summary.volatility_metrics.overall_risk,
            confidence_score=summary.volatility_metrics.confidence_score,
        )
        self.db.add(snapshot)
        self.db.flush()  # Get ID and created_at without committing
        return snapshot

    def get_snapshots_by_user(self, user_id: str, limit: int = 20) -> List[AnalysisSnapshot]:
        """Fetch recent snapshots for a user, newest first"""
        return (
            self.db.query(AnalysisSnapshot)
            .filter(AnalysisSnapshot.user_id == user_id)
            .order_by(AnalysisSnapshot.created_at.desc())
            .limit(limit)
            .all()
        )
