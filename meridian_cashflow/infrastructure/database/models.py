"""SQLAlchemy ORM models for persisted analysis snapshots"""

import uuid
from sqlalchemy import Column, String, Float, DateTime, Integer, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class AnalysisSnapshot(Base):
    """Headline figures of one completed cash flow analysis"""

    __tablename__ = "cashflow_analysis_snapshot"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(Text, nullable=False, index=True)
    transaction_count = Column(Integer, nullable=False)
    monthly_income = Column(Float, nullable=False)
    monthly_expenses = Column(Float, nullable=False)
    net_cash_flow = Column(Float, nullable=False)
    income_stream_count = Column(Integer, nullable=False)
    expense_category_count = Column(Integer, nullable=False)
    overall_risk = Column(Text, nullable=False)
    confidence_score = Column(Float, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
