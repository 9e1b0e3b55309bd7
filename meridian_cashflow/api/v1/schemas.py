"""Pydantic schemas for API request/response validation"""

import datetime as dt
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


class TransactionSchema(BaseModel):
    """Single raw transaction in a request body"""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., min_length=1, description="Unique transaction identifier")
    title: str = ""
    category: str = ""
    amount: float = Field(..., ge=0, allow_inf_nan=False, description="Non-negative amount; direction comes from type")
    date: dt.date
    time: str = ""
    type: Literal["income", "expense"]
    merchant: Optional[str] = None
    description: Optional[str] = None


class AnalyzeRequest(BaseModel):
    """Request body for POST /v1/cashflow/analyze"""

    user_id: Optional[str] = Field(None, min_length=1, description="Optional user identifier for snapshot history")
    transactions: List[TransactionSchema]


class IncomeStreamSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    amount: float
    frequency: Literal["weekly", "biweekly", "monthly", "annual"]
    last_received: dt.date
    reliability: float
    growth: float
    category: Literal["salary", "freelance", "investment", "rental", "business", "other"]


class ExpenseCategorySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    budgeted: int
    spent: float
    transactions: List[TransactionSchema]
    trend: float
    is_fixed: bool


class EmergencyFundAccountSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    amount: float
    type: Literal["checking", "savings", "money_market"]


class EmergencyFundSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    current_amount: float
    target_amount: float
    monthly_expenses: float
    accounts: List[EmergencyFundAccountSchema]


class VolatilityMetricsSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    income_volatility: float
    expense_volatility: float
    overall_risk: Literal["low", "medium", "high"]
    confidence_score: float


class HistoricalDataPointSchema(BaseModel):
    """One synthetic month; display smoothing, not recorded history"""

    model_config = ConfigDict(from_attributes=True)

    month: str
    income: int
    expenses: int
    net_flow: int


class CashFlowSummaryResponse(BaseModel):
    """Response for the cash flow analysis endpoints"""

    model_config = ConfigDict(from_attributes=True)

    monthly_income: float
    monthly_expenses: float
    net_cash_flow: float
    historical_data: List[HistoricalDataPointSchema]
    income_streams: List[IncomeStreamSchema]
    expense_categories: List[ExpenseCategorySchema]
    emergency_fund: EmergencyFundSchema
    volatility_metrics: VolatilityMetricsSchema
    snapshot_id: Optional[str] = None


class DemoTransactionsResponse(BaseModel):
    """Response for GET /v1/demo/transactions"""

    transactions: List[TransactionSchema]


class SnapshotItem(BaseModel):
    """Single analysis in history"""

    snapshot_id: str
    transaction_count: int
    monthly_income: float
    monthly_expenses: float
    net_cash_flow: float
    overall_risk: str
    confidence_score: float
    created_at: str


class SnapshotHistoryResponse(BaseModel):
    """Response for GET /v1/cashflow/history"""

    user_id: str
    snapshots: List[SnapshotItem]
