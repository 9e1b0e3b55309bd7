"""Domain models - pure Python dataclasses representing cash flow entities"""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Literal, Optional, Tuple

TransactionType = Literal["income", "expense"]
Frequency = Literal["weekly", "biweekly", "monthly", "annual"]
IncomeCategory = Literal["salary", "freelance", "investment", "rental", "business", "other"]
RiskTier = Literal["low", "medium", "high"]
AccountType = Literal["checking", "savings", "money_market"]


@dataclass(frozen=True)
class Transaction:
    """Raw transaction record supplied by the caller (never mutated)"""

    id: str
    title: str
    category: str
    amount: float  # always >= 0, direction comes from type
    date: date
    time: str
    type: TransactionType
    merchant: Optional[str] = None
    description: Optional[str] = None


@dataclass
class IncomeStream:
    """Recurring income source inferred from grouped income transactions"""

    id: str
    name: str
    amount: float
    frequency: Frequency
    last_received: date
    reliability: float
    growth: float
    category: IncomeCategory


@dataclass
class ExpenseCategory:
    """Expense transactions sharing a category label"""

    id: str
    name: str
    budgeted: int
    spent: float
    transactions: Tuple[Transaction, ...]
    trend: float
    is_fixed: bool


@dataclass
class EmergencyFundAccount:
    """One slice of the display-only emergency fund breakdown"""

    id: str
    name: str
    amount: float
    type: AccountType


@dataclass
class EmergencyFund:
    """Emergency fund sizing derived from monthly expenses"""

    current_amount: float
    target_amount: float
    monthly_expenses: float
    accounts: List[EmergencyFundAccount] = field(default_factory=list)


@dataclass
class VolatilityMetrics:
    """Heuristic instability measures and overall risk tier"""

    income_volatility: float
    expense_volatility: float
    overall_risk: RiskTier
    confidence_score: float


@dataclass
class HistoricalDataPoint:
    """One synthesized month of the display series"""

    month: str
    income: int
    expenses: int
    net_flow: int


@dataclass
class CashFlowSummary:
    """Output of one integration call"""

    monthly_income: float
    monthly_expenses: float
    net_cash_flow: float
    historical_data: List[HistoricalDataPoint]
    income_streams: List[IncomeStream]
    expense_categories: List[ExpenseCategory]
    emergency_fund: EmergencyFund
    volatility_metrics: VolatilityMetrics
