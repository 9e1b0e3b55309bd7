"""Risk/volatility estimation over derived income streams and expense categories"""

from typing import Sequence
from meridian_cashflow.domain.models import IncomeStream, ExpenseCategory, VolatilityMetrics, RiskTier

EXPENSE_VOLATILITY_CAP = 0.8
MIN_CONFIDENCE = 0.1


def classify_risk(combined_volatility: float) -> RiskTier:
    """
    Map combined volatility to a risk tier.

    Thresholds are exclusive on the upper tier:
    - > 0.6: high
    - > 0.3: medium
    - otherwise: low
    """
    if combined_volatility > 0.6:
        return "high"
    elif combined_volatility > 0.3:
        return "medium"
    return "low"


def calculate_volatility_metrics(
    income_streams: Sequence[IncomeStream],
    expense_categories: Sequence[ExpenseCategory],
) -> VolatilityMetrics:
    """
    Combine stream reliability and category trends into risk metrics.

    An empty stream or category list contributes 0 to the combined score
    instead of dividing by zero.
    """
    if income_streams:
        avg_reliability = sum(s.reliability for s in income_streams) / len(income_streams)
        income_volatility = 1 - avg_reliability
    else:
        income_volatility = 0.0

    if expense_categories:
        avg_trend = sum(abs(c.trend) for c in expense_categories) / len(expense_categories)
        expense_volatility = min(EXPENSE_VOLATILITY_CAP, avg_trend)
    else:
        expense_volatility = 0.0

    combined = (income_volatility + expense_volatility) / 2

    return VolatilityMetrics(
        income_volatility=income_volatility,
        expense_volatility=expense_volatility,
        overall_risk=classify_risk(combined),
        confidence_score=max(MIN_CONFIDENCE, 1 - combined),
    )
