"""
Synthetic historical series for charting.

The series is display smoothing only: every month is an independent random
perturbation of the current monthly averages. It is not a record of past
transactions and carries no predictive value.
"""

import random
from datetime import date
from typing import List, Optional
from meridian_cashflow.domain.models import HistoricalDataPoint
from meridian_cashflow.domain.patterns import round_half_up
from meridian_cashflow.utils.date_utils import trailing_month_starts, month_label

INCOME_VARIANCE = 0.10
EXPENSE_VARIANCE = 0.15


def generate_historical_data(
    monthly_income: float,
    monthly_expenses: float,
    months: int = 12,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> List[HistoricalDataPoint]:
    """
    Synthesize `months` trailing months ending at the current month, oldest first.

    Args:
        monthly_income: Base income each month varies around (+/-10%)
        monthly_expenses: Base expenses each month varies around (+/-15%)
        months: Series length
        rng: Random source; pass random.Random(seed) for reproducible output
        today: Anchor date (default: date.today())
    """
    rng = rng or random.Random()
    today = today or date.today()

    series = []
    for month_start in trailing_month_starts(today, months):
        income = round_half_up(monthly_income * (1 + rng.uniform(-INCOME_VARIANCE, INCOME_VARIANCE)))
        expenses = round_half_up(monthly_expenses * (1 + rng.uniform(-EXPENSE_VARIANCE, EXPENSE_VARIANCE)))
        series.append(
            HistoricalDataPoint(
                month=month_label(month_start),
                income=income,
                expenses=expenses,
                net_flow=income - expenses,
            )
        )
    return series
