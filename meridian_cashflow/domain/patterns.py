"""Pattern aggregation - groups transactions and derives per-group statistics"""

import math
from typing import Callable, Dict, List, Sequence, Tuple
from meridian_cashflow.domain.models import Transaction, IncomeStream, ExpenseCategory, Frequency
from meridian_cashflow.domain.classification import categorize_income_source, is_fixed_expense_category
from meridian_cashflow.utils.date_utils import mean_interval_days

GROWTH_CAP = 0.5
TREND_CAP = 0.8
BUDGET_HEADROOM = 1.2

UNKNOWN_SOURCE = "Unknown"
DEFAULT_CATEGORY = "Other"


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)"""
    return math.floor(value + 0.5)


def clamp(value: float, bound: float) -> float:
    """Clamp value into [-bound, bound]"""
    return max(-bound, min(bound, value))


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def group_transactions(
    transactions: Sequence[Transaction],
    key: Callable[[Transaction], str],
) -> Dict[str, List[Transaction]]:
    """Group records by key, preserving first-seen group order"""
    groups: Dict[str, List[Transaction]] = {}
    for txn in transactions:
        groups.setdefault(key(txn), []).append(txn)
    return groups


def income_source_key(txn: Transaction) -> str:
    """Grouping key for income: merchant, else title, else 'Unknown'"""
    return txn.merchant or txn.title or UNKNOWN_SOURCE


def expense_category_key(txn: Transaction) -> str:
    """Grouping key for expenses: category label, else 'Other'"""
    return txn.category or DEFAULT_CATEGORY


def classify_interval(avg_interval_days: float) -> Frequency:
    """
    Map a mean interval between payments to a frequency.

    Boundaries are inclusive on the lower class:
    - <= 10 days: weekly
    - <= 20 days: biweekly
    - <= 40 days: monthly
    - otherwise: annual
    """
    if avg_interval_days <= 10:
        return "weekly"
    elif avg_interval_days <= 20:
        return "biweekly"
    elif avg_interval_days <= 40:
        return "monthly"
    else:
        return "annual"


def infer_frequency(transactions: Sequence[Transaction]) -> Frequency:
    """Infer payment frequency from the spacing of a group's dates (monthly with < 2 dates)"""
    dates = sorted(t.date for t in transactions)
    if len(dates) < 2:
        return "monthly"
    return classify_interval(mean_interval_days(dates))


def calculate_reliability(count: int) -> float:
    """More observed occurrences mean more confidence: 0.4 + 0.1 per payment, capped at 0.95"""
    return min(0.95, 0.4 + 0.1 * count)


def split_chronologically(transactions: Sequence[Transaction]) -> Tuple[List[Transaction], List[Transaction]]:
    """
    Split a group into (older, newer) halves by date.

    older = first floor(n/2), newer = last ceil(n/2); for odd counts the
    newer half gets the extra element.
    """
    ordered = sorted(transactions, key=lambda t: t.date)
    n = len(ordered)
    return ordered[: n // 2], ordered[n - math.ceil(n / 2):]


def calculate_growth(transactions: Sequence[Transaction]) -> float:
    """Relative change of the mean amount, newer half vs older half, clamped to +/-50%"""
    if len(transactions) <= 2:
        return 0.0
    older, newer = split_chronologically(transactions)
    older_avg = _mean([t.amount for t in older])
    if older_avg <= 0:
        return 0.0
    recent_avg = _mean([t.amount for t in newer])
    return clamp((recent_avg - older_avg) / older_avg, GROWTH_CAP)


def calculate_trend(transactions: Sequence[Transaction]) -> float:
    """Relative change of total spend, newer half vs older half, clamped to +/-80%"""
    if len(transactions) <= 2:
        return 0.0
    older, newer = split_chronologically(transactions)
    older_sum = sum(t.amount for t in older)
    if older_sum <= 0:
        return 0.0
    recent_sum = sum(t.amount for t in newer)
    return clamp((recent_sum - older_sum) / older_sum, TREND_CAP)


def analyze_income_patterns(transactions: Sequence[Transaction]) -> List[IncomeStream]:
    """
    Derive income streams from the income transactions.

    Requirements:
    - Group by merchant, else title, else "Unknown"
    - Representative amount is the unweighted mean of the group
    - Frequency from mean interval, reliability from count, growth from halves
    - Sorted by amount, largest first
    """
    income = [t for t in transactions if t.type == "income"]
    groups = group_transactions(income, income_source_key)

    streams = []
    for index, (source_name, group) in enumerate(groups.items()):
        streams.append(
            IncomeStream(
                id=f"income-stream-{index}",
                name=source_name,
                amount=_mean([t.amount for t in group]),
                frequency=infer_frequency(group),
                last_received=max(t.date for t in group),
                reliability=calculate_reliability(len(group)),
                growth=calculate_growth(group),
                category=categorize_income_source(source_name),
            )
        )

    return sorted(streams, key=lambda s: s.amount, reverse=True)


def analyze_expense_patterns(transactions: Sequence[Transaction]) -> List[ExpenseCategory]:
    """
    Derive expense categories from the expense transactions.

    Requirements:
    - Group by category label, default "Other"
    - Budget estimate is 20% above what was spent
    - Trend compares total spend of the newer half against the older half
    - Sorted by spent, largest first
    """
    expenses = [t for t in transactions if t.type == "expense"]
    groups = group_transactions(expenses, expense_category_key)

    categories = []
    for index, (category_name, group) in enumerate(groups.items()):
        spent = sum(t.amount for t in group)
        categories.append(
            ExpenseCategory(
                id=f"expense-category-{index}",
                name=category_name,
                budgeted=round_half_up(spent * BUDGET_HEADROOM),
                spent=spent,
                transactions=tuple(group),
                trend=calculate_trend(group),
                is_fixed=is_fixed_expense_category(category_name),
            )
        )

    return sorted(categories, key=lambda c: c.spent, reverse=True)
