"""Keyword classification of income sources and expense categories"""

from typing import Sequence, Tuple
from meridian_cashflow.domain.models import IncomeCategory

# Checked in order, first match wins
INCOME_CATEGORY_RULES: Sequence[Tuple[IncomeCategory, Tuple[str, ...]]] = (
    ("salary", ("salary", "payroll", "wages")),
    ("freelance", ("freelance", "contract", "consulting")),
    ("rental", ("rent", "property", "lease")),
    ("investment", ("dividend", "interest", "investment")),
    ("business", ("business", "revenue", "sales")),
)

FIXED_EXPENSE_KEYWORDS: Tuple[str, ...] = (
    "rent",
    "mortgage",
    "insurance",
    "subscription",
    "utilities",
    "loan",
    "car payment",
    "phone",
    "internet",
    "streaming",
)


def categorize_income_source(
    source_name: str,
    rules: Sequence[Tuple[IncomeCategory, Tuple[str, ...]]] = INCOME_CATEGORY_RULES,
) -> IncomeCategory:
    """
    Classify an income source by case-insensitive substring match.

    Unmatched names fall through to "other"; this never raises.
    """
    name = source_name.lower()
    for category, keywords in rules:
        if any(keyword in name for keyword in keywords):
            return category
    return "other"


def is_fixed_expense_category(
    category_name: str,
    keywords: Sequence[str] = FIXED_EXPENSE_KEYWORDS,
) -> bool:
    """True when the category name contains any fixed-expense keyword"""
    name = category_name.lower()
    return any(keyword in name for keyword in keywords)
