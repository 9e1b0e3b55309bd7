"""Integration facade - turns a transaction list into one cash flow summary"""

import random
from datetime import date
from typing import Dict, List, Optional, Sequence
from meridian_cashflow.domain.models import (
    Transaction,
    IncomeStream,
    ExpenseCategory,
    EmergencyFund,
    EmergencyFundAccount,
    HistoricalDataPoint,
    VolatilityMetrics,
    CashFlowSummary,
)
from meridian_cashflow.domain.patterns import analyze_income_patterns, analyze_expense_patterns
from meridian_cashflow.domain.volatility import calculate_volatility_metrics
from meridian_cashflow.domain.history import generate_historical_data

# Monthly equivalents per payment frequency
FREQUENCY_MULTIPLIERS: Dict[str, float] = {
    "weekly": 4.33,  # average weeks per month
    "biweekly": 2.17,
    "monthly": 1.0,
    "annual": 1 / 12,
}

# Display-only split of the emergency fund (not sourced from real balances)
EMERGENCY_FUND_SPLIT = (
    ("savings-main", "High-Yield Savings", 0.7, "savings"),
    ("checking-emergency", "Emergency Checking", 0.2, "checking"),
    ("money-market", "Money Market", 0.1, "money_market"),
)


def calculate_monthly_income(streams: Sequence[IncomeStream]) -> float:
    """Sum of each stream's amount converted to a monthly equivalent"""
    return sum(stream.amount * FREQUENCY_MULTIPLIERS[stream.frequency] for stream in streams)


def calculate_monthly_expenses(categories: Sequence[ExpenseCategory], observation_window_months: int = 12) -> float:
    """Total spend across categories spread over the observation window"""
    return sum(category.spent for category in categories) / observation_window_months


class DataIntegrationService:
    """
    Stateless cash flow analytics over a caller-supplied transaction list.

    Every call derives its result from scratch and never mutates the input.
    Instances are cheap; construct one per configuration (or per test) rather
    than sharing a process-wide instance.

    Args:
        observation_window_months: Months the input list is assumed to span
        history_months: Length of the synthetic historical series
        emergency_fund_target_months: Target fund size in months of expenses
        emergency_fund_current_months: Assumed current fund size in months of expenses
        rng: Random source for the synthetic series (seed it for reproducible output)
    """

    def __init__(
        self,
        observation_window_months: int = 12,
        history_months: int = 12,
        emergency_fund_target_months: float = 6.0,
        emergency_fund_current_months: float = 4.2,
        rng: Optional[random.Random] = None,
    ):
        if observation_window_months <= 0:
            raise ValueError("observation_window_months must be positive")
        if history_months < 0:
            raise ValueError("history_months must not be negative")

        self.observation_window_months = observation_window_months
        self.history_months = history_months
        self.emergency_fund_target_months = emergency_fund_target_months
        self.emergency_fund_current_months = emergency_fund_current_months
        self.rng = rng

    def analyze_income_patterns(self, transactions: Sequence[Transaction]) -> List[IncomeStream]:
        return analyze_income_patterns(transactions)

    def analyze_expense_patterns(self, transactions: Sequence[Transaction]) -> List[ExpenseCategory]:
        return analyze_expense_patterns(transactions)

    def calculate_monthly_income(self, streams: Sequence[IncomeStream]) -> float:
        return calculate_monthly_income(streams)

    def calculate_monthly_expenses(self, categories: Sequence[ExpenseCategory]) -> float:
        return calculate_monthly_expenses(categories, self.observation_window_months)

    def calculate_emergency_fund(self, monthly_expenses: float) -> EmergencyFund:
        """Size the emergency fund from monthly expenses and split it across display accounts"""
        current_amount = monthly_expenses * self.emergency_fund_current_months
        return EmergencyFund(
            current_amount=current_amount,
            target_amount=monthly_expenses * self.emergency_fund_target_months,
            monthly_expenses=monthly_expenses,
            accounts=[
                EmergencyFundAccount(id=account_id, name=name, amount=current_amount * share, type=account_type)
                for account_id, name, share, account_type in EMERGENCY_FUND_SPLIT
            ],
        )

    def calculate_volatility_metrics(
        self,
        streams: Sequence[IncomeStream],
        categories: Sequence[ExpenseCategory],
    ) -> VolatilityMetrics:
        return calculate_volatility_metrics(streams, categories)

    def generate_historical_data(
        self,
        monthly_income: float,
        monthly_expenses: float,
        today: Optional[date] = None,
    ) -> List[HistoricalDataPoint]:
        """Synthetic display series (see domain.history), not a forecast"""
        return generate_historical_data(
            monthly_income,
            monthly_expenses,
            months=self.history_months,
            rng=self.rng,
            today=today,
        )

    def integrate(self, transactions: Sequence[Transaction], today: Optional[date] = None) -> CashFlowSummary:
        """
        Main entry point: derive the full cash flow summary.

        Flow:
        1. Income streams and expense categories from the raw list
        2. Monthly income (frequency-normalized) and monthly expenses (windowed)
        3. Emergency fund, volatility metrics and the synthetic history
        """
        income_streams = self.analyze_income_patterns(transactions)
        expense_categories = self.analyze_expense_patterns(transactions)

        monthly_income = self.calculate_monthly_income(income_streams)
        monthly_expenses = self.calculate_monthly_expenses(expense_categories)

        return CashFlowSummary(
            monthly_income=monthly_income,
            monthly_expenses=monthly_expenses,
            net_cash_flow=monthly_income - monthly_expenses,
            historical_data=self.generate_historical_data(monthly_income, monthly_expenses, today=today),
            income_streams=income_streams,
            expense_categories=expense_categories,
            emergency_fund=self.calculate_emergency_fund(monthly_expenses),
            volatility_metrics=self.calculate_volatility_metrics(income_streams, expense_categories),
        )
