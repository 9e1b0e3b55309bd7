"""Demo transaction data that mimics six months of a real user's activity"""

import random
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple
from meridian_cashflow.domain.models import Transaction
from meridian_cashflow.utils.date_utils import shift_months

DEMO_MONTHS = 6


@dataclass(frozen=True)
class ExpenseProfile:
    """Spending pattern for one demo expense category"""

    category: str
    merchants: Tuple[str, ...]
    amount_range: Tuple[float, float]
    per_month: int


EXPENSE_PROFILES = (
    ExpenseProfile("Housing", ("Rent Payment", "Mortgage Co."), (2800, 3200), 1),
    ExpenseProfile("Food", ("Whole Foods", "Starbucks", "DoorDash"), (50, 150), 15),
    ExpenseProfile("Transport", ("Shell", "Uber", "Metro Card"), (30, 80), 8),
    ExpenseProfile("Utilities", ("Electric Co.", "Gas Co.", "Internet Provider"), (80, 150), 1),
    ExpenseProfile("Entertainment", ("Netflix", "Spotify", "Movie Theater"), (10, 50), 5),
    ExpenseProfile("Shopping", ("Amazon", "Target", "Best Buy"), (25, 200), 6),
    ExpenseProfile("Health", ("CVS Pharmacy", "Gym Membership"), (15, 80), 3),
)


def _income(
    txn_id: str,
    title: str,
    merchant: str,
    amount: float,
    day: date,
    time: str,
    description: str,
) -> Transaction:
    return Transaction(
        id=txn_id,
        title=title,
        category="Income",
        amount=round(amount, 2),
        date=day,
        time=time,
        type="income",
        merchant=merchant,
        description=description,
    )


def generate_sample_transactions(seed: Optional[int] = None, today: Optional[date] = None) -> List[Transaction]:
    """
    Generate a demo transaction history, newest first.

    Income:
    - Monthly salary from TechCorp Inc. on the 15th (small variance)
    - Irregular freelance payments from Upwork in 4 of the 6 months
    - Monthly rental income on the 1st
    - Quarterly Vanguard dividends

    Expenses: seven categories with a per-month purchase count that
    varies +/-20% around each profile's typical frequency.
    """
    rng = random.Random(seed)
    today = today or date.today()
    transactions: List[Transaction] = []

    for i in range(DEMO_MONTHS):
        transactions.append(
            _income(
                f"salary-{i}", "Salary Deposit", "TechCorp Inc.",
                8500 + (rng.random() - 0.5) * 200,
                shift_months(today, -i, 15), "09:00:00", "Monthly salary payment",
            )
        )

    for index, months_ago in enumerate((0, 1, 3, 4)):
        transactions.append(
            _income(
                f"freelance-{index}", "Freelance Payment", "Upwork",
                1200 + rng.random() * 800,
                shift_months(today, -months_ago, rng.randint(5, 24)), "14:30:00", "Web development project",
            )
        )

    for i in range(DEMO_MONTHS):
        transactions.append(
            _income(
                f"rental-{i}", "Rental Income", "Property Management",
                2300,
                shift_months(today, -i, 1), "08:00:00", "Monthly rental payment",
            )
        )

    for i in range(2):
        transactions.append(
            _income(
                f"dividend-{i}", "Investment Dividends", "Vanguard",
                450 + rng.random() * 100,
                shift_months(today, -3 * i, 1), "10:00:00", "Quarterly dividend payment",
            )
        )

    transaction_id = 1000
    for profile in EXPENSE_PROFILES:
        per_month = int(profile.per_month * (1 + (rng.random() - 0.5) * 0.4))
        low, high = profile.amount_range
        for i in range(per_month * DEMO_MONTHS):
            merchant = rng.choice(profile.merchants)
            transactions.append(
                Transaction(
                    id=f"expense-{transaction_id}",
                    title=f"{profile.category} Purchase",
                    category=profile.category,
                    amount=round(low + rng.random() * (high - low), 2),
                    date=shift_months(today, -(i // per_month), rng.randint(1, 28)),
                    time=f"{rng.randint(0, 23):02d}:{rng.randint(0, 59):02d}:00",
                    type="expense",
                    merchant=merchant,
                    description=f"{profile.category} expense at {merchant}",
                )
            )
            transaction_id += 1

    return sorted(transactions, key=lambda t: t.date, reverse=True)
