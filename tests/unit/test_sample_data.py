"""Unit tests for the demo transaction generator"""

from datetime import date
from meridian_cashflow.domain.sample_data import generate_sample_transactions
from meridian_cashflow.domain.integration import DataIntegrationService

TODAY = date(2024, 6, 20)


def test_sample_data_deterministic_with_seed():
    """Test the same seed reproduces the same data set"""
    assert generate_sample_transactions(seed=3, today=TODAY) == generate_sample_transactions(seed=3, today=TODAY)


def test_sample_data_shape():
    """Test ordering, id uniqueness, amounts and the six-month span"""
    transactions = generate_sample_transactions(seed=1, today=TODAY)

    dates = [t.date for t in transactions]
    assert dates == sorted(dates, reverse=True)
    assert len({t.id for t in transactions}) == len(transactions)
    assert all(t.amount >= 0 for t in transactions)
    assert min(dates) >= date(2024, 1, 1)
    assert max(dates) <= date(2024, 6, 30)

    income = [t for t in transactions if t.type == "income"]
    assert sum(t.merchant == "TechCorp Inc." for t in income) == 6
    assert sum(t.merchant == "Upwork" for t in income) == 4
    assert sum(t.merchant == "Property Management" for t in income) == 6
    assert sum(t.merchant == "Vanguard" for t in income) == 2
    assert all(t.amount == 2300 for t in income if t.merchant == "Property Management")


def test_sample_data_analysis():
    """Test the demo data yields the expected income streams"""
    transactions = generate_sample_transactions(seed=1, today=TODAY)

    summary = DataIntegrationService(observation_window_months=6).integrate(transactions, today=TODAY)

    streams = {s.name: s for s in summary.income_streams}
    assert set(streams) == {"TechCorp Inc.", "Upwork", "Property Management", "Vanguard"}
    assert summary.income_streams[0].name == "TechCorp Inc."
    assert streams["TechCorp Inc."].frequency == "monthly"
    assert streams["Property Management"].category == "rental"
    assert streams["Property Management"].reliability == 0.95
    assert {c.name for c in summary.expense_categories} <= {
        "Housing", "Food", "Transport", "Utilities", "Entertainment", "Shopping", "Health",
    }
    assert summary.monthly_income > summary.monthly_expenses
