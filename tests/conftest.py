"""Pytest fixtures for testing"""

import os

# Point the app at the test database before settings are loaded
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import random
import pytest
from datetime import date
from typing import Callable, Generator, Optional
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from meridian_cashflow.api.main import create_app
from meridian_cashflow.api.dependencies import get_integration_service
from meridian_cashflow.domain.integration import DataIntegrationService
from meridian_cashflow.domain.models import Transaction
from meridian_cashflow.infrastructure.database.models import Base
from meridian_cashflow.infrastructure.database.session import get_db


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database and a seeded analytics service"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    def override_get_integration_service():
        return DataIntegrationService(rng=random.Random(42))

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_integration_service] = override_get_integration_service
    return TestClient(app)


@pytest.fixture
def make_transaction() -> Callable[..., Transaction]:
    """Factory for transactions with sensible defaults"""
    counter = {"n": 0}

    def _make(
        type: str = "expense",
        amount: float = 100.0,
        on: date = date(2024, 1, 1),
        category: str = "Food",
        title: str = "Purchase",
        merchant: Optional[str] = None,
    ) -> Transaction:
        counter["n"] += 1
        return Transaction(
            id=f"tx_{counter['n']}",
            title=title,
            category=category,
            amount=amount,
            date=on,
            time="12:00:00",
            type=type,
            merchant=merchant,
        )

    return _make


@pytest.fixture
def scenario_transactions() -> list[Transaction]:
    """Two monthly TechCorp salary payments and one housing expense"""
    return [
        Transaction(
            id="inc_1",
            title="Salary Deposit",
            category="Income",
            amount=8500,
            date=date(2024, 1, 15),
            time="09:00:00",
            type="income",
            merchant="TechCorp",
        ),
        Transaction(
            id="inc_2",
            title="Salary Deposit",
            category="Income",
            amount=8500,
            date=date(2024, 2, 15),
            time="09:00:00",
            type="income",
            merchant="TechCorp",
        ),
        Transaction(
            id="exp_1",
            title="Rent",
            category="Housing",
            amount=2800,
            date=date(2024, 1, 5),
            time="08:00:00",
            type="expense",
        ),
    ]
