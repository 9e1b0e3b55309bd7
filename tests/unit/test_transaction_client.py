"""Unit tests for the transaction source client"""

import asyncio
import random
import httpx
import pytest
from datetime import date
from meridian_cashflow.domain.integration import DataIntegrationService
from meridian_cashflow.infrastructure.clients.transactions import TransactionSourceClient
from meridian_cashflow.domain.exceptions import TransactionSourceError


def _client(handler) -> TransactionSourceClient:
    return TransactionSourceClient(
        base_url="http://source.test",
        timeout=1.0,
        transport=httpx.MockTransport(handler),
    )


def test_get_transactions_parses_and_drops_malformed():
    """Test valid records are returned and malformed ones dropped"""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        return httpx.Response(
            200,
            json={
                "transactions": [
                    {"id": "1", "title": "Salary", "category": "Income", "amount": 8500,
                     "date": "2024-01-15", "time": "09:00:00", "type": "income", "merchant": "TechCorp"},
                    {"id": "2", "title": "Groceries", "category": "Food", "amount": -20,
                     "date": "2024-01-16", "time": "18:00:00", "type": "expense"},
                ]
            },
        )

    transactions = asyncio.run(_client(handler).get_transactions("user_1"))

    assert seen["url"] == "http://source.test/transactions?user_id=user_1"
    assert [t.id for t in transactions] == ["1"]
    assert transactions[0].merchant == "TechCorp"


def test_get_transactions_drops_wrongly_typed_records():
    """Test records with non-string text fields or overlong dates never reach analysis"""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "transactions": [
                    {"id": "1", "title": "Salary", "category": "Income", "amount": 8500,
                     "date": "2024-01-15", "time": "09:00:00", "type": "income", "merchant": 123},
                    {"id": "2", "title": "Groceries", "category": 7, "amount": 20,
                     "date": "2024-01-16", "time": "18:00:00", "type": "expense"},
                    {"id": "3", "title": "Rent", "category": "Housing", "amount": 2800,
                     "date": "2024-01-050", "time": "08:00:00", "type": "expense"},
                    {"id": "4", "title": "Coffee", "category": "Food", "amount": 4.5,
                     "date": "2024-01-17T08:15:00Z", "time": "08:15:00", "type": "expense"},
                ]
            },
        )

    transactions = asyncio.run(_client(handler).get_transactions("user_1"))

    assert [t.id for t in transactions] == ["4"]

    summary = DataIntegrationService(rng=random.Random(0)).integrate(transactions, today=date(2024, 2, 1))
    assert [c.name for c in summary.expense_categories] == ["Food"]


def test_get_transactions_http_error():
    """Test a 5xx response raises TransactionSourceError"""
    client = _client(lambda request: httpx.Response(500))

    with pytest.raises(TransactionSourceError, match="500"):
        asyncio.run(client.get_transactions("user_1"))


def test_get_transactions_timeout():
    """Test a timeout raises TransactionSourceError"""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(TransactionSourceError, match="timeout"):
        asyncio.run(_client(handler).get_transactions("user_1"))


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, content=b"not json"),
        httpx.Response(200, json=["not", "an", "object"]),
        httpx.Response(200, json={"transactions": {"id": "1"}}),
    ],
)
def test_get_transactions_invalid_payload(response):
    """Test undecodable payloads raise TransactionSourceError"""
    client = _client(lambda request: response)

    with pytest.raises(TransactionSourceError, match="Invalid transaction payload"):
        asyncio.run(client.get_transactions("user_1"))
