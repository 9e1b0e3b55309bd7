"""Transaction source HTTP client for fetching a user's raw transaction list"""

import httpx
from typing import List, Optional
from meridian_cashflow.domain.models import Transaction
from meridian_cashflow.domain.exceptions import TransactionSourceError
from meridian_cashflow.domain.transactions import parse_transactions
from meridian_cashflow.config import settings
from meridian_cashflow.infrastructure.observability.metrics import dropped_transactions_counter


class TransactionSourceClient:
    """Client for the external store that holds users' transactions"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or settings.transaction_source_base
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def get_transactions(self, user_id: str) -> List[Transaction]:
        """
        Fetch the stored transaction list for a user.

        Malformed records are dropped (and counted) rather than failing the
        whole fetch.

        Raises:
            TransactionSourceError: On timeout, HTTP errors, or an undecodable payload
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(
                    f"{self.base_url}/transactions",
                    params={"user_id": user_id},
                )
                response.raise_for_status()
                data = response.json()
                records = data.get("transactions", [])
                if not isinstance(records, list):
                    raise TypeError("'transactions' is not a list")

            except httpx.TimeoutException as e:
                raise TransactionSourceError(f"Transaction source timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise TransactionSourceError(f"Transaction source error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise TransactionSourceError(f"Transaction source unreachable: {e}") from e
            except (AttributeError, ValueError, TypeError) as e:
                raise TransactionSourceError(f"Invalid transaction payload from source: {e}") from e

        transactions = parse_transactions(records)
        dropped = len(records) - len(transactions)
        if dropped:
            dropped_transactions_counter.inc(dropped)
        return transactions
