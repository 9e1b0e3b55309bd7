"""Parsing and normalization of raw transaction records"""

import logging
import math
from dataclasses import replace
from datetime import date, datetime
from typing import Any, Iterable, List, Mapping, Optional
from meridian_cashflow.domain.models import Transaction
from meridian_cashflow.domain.exceptions import InvalidTransactionDataError

VALID_TYPES = ("income", "expense")
TEXT_FIELDS = ("title", "category", "time", "merchant", "description")


def _parse_date(raw_date: Any) -> date:
    """Calendar day from a date, datetime, or ISO date/timestamp string"""
    if isinstance(raw_date, datetime):
        return raw_date.date()
    if isinstance(raw_date, date):
        return raw_date
    if not isinstance(raw_date, str):
        raise InvalidTransactionDataError(f"Unparseable date {raw_date!r}")
    text = raw_date.strip()
    # fromisoformat only accepts a trailing "Z" from Python 3.11
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError as e:
        raise InvalidTransactionDataError(f"Unparseable date {raw_date!r}") from e


def _text(record: Mapping[str, Any], field: str) -> Optional[str]:
    value = record.get(field)
    if value is not None and not isinstance(value, str):
        raise InvalidTransactionDataError(f"Field {field!r} must be a string, got {type(value).__name__}")
    return value


def parse_transaction(record: Mapping[str, Any]) -> Transaction:
    """
    Build a Transaction from a raw mapping (e.g. decoded JSON).

    Raises:
        InvalidTransactionDataError: missing id, unknown type, negative or
            non-numeric amount, a date that is not an ISO calendar day or
            timestamp, or a non-string text field
    """
    if not isinstance(record, Mapping):
        raise InvalidTransactionDataError(f"Expected a mapping, got {type(record).__name__}")
    try:
        transaction_id = record["id"]
        txn_type = record["type"]
        raw_date = record["date"]
        raw_amount = record["amount"]
    except KeyError as e:
        raise InvalidTransactionDataError(f"Missing field {e.args[0]!r}") from e

    if not transaction_id:
        raise InvalidTransactionDataError("Transaction id is empty")
    if txn_type not in VALID_TYPES:
        raise InvalidTransactionDataError(f"Unknown transaction type {txn_type!r}")

    txn_date = _parse_date(raw_date)

    if isinstance(raw_amount, bool):
        raise InvalidTransactionDataError(f"Non-numeric amount {raw_amount!r}")
    try:
        amount = float(raw_amount)
    except (TypeError, ValueError) as e:
        raise InvalidTransactionDataError(f"Non-numeric amount {raw_amount!r}") from e
    if not math.isfinite(amount) or amount < 0:
        raise InvalidTransactionDataError(f"Amount must be a non-negative number, got {raw_amount!r}")

    text = {field: _text(record, field) for field in TEXT_FIELDS}

    return Transaction(
        id=str(transaction_id),
        title=text["title"] or "",
        category=text["category"] or "",
        amount=amount,
        date=txn_date,
        time=text["time"] or "",
        type=txn_type,
        merchant=text["merchant"] or None,
        description=text["description"] or None,
    )


def parse_transactions(records: Iterable[Mapping[str, Any]], strict: bool = False) -> List[Transaction]:
    """
    Parse raw records, failing closed on malformed ones.

    Malformed records are dropped with a warning so they never reach the
    interval or trend calculations. With strict=True the first malformed
    record raises InvalidTransactionDataError instead.
    """
    transactions = []
    for index, record in enumerate(records):
        try:
            transactions.append(parse_transaction(record))
        except InvalidTransactionDataError as e:
            if strict:
                raise
            logging.warning(
                f"Dropping malformed transaction: {e}",
                extra={"record_index": index},
            )
    return transactions


def normalize_transaction(transaction: Transaction) -> Transaction:
    """
    Fill presentation defaults on a record without touching the original.

    - merchant falls back to the title
    - description falls back to "<type> transaction"
    """
    return replace(
        transaction,
        merchant=transaction.merchant or transaction.title or None,
        description=transaction.description or f"{transaction.type} transaction",
    )


def normalize_transactions(transactions: Iterable[Transaction]) -> List[Transaction]:
    """Apply normalize_transaction to every record"""
    return [normalize_transaction(t) for t in transactions]
