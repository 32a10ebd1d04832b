"""Pandas helpers turning a transaction ledger into an analysis frame."""

from __future__ import annotations

import re
from collections.abc import Sequence

import pandas as pd

from stmt_cli.shared.merchants import merchant_key
from stmt_cli.stmt_parse.types import Transaction

from .metrics import to_cents

# Amounts travel as integer cents so grouped sums stay exact; analyzers convert
# back with ``metrics.from_cents``.
TRANSACTION_COLUMNS = [
    "id",
    "date",
    "description",
    "category",
    "is_debit",
    "cents",
    "month",
    "merchant",
]

_ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-\d{2}$")


def month_key(iso_date: str) -> str | None:
    """Return ``YYYY-MM`` for an ISO date string, None when malformed."""

    match = _ISO_DATE_RE.match(iso_date or "")
    if not match:
        return None
    return f"{match.group(1)}-{match.group(2)}"


def transactions_frame(transactions: Sequence[Transaction]) -> pd.DataFrame:
    """Return one row per transaction, in ledger order."""

    records = [
        {
            "id": txn.id,
            "date": txn.date,
            "description": txn.description,
            "category": txn.category,
            "is_debit": txn.is_debit,
            "cents": to_cents(txn.magnitude),
            "month": month_key(txn.date),
            "merchant": merchant_key(txn.description),
        }
        for txn in transactions
    ]
    frame = pd.DataFrame.from_records(records, columns=TRANSACTION_COLUMNS)
    frame["is_debit"] = frame["is_debit"].astype(bool)
    frame["cents"] = frame["cents"].astype("int64")
    return frame


def split_directions(frame: pd.DataFrame) -> tuple[pd.DataFrame, pd.DataFrame]:
    """Partition a ledger frame into (debits, credits) by its DR/CR flag."""

    return frame[frame["is_debit"]], frame[~frame["is_debit"]]
