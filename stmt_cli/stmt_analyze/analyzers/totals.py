"""Debit/credit totals analyzer."""

from __future__ import annotations

import pandas as pd

from ..frames import split_directions
from ..metrics import average, from_cents, ratio
from ..types import Highlight, Totals


def analyze(frame: pd.DataFrame) -> Totals:
    debits, credits = split_directions(frame)
    total_debits = from_cents(debits["cents"].sum())
    total_credits = from_cents(credits["cents"].sum())

    return Totals(
        transaction_count=len(frame),
        total_debits=total_debits,
        total_credits=total_credits,
        income_expense_ratio=ratio(total_credits, total_debits),
        avg_debit=average(total_debits, len(debits)),
        avg_credit=average(total_credits, len(credits)),
        top_expense=_largest(debits),
        top_credit=_largest(credits),
    )


def _largest(frame: pd.DataFrame) -> Highlight | None:
    if frame.empty:
        return None
    # idxmax returns the first label on ties, keeping the earliest transaction.
    row = frame.loc[frame["cents"].idxmax()]
    return Highlight(description=str(row["description"]), amount=from_cents(row["cents"]))
