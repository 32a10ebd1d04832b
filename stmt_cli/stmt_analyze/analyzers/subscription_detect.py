"""Recurring-merchant (subscription) detection."""

from __future__ import annotations

import pandas as pd

from ..frames import split_directions
from ..metrics import average, from_cents
from ..types import SubscriptionCandidate

MIN_OCCURRENCES = 2
MIN_DISTINCT_MONTHS = 2
RESULT_LIMIT = 10


def analyze(frame: pd.DataFrame) -> tuple[SubscriptionCandidate, ...]:
    debits, _ = split_directions(frame)
    # Merchant keys shorter than the minimum length are None and never grouped.
    debits = debits.dropna(subset=["merchant"])
    if debits.empty:
        return ()

    grouped = debits.groupby("merchant", sort=False).agg(
        count=("cents", "count"),
        total=("cents", "sum"),
        months=("month", "nunique"),
    )
    eligible = grouped[
        (grouped["count"] >= MIN_OCCURRENCES) & (grouped["months"] >= MIN_DISTINCT_MONTHS)
    ]
    ordered = eligible.sort_values("total", ascending=False, kind="stable").head(RESULT_LIMIT)

    candidates: list[SubscriptionCandidate] = []
    for merchant, row in ordered.iterrows():
        count = int(row["count"])
        total = from_cents(row["total"])
        candidates.append(
            SubscriptionCandidate(
                merchant=str(merchant),
                count=count,
                avg_amount=average(total, count),
                total_amount=total,
            )
        )
    return tuple(candidates)
