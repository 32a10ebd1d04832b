"""Statistical outlier detection over debit magnitudes."""

from __future__ import annotations

import pandas as pd

from ..frames import split_directions
from ..metrics import from_cents
from ..types import UnusualSpend

MEAN_MULTIPLIER = 1.8
STDDEV_MULTIPLIER = 2.0
ABSOLUTE_FLOOR = 1000.0
RESULT_LIMIT = 10


def spend_threshold(amounts: pd.Series) -> float:
    """Return ``max(mean * 1.8, mean + 2 * stddev)`` using the population stddev."""

    centre = float(amounts.mean())
    spread = float(amounts.std(ddof=0) or 0.0)
    return max(centre * MEAN_MULTIPLIER, centre + STDDEV_MULTIPLIER * spread)


def analyze(frame: pd.DataFrame) -> tuple[UnusualSpend, ...]:
    debits, _ = split_directions(frame)
    if debits.empty:
        return ()

    amounts = debits["cents"] / 100
    threshold = spend_threshold(amounts)
    flagged = debits[(amounts > threshold) & (amounts > ABSOLUTE_FLOOR)]
    flagged = flagged.sort_values("cents", ascending=False, kind="stable").head(RESULT_LIMIT)
    return tuple(
        UnusualSpend(
            id=str(row.id),
            date=str(row.date),
            description=str(row.description),
            amount=from_cents(row.cents),
        )
        for row in flagged.itertuples(index=False)
    )
