"""Month-over-month income/expense analyzer."""

from __future__ import annotations

import pandas as pd

from ..metrics import from_cents
from ..types import MonthSummary


def analyze(frame: pd.DataFrame) -> tuple[MonthSummary, ...]:
    dated = frame.dropna(subset=["month"])
    if dated.empty:
        return ()

    working = dated.assign(
        income=dated["cents"].where(~dated["is_debit"], 0),
        expense=dated["cents"].where(dated["is_debit"], 0),
    )
    monthly = working.groupby("month")[["income", "expense"]].sum()
    return tuple(
        MonthSummary(month=str(month), income=from_cents(row["income"]), expense=from_cents(row["expense"]))
        for month, row in monthly.iterrows()
    )
