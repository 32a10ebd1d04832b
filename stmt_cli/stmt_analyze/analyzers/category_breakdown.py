"""Category breakdown analyzer."""

from __future__ import annotations

import pandas as pd

from ..metrics import from_cents
from ..types import CategoryTotal


def analyze(frame: pd.DataFrame) -> tuple[CategoryTotal, ...]:
    if frame.empty:
        return ()

    grouped = frame.groupby("category", sort=False)["cents"].agg(["sum", "count"])
    ordered = grouped.sort_values("sum", ascending=False, kind="stable")
    return tuple(
        CategoryTotal(category=str(category), count=int(row["count"]), total=from_cents(row["sum"]))
        for category, row in ordered.iterrows()
    )
