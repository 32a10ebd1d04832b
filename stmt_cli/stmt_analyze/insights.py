"""Insights engine: aggregate a transaction list into an Insights value."""

from __future__ import annotations

from collections.abc import Sequence

from stmt_cli.stmt_parse.types import Transaction

from .analyzers import category_breakdown, month_over_month, subscription_detect, totals, unusual_spending
from .frames import transactions_frame
from .types import Insights


def build_insights(transactions: Sequence[Transaction]) -> Insights:
    """Compute every insight from scratch over ``transactions``."""

    frame = transactions_frame(transactions)
    return Insights(
        totals=totals.analyze(frame),
        category_breakdown=category_breakdown.analyze(frame),
        month_over_month=month_over_month.analyze(frame),
        subscriptions=subscription_detect.analyze(frame),
        unusual_spends=unusual_spending.analyze(frame),
    )
