"""Analyzer module exports."""

from . import (
    category_breakdown,
    month_over_month,
    subscription_detect,
    totals,
    unusual_spending,
)

__all__ = [
    "category_breakdown",
    "month_over_month",
    "subscription_detect",
    "totals",
    "unusual_spending",
]
