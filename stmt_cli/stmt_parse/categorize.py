"""Keyword-based category classifier for transaction descriptions."""

from __future__ import annotations

UNCATEGORIZED = "uncategorized"

# Ordered: the first matching rule wins.
CATEGORY_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("upi", "imps", "neft", "rtgs"), "transfer"),
    (("atm",), "cash"),
    (("salary",), "income"),
    (("interest",), "interest"),
    (("emi", "loan"), "loan"),
    (("charge", "fee"), "fees"),
)

CATEGORIES: tuple[str, ...] = tuple(category for _, category in CATEGORY_RULES) + (UNCATEGORIZED,)


def infer_category(description: str) -> str:
    """Return the first category whose keyword occurs in the description."""

    lowered = (description or "").lower()
    for keywords, category in CATEGORY_RULES:
        if any(keyword in lowered for keyword in keywords):
            return category
    return UNCATEGORIZED
