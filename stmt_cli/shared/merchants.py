"""Merchant normalization helpers shared across modules."""

from __future__ import annotations

import re
from functools import lru_cache

STOP_WORDS = frozenset(
    {
        "UPI",
        "IMPS",
        "NEFT",
        "RTGS",
        "POS",
        "ATM",
        "TO",
        "BY",
        "TRANSFER",
        "PAYMENT",
        "DEBIT",
        "CREDIT",
        "REF",
        "TXN",
        "ID",
    }
)

MIN_MERCHANT_LENGTH = 3

# Digits, punctuation, underscores, and separators such as "/" or "-".
_NOISE_RE = re.compile(r"[\d\W_]+")


@lru_cache(maxsize=2048)
def normalize_merchant(description: str) -> str:
    """Return the grouping key for a transaction description.

    The description is uppercased, digits and punctuation become spaces,
    channel/stop words are dropped, and whitespace is collapsed.
    """

    cleaned = _NOISE_RE.sub(" ", (description or "").upper())
    tokens = [token for token in cleaned.split() if token not in STOP_WORDS]
    return " ".join(tokens)


def merchant_key(description: str) -> str | None:
    """Return the merchant key, or None when it is too short to group on."""

    normalized = normalize_merchant(description)
    if len(normalized) < MIN_MERCHANT_LENGTH:
        return None
    return normalized
