"""Common metric helpers for statement insights."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

ZERO = Decimal("0")
TWO_PLACES = Decimal("0.01")


def to_cents(amount: Decimal) -> int:
    """Return an exact integer paise/cents count for a money amount."""

    return int((amount * 100).to_integral_value())


def from_cents(value: Any) -> Decimal:
    """Convert a pandas/numpy integer cents scalar back to a 2-place Decimal."""

    if value is None:
        return ZERO.quantize(TWO_PLACES)
    return Decimal(int(value)).scaleb(-2).quantize(TWO_PLACES)


def average(total: Decimal, count: int) -> Decimal:
    """Mean of ``count`` amounts summing to ``total``, zero when empty."""

    if not count:
        return ZERO
    return (total / count).quantize(TWO_PLACES)


def ratio(numerator: Decimal, denominator: Decimal) -> Decimal | None:
    """Return numerator/denominator, None when the denominator is zero."""

    if denominator == 0:
        return None
    return numerator / denominator
