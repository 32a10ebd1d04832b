"""Amount token grammar and trailing-column field extraction."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from ..types import DrCr

# Money columns always carry 1-2 fraction digits; bare integers are reference
# numbers, cheque numbers, or row ordinals.
AMOUNT_TOKEN_RE = re.compile(r"(?<![\d.])-?\d[\d,]*\.\d{1,2}(?![\d.])")

_AMOUNT_SHAPE_RE = re.compile(r"^-?\d+(?:,\d+)*\.\d{1,2}$")
_MARKER_RE = re.compile(r"^(DR|CR)$", re.IGNORECASE)
_MARKER_WORD_RE = re.compile(r"\b(DR|CR)\b", re.IGNORECASE)

TWO_PLACES = Decimal("0.01")


@dataclass(slots=True)
class RowFields:
    """Fields recovered from the free text that follows a row's dates."""

    description: str
    withdrawal: Decimal | None = None
    deposit: Decimal | None = None
    txn_amount: Decimal | None = None
    balance: Decimal | None = None
    balance_type: DrCr | None = None
    marker: DrCr | None = None
    token_count: int = 0


def parse_amount_token(token: str) -> Decimal | None:
    """Parse an amount token into a non-negative Decimal.

    Returns ``None`` for anything outside the decimal-token grammar so callers
    can drop it without aborting the row.
    """

    cleaned = (token or "").strip()
    if not _AMOUNT_SHAPE_RE.match(cleaned):
        return None
    try:
        value = Decimal(cleaned.replace(",", "").lstrip("-"))
    except InvalidOperation:
        return None
    return value.quantize(TWO_PLACES)


def extract_fields(rest: str) -> RowFields:
    """Split a row remainder into description, amount columns, and DR/CR hint.

    The last one, two, or three amount tokens are read positionally:
    three are ``(withdrawal, deposit, balance)``, two are
    ``(txn_amount, balance)``, one is the balance alone.
    """

    text = " ".join((rest or "").split())
    tail: list[tuple[int, Decimal]] = []
    for match in AMOUNT_TOKEN_RE.finditer(text):
        value = parse_amount_token(match.group())
        if value is not None:
            tail.append((match.start(), value))
    tail = tail[-3:]

    cut = tail[0][0] if tail else len(text)
    description = text[:cut].strip()
    fields = RowFields(description=description, token_count=len(tail))

    values = [value for _, value in tail]
    if len(values) == 3:
        fields.withdrawal, fields.deposit, fields.balance = values
    elif len(values) == 2:
        fields.txn_amount, fields.balance = values
    elif len(values) == 1:
        fields.balance = values[0]

    fields.balance_type, fields.marker = _find_marker(text, description)
    return fields


def _find_marker(text: str, description: str) -> tuple[DrCr | None, DrCr | None]:
    """Return ``(balance_type, marker)`` for a row.

    Only a marker trailing the amounts or sitting directly before them
    describes the balance. A DR/CR word elsewhere, such as inside
    ``UPI/DR/412345``, is kept as the loose ``marker`` alone.
    """

    tokens = text.split(" ")
    if tokens and _MARKER_RE.match(tokens[-1]):
        marker = tokens[-1].upper()
        return marker, marker  # type: ignore[return-value]

    desc_tokens = description.split(" ")
    if len(desc_tokens) > 1 and _MARKER_RE.match(desc_tokens[-1]):
        marker = desc_tokens[-1].upper()
        return marker, marker  # type: ignore[return-value]

    match = _MARKER_WORD_RE.search(text)
    if match:
        return None, match.group(1).upper()  # type: ignore[return-value]
    return None, None
