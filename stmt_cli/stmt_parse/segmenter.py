"""Line normalization, table location, and row segmentation."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .types import ParsedRow
from .utils import DATE_TOKEN, extract_fields, to_iso

_LINE_SPLIT_RE = re.compile(r"\r?\n")

ROW_START_RE = re.compile(
    rf"^(?:\d+\s+)?({DATE_TOKEN})(?:\s+({DATE_TOKEN}))?(?:\s+(.*))?$"
)


def normalize_lines(text: str) -> list[str]:
    """Split text into trimmed, whitespace-collapsed, non-empty lines."""

    lines = (" ".join(raw.split()) for raw in _LINE_SPLIT_RE.split(text or ""))
    return [line for line in lines if line]


def looks_like_header(line: str) -> bool:
    """True when a line names the date, description, and amount columns."""

    lowered = " ".join(line.lower().split())
    has_date_cols = ("date" in lowered and "value date" in lowered) or "transaction date" in lowered
    has_desc_col = "particular" in lowered or "remarks" in lowered
    return (
        has_date_cols
        and has_desc_col
        and "withdraw" in lowered
        and "deposit" in lowered
        and "balance" in lowered
    )


def locate_table(lines: Iterable[str]) -> list[str] | None:
    """Return the lines after the first header, or None if no header exists."""

    remaining = list(lines)
    for index, line in enumerate(remaining):
        if looks_like_header(line):
            return remaining[index + 1 :]
    return None


def start_row(line: str) -> ParsedRow | None:
    """Build a row from a line that begins with a date token, else None."""

    match = ROW_START_RE.match(line)
    if not match:
        return None
    date_raw, value_date_raw, rest = match.groups()
    try:
        date = to_iso(date_raw)
        value_date = to_iso(value_date_raw) if value_date_raw else None
    except ValueError:
        return None

    fields = extract_fields(rest or "")
    return ParsedRow(
        date=date,
        value_date=value_date,
        description=fields.description,
        withdrawal=fields.withdrawal,
        deposit=fields.deposit,
        txn_amount=fields.txn_amount,
        balance=fields.balance,
        balance_type=fields.balance_type,
        marker=fields.marker,
    )


def segment_rows(text: str) -> list[ParsedRow]:
    """Return the ordered rows of the first transaction table in ``text``.

    Lines that do not open a new row are folded into the previous row's
    description, which is how wrapped particulars (payee, UPI reference,
    remarks) end up on one transaction.
    """

    table_lines = locate_table(normalize_lines(text))
    if table_lines is None:
        return []

    rows: list[ParsedRow] = []
    current: ParsedRow | None = None
    for line in table_lines:
        row = start_row(line)
        if row is not None:
            if current is not None:
                rows.append(current)
            current = row
            continue
        # Statements repeat the column header after every page break.
        if current is None or looks_like_header(line):
            continue
        current.description = f"{current.description} {line}".strip()

    if current is not None:
        rows.append(current)
    return [row for row in rows if row.description.strip()]
