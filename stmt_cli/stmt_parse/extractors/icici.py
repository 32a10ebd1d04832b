"""ICICI Bank statement parser."""

from __future__ import annotations

import re

from ..segmenter import normalize_lines
from ..signs import ConfidenceTiers, resolve_rows
from ..types import ParsedRow, Transaction
from ..utils import DATE_TOKEN, extract_fields, to_iso
from .base import StatementParser

ICICI_TIERS = ConfidenceTiers(columns=0.86, balance_delta=0.68, credit_hint=0.62, balance_only=0.45)

_ROW_RE = re.compile(rf"^(?:\d+\s+)?({DATE_TOKEN})(?:\s+{DATE_TOKEN})?\s+(.*)$")
_HEADER_WORDS_RE = re.compile(
    r"transaction date|withdrawal amount|deposit amount|balance", re.IGNORECASE
)


class IciciStatementParser(StatementParser):
    """Line-oriented parser for ICICI exports.

    ICICI rows fit on one line and carry at least an amount plus the running
    balance, so every date-led line with two or more amount tokens is a row.
    """

    name = "icici-v1"

    def can_parse(self, text: str) -> float:
        lowered = (text or "").lower()
        if "icici bank" in lowered and "transaction remarks" in lowered:
            return 0.95
        if "icici" in lowered and "withdrawal amount" in lowered and "deposit amount" in lowered:
            return 0.8
        return 0.05

    def parse(self, text: str) -> list[Transaction]:
        rows = [row for row in map(_parse_line, normalize_lines(text)) if row is not None]
        return resolve_rows(rows, parser_id=self.name, currency=self.currency, tiers=ICICI_TIERS)


def _parse_line(line: str) -> ParsedRow | None:
    match = _ROW_RE.match(line)
    if not match:
        return None
    date_raw, rest = match.groups()
    fields = extract_fields(rest)
    if fields.token_count < 2:
        return None
    if not fields.description or _HEADER_WORDS_RE.search(fields.description):
        return None
    return ParsedRow(
        date=to_iso(date_raw),
        description=fields.description,
        withdrawal=fields.withdrawal,
        deposit=fields.deposit,
        txn_amount=fields.txn_amount,
        balance=fields.balance,
        balance_type=fields.balance_type,
        marker=fields.marker,
    )
