"""Header-driven fallback parser for withdrawal/deposit/balance tables."""

from __future__ import annotations

from ..segmenter import segment_rows
from ..signs import ConfidenceTiers, resolve_rows
from ..types import Transaction
from .base import StatementParser

GENERIC_TIERS = ConfidenceTiers(columns=0.84, balance_delta=0.68, credit_hint=0.62, balance_only=0.45)


class GenericStatementParser(StatementParser):
    name = "generic-v1"

    def can_parse(self, text: str) -> float:
        lowered = (text or "").lower()
        if "value date" in lowered and "withdraw" in lowered and "deposit" in lowered:
            return 0.75
        if "transaction date" in lowered and "withdraw" in lowered:
            return 0.55
        return 0.2

    def parse(self, text: str) -> list[Transaction]:
        rows = segment_rows(text)
        return resolve_rows(rows, parser_id=self.name, currency=self.currency, tiers=GENERIC_TIERS)
