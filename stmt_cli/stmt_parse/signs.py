"""Sign resolution for parsed statement rows."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from .categorize import infer_category
from .types import ParsedRow, Transaction

CREDIT_HINT_RE = re.compile(
    r"(salary|interest|refund|credit|cr\b|deposit|cashback|received)", re.IGNORECASE
)

RULE_BOTH_COLUMNS = 1
RULE_DEPOSIT = 2
RULE_WITHDRAWAL = 3
RULE_BALANCE_DELTA = 4
RULE_CREDIT_HINT = 5
RULE_BALANCE_ONLY = 6


@dataclass(frozen=True, slots=True)
class ConfidenceTiers:
    """Fixed confidence per resolution path, most to least structural."""

    columns: float = 0.84
    balance_delta: float = 0.68
    credit_hint: float = 0.62
    balance_only: float = 0.45

    def for_rule(self, rule: int) -> float:
        if rule in (RULE_BOTH_COLUMNS, RULE_DEPOSIT, RULE_WITHDRAWAL):
            return self.columns
        if rule == RULE_BALANCE_DELTA:
            return self.balance_delta
        if rule == RULE_CREDIT_HINT:
            return self.credit_hint
        return self.balance_only


@dataclass(frozen=True, slots=True)
class Resolution:
    amount: Decimal
    rule: int
    confidence: float


def has_credit_hint(description: str) -> bool:
    return bool(CREDIT_HINT_RE.search(description or ""))


def signed_balance(row: ParsedRow) -> Decimal | None:
    """Return the row balance with DR balances stored as negative."""

    if row.balance is None:
        return None
    if row.balance_type == "DR":
        return -abs(row.balance)
    return abs(row.balance)


class SignResolver:
    """Resolve one signed amount per row while carrying the running balance.

    A resolver instance belongs to exactly one sequential pass over one
    document; rows must be fed in source order.
    """

    def __init__(self, tiers: ConfidenceTiers | None = None) -> None:
        self.tiers = tiers or ConfidenceTiers()
        self.previous_balance: Decimal | None = None

    def resolve(self, row: ParsedRow) -> Resolution | None:
        resolution = self._apply_rules(row)
        balance = signed_balance(row)
        if balance is not None:
            self.previous_balance = balance
        return resolution

    def _apply_rules(self, row: ParsedRow) -> Resolution | None:
        deposit = row.deposit if row.deposit is not None and row.deposit > 0 else None
        withdrawal = row.withdrawal if row.withdrawal is not None and row.withdrawal > 0 else None

        if deposit is not None and withdrawal is not None:
            return self._resolution(deposit - withdrawal, RULE_BOTH_COLUMNS)
        if deposit is not None:
            return self._resolution(deposit, RULE_DEPOSIT)
        if withdrawal is not None:
            return self._resolution(-withdrawal, RULE_WITHDRAWAL)

        balance = signed_balance(row)
        if balance is not None and self.previous_balance is not None:
            return self._resolution(balance - self.previous_balance, RULE_BALANCE_DELTA)
        if row.txn_amount is not None:
            magnitude = abs(row.txn_amount)
            amount = magnitude if has_credit_hint(row.description) else -magnitude
            return self._resolution(amount, RULE_CREDIT_HINT)
        if row.balance is not None:
            magnitude = abs(row.balance)
            marker = row.balance_type or row.marker
            amount = -magnitude if marker == "DR" else magnitude
            return self._resolution(amount, RULE_BALANCE_ONLY)
        return None

    def _resolution(self, amount: Decimal, rule: int) -> Resolution:
        return Resolution(amount=amount, rule=rule, confidence=self.tiers.for_rule(rule))


def resolve_rows(
    rows: Iterable[ParsedRow],
    *,
    parser_id: str,
    currency: str,
    tiers: ConfidenceTiers | None = None,
) -> list[Transaction]:
    """Fold rows in order into signed transactions.

    Opening-balance rows seed the running balance and are then dropped; rows
    no rule can resolve are dropped rather than given a made-up amount.
    """

    resolver = SignResolver(tiers)
    transactions: list[Transaction] = []
    for row in rows:
        resolution = resolver.resolve(row)
        if row.is_opening_balance or resolution is None:
            continue
        transactions.append(
            Transaction.create(
                date=row.date,
                ordinal=len(transactions) + 1,
                description=row.description,
                amount=resolution.amount,
                currency=currency,
                category=infer_category(row.description),
                confidence=resolution.confidence,
                source_parser=parser_id,
            )
        )
    return transactions
