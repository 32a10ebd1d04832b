"""Dataclasses describing parsed statement data."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Literal

DrCr = Literal["CR", "DR"]


@dataclass(slots=True)
class ParsedRow:
    """One logical statement row while it is being accumulated.

    Amount fields hold non-negative magnitudes; ``balance_type`` is the sign
    hint for the running balance, not for the transaction itself. ``marker``
    is any standalone DR/CR word seen on the row.
    """

    date: str
    description: str = ""
    value_date: str | None = None
    withdrawal: Decimal | None = None
    deposit: Decimal | None = None
    txn_amount: Decimal | None = None
    balance: Decimal | None = None
    balance_type: DrCr | None = None
    marker: DrCr | None = None

    @property
    def is_opening_balance(self) -> bool:
        return "opening balance" in self.description.lower()


@dataclass(frozen=True, slots=True)
class Transaction:
    """Normalized, signed ledger entry produced by the winning parser."""

    id: str
    date: str
    description: str
    amount: Decimal
    dr_cr: DrCr
    currency: str
    category: str
    confidence: float
    source_parser: str

    def __post_init__(self) -> None:
        expected = direction_of(self.amount)
        if self.dr_cr != expected:
            raise ValueError(
                f"Transaction {self.id} has dr_cr={self.dr_cr} but amount {self.amount} implies {expected}"
            )
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Transaction {self.id} confidence {self.confidence} outside [0, 1]")

    @classmethod
    def create(
        cls,
        *,
        date: str,
        ordinal: int,
        description: str,
        amount: Decimal,
        currency: str,
        category: str,
        confidence: float,
        source_parser: str,
    ) -> Transaction:
        """Build a transaction whose id and direction derive from its inputs."""

        return cls(
            id=transaction_id(date, source_parser, ordinal),
            date=date,
            description=description,
            amount=amount,
            dr_cr=direction_of(amount),
            currency=currency,
            category=category,
            confidence=confidence,
            source_parser=source_parser,
        )

    @property
    def is_debit(self) -> bool:
        return self.dr_cr == "DR"

    @property
    def magnitude(self) -> Decimal:
        return abs(self.amount)

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "date": self.date,
            "description": self.description,
            "amount": float(self.amount),
            "drCr": self.dr_cr,
            "currency": self.currency,
            "category": self.category,
            "confidence": self.confidence,
            "sourceParser": self.source_parser,
        }


@dataclass(frozen=True, slots=True)
class ParserRunResult:
    """Outcome of running one parser strategy over a document."""

    parser_id: str
    score: float
    transactions: tuple[Transaction, ...] = ()
    hint: float = 0.0
    error: str | None = None


@dataclass(frozen=True, slots=True)
class StatementInput:
    """Extracted statement text plus metadata from the acquisition layer."""

    text: str
    page_count: int | None = None
    looks_scanned: bool | None = None
    extra: dict[str, object] = field(default_factory=dict)


def direction_of(amount: Decimal) -> DrCr:
    """Return CR for non-negative amounts and DR otherwise."""

    return "CR" if amount >= 0 else "DR"


def transaction_id(date: str, parser_id: str, ordinal: int) -> str:
    return f"{date}-{parser_id}-{ordinal}"
