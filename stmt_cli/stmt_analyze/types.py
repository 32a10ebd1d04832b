"""Core datatypes for statement insights and rendered analysis results."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Mapping, Sequence

from stmt_cli.stmt_parse.types import Transaction


def _money(value: Decimal | None) -> float | None:
    if value is None:
        return None
    return float(value)


# ----- Insight records ----------------------------------------------------------------------


@dataclass(frozen=True)
class CategoryTotal:
    category: str
    count: int
    total: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {"category": self.category, "count": self.count, "total": _money(self.total)}


@dataclass(frozen=True)
class MonthSummary:
    month: str
    income: Decimal
    expense: Decimal

    @property
    def net(self) -> Decimal:
        return self.income - self.expense

    def to_dict(self) -> dict[str, Any]:
        return {
            "month": self.month,
            "income": _money(self.income),
            "expense": _money(self.expense),
            "net": _money(self.net),
        }


@dataclass(frozen=True)
class SubscriptionCandidate:
    merchant: str
    count: int
    avg_amount: Decimal
    total_amount: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "merchant": self.merchant,
            "count": self.count,
            "avgAmount": _money(self.avg_amount),
            "totalAmount": _money(self.total_amount),
        }


@dataclass(frozen=True)
class UnusualSpend:
    id: str
    date: str
    description: str
    amount: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "description": self.description,
            "amount": _money(self.amount),
        }


@dataclass(frozen=True)
class Highlight:
    """A single notable transaction (largest expense or credit)."""

    description: str
    amount: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {"description": self.description, "amount": _money(self.amount)}


@dataclass(frozen=True)
class Totals:
    transaction_count: int
    total_debits: Decimal
    total_credits: Decimal
    income_expense_ratio: Decimal | None
    avg_debit: Decimal
    avg_credit: Decimal
    top_expense: Highlight | None = None
    top_credit: Highlight | None = None

    @property
    def net_flow(self) -> Decimal:
        return self.total_credits - self.total_debits


@dataclass(frozen=True)
class Insights:
    """Pure projection of a transaction list; recomputed, never updated."""

    totals: Totals
    category_breakdown: tuple[CategoryTotal, ...]
    month_over_month: tuple[MonthSummary, ...]
    subscriptions: tuple[SubscriptionCandidate, ...]
    unusual_spends: tuple[UnusualSpend, ...]

    @property
    def transaction_count(self) -> int:
        return self.totals.transaction_count

    @property
    def total_debits(self) -> Decimal:
        return self.totals.total_debits

    @property
    def total_credits(self) -> Decimal:
        return self.totals.total_credits

    @property
    def net_flow(self) -> Decimal:
        return self.totals.net_flow

    @property
    def income_expense_ratio(self) -> Decimal | None:
        return self.totals.income_expense_ratio

    def to_dict(self) -> dict[str, Any]:
        totals = self.totals
        return {
            "transactionCount": totals.transaction_count,
            "totalDebits": _money(totals.total_debits),
            "totalCredits": _money(totals.total_credits),
            "netFlow": _money(totals.net_flow),
            "incomeExpenseRatio": _money(totals.income_expense_ratio),
            "avgDebit": _money(totals.avg_debit),
            "avgCredit": _money(totals.avg_credit),
            "categoryBreakdown": [entry.to_dict() for entry in self.category_breakdown],
            "monthOverMonth": [entry.to_dict() for entry in self.month_over_month],
            "subscriptions": [entry.to_dict() for entry in self.subscriptions],
            "unusualSpends": [entry.to_dict() for entry in self.unusual_spends],
            "topExpense": totals.top_expense.to_dict() if totals.top_expense else None,
            "topCredit": totals.top_credit.to_dict() if totals.top_credit else None,
        }


# ----- Output envelope ----------------------------------------------------------------------


@dataclass(frozen=True)
class AnalysisReport:
    """Value returned once per analysis call: ledger, insights, and metadata."""

    transactions: tuple[Transaction, ...]
    insights: Insights
    meta: Mapping[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {
            "transactions": [txn.to_dict() for txn in self.transactions],
            "insights": self.insights.to_dict(),
            "meta": dict(self.meta),
        }


# ----- Rendering contracts ------------------------------------------------------------------


@dataclass(frozen=True)
class TableSeries:
    """Represents a tabular dataset emitted for rendering."""

    name: str
    columns: Sequence[str]
    rows: Sequence[Sequence[Any]]
    metadata: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class AnalysisResult:
    """Render-ready view of a report."""

    title: str
    summary: Sequence[str]
    tables: Sequence[TableSeries]
    json_payload: Mapping[str, Any]

    def is_empty(self) -> bool:
        """True when there is no tabular data and no summary content."""

        return not self.summary and not self.tables
