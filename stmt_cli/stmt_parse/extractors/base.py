"""Base classes and the scoring registry for statement parsers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from stmt_cli.shared.exceptions import UnsupportedFormatError

from ..types import ParserRunResult, Transaction

_LOGGER = logging.getLogger(__name__)

NO_PARSER = "none"


class StatementParser(ABC):
    """Abstract base for bank-specific and generic parsing strategies."""

    name: str = "generic"

    def __init__(self, currency: str = "INR") -> None:
        self.currency = currency

    @abstractmethod
    def can_parse(self, text: str) -> float:
        """Return a 0-1 hint of how likely this parser understands the text."""

    @abstractmethod
    def parse(self, text: str) -> list[Transaction]:
        """Extract transactions from the statement text."""


def quality_score(transactions: Sequence[Transaction], hint: float) -> float:
    """Score a parser run by output size, confidence, and format recognition."""

    if not transactions:
        return hint * 5
    average_confidence = sum(txn.confidence for txn in transactions) / len(transactions)
    return len(transactions) * (0.55 + average_confidence * 0.45) + hint * 25


class ParserRegistry:
    """Ordered collection of parser types; order breaks score ties."""

    def __init__(self, parsers: Iterable[type[StatementParser]] = ()) -> None:
        self._parsers: list[type[StatementParser]] = []
        for parser in parsers:
            self.register(parser)

    def register(self, parser: type[StatementParser]) -> None:
        key = parser.name.lower()
        if key in self.names():
            raise ValueError(f"Parser '{parser.name}' is already registered")
        self._parsers.append(parser)

    def names(self) -> tuple[str, ...]:
        return tuple(parser.name.lower() for parser in self._parsers)

    def iter_types(self, allowed_names: Sequence[str] | None = None) -> Iterable[type[StatementParser]]:
        if allowed_names is None:
            yield from self._parsers
            return
        allowed = {name.lower() for name in allowed_names}
        unknown = allowed - set(self.names())
        if unknown:
            raise UnsupportedFormatError(
                f"Unknown parser(s): {', '.join(sorted(unknown))}. "
                f"Registered parsers: {', '.join(self.names())}"
            )
        for parser in self._parsers:
            if parser.name.lower() in allowed:
                yield parser

    def evaluate(
        self,
        text: str,
        *,
        currency: str = "INR",
        allowed_names: Sequence[str] | None = None,
    ) -> list[ParserRunResult]:
        """Run every participating parser and return one result per parser.

        Each run gets a fresh parser instance. A parser that raises is logged
        and recorded with a zero score instead of aborting the others.
        """

        results: list[ParserRunResult] = []
        for parser_cls in self.iter_types(allowed_names):
            parser = parser_cls(currency=currency)
            try:
                hint = float(parser.can_parse(text))
                if hint <= 0:
                    _LOGGER.debug("Parser %s declined the document", parser.name)
                    continue
                transactions = tuple(parser.parse(text))
            except Exception as exc:
                _LOGGER.warning("Parser %s failed: %s", parser.name, exc, exc_info=True)
                results.append(ParserRunResult(parser_id=parser.name, score=0.0, error=str(exc)))
                continue
            score = quality_score(transactions, hint)
            _LOGGER.debug(
                "Parser %s hint=%.2f transactions=%d score=%.3f",
                parser.name,
                hint,
                len(transactions),
                score,
            )
            results.append(
                ParserRunResult(
                    parser_id=parser.name,
                    score=score,
                    transactions=transactions,
                    hint=hint,
                )
            )
        return results

    def select(
        self,
        text: str,
        *,
        currency: str = "INR",
        allowed_names: Sequence[str] | None = None,
    ) -> ParserRunResult:
        """Return the best-scoring run; the earliest registered wins ties."""

        best = ParserRunResult(parser_id=NO_PARSER, score=0.0)
        for result in self.evaluate(text, currency=currency, allowed_names=allowed_names):
            if result.error is None and result.score > best.score:
                best = result
        return best
