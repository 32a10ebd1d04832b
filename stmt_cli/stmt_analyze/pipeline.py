"""Single-pass analysis pipeline producing the output envelope."""

from __future__ import annotations

import logging
from typing import Any

from stmt_cli.shared.config import AppConfig, default_config
from stmt_cli.stmt_parse.extractors import FRIENDLY_NAMES, NO_PARSER, ParserRegistry, run_parsers
from stmt_cli.stmt_parse.types import ParserRunResult, StatementInput

from .insights import build_insights
from .types import AnalysisReport

_LOGGER = logging.getLogger(__name__)


def analyze_statement(
    statement: StatementInput | str,
    *,
    config: AppConfig | None = None,
    registry: ParserRegistry | None = None,
) -> AnalysisReport:
    """Parse statement text and derive insights in one synchronous pass.

    Recognition failures are not errors: they produce an empty ledger,
    insights over the empty set, and an explanatory ``note`` in ``meta``.
    """

    if isinstance(statement, str):
        statement = StatementInput(text=statement)
    config = config or default_config()

    result = run_parsers(
        statement.text,
        currency=config.parsing.currency,
        enabled_parsers=config.parsing.enabled_parsers,
        registry=registry,
    )
    _LOGGER.debug(
        "Selected parser %s (score=%.3f, transactions=%d)",
        result.parser_id,
        result.score,
        len(result.transactions),
    )

    transactions = result.transactions
    return AnalysisReport(
        transactions=transactions,
        insights=build_insights(transactions),
        meta=_build_meta(statement, result),
    )


def _build_meta(statement: StatementInput, result: ParserRunResult) -> dict[str, Any]:
    meta: dict[str, Any] = dict(statement.extra)
    if statement.page_count is not None:
        meta["pageCount"] = statement.page_count
    if statement.looks_scanned is not None:
        meta["looksScanned"] = statement.looks_scanned
    meta["extractedTextChars"] = len(statement.text)
    meta["parserId"] = result.parser_id
    meta["parserScore"] = round(result.score, 4)
    meta["note"] = _note(statement, result)
    return meta


def _note(statement: StatementInput, result: ParserRunResult) -> str:
    count = len(result.transactions)
    if count:
        label = FRIENDLY_NAMES.get(result.parser_id, result.parser_id)
        return f"Parsed {count} transactions using parser {result.parser_id} ({label})."
    if statement.looks_scanned:
        return "Scanned or image-based statement detected; no transaction rows were matched in the text."
    if result.parser_id == NO_PARSER:
        return "No parser recognized the statement text."
    return "No transaction rows were matched. Statement format rules need tuning."
