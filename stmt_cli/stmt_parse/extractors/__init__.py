"""Parser registration and selection."""

from __future__ import annotations

from collections.abc import Sequence

from ..types import ParserRunResult
from .base import NO_PARSER, ParserRegistry, StatementParser, quality_score
from .generic import GenericStatementParser
from .icici import IciciStatementParser

# Bank-specific parsers first; the generic fallback is always last.
REGISTRY = ParserRegistry([IciciStatementParser, GenericStatementParser])

FALLBACK_PARSER = GenericStatementParser.name

FRIENDLY_NAMES: dict[str, str] = {
    "icici-v1": "ICICI Bank",
    "generic-v1": "Generic statement",
}

__all__ = (
    "FALLBACK_PARSER",
    "FRIENDLY_NAMES",
    "NO_PARSER",
    "REGISTRY",
    "ParserRegistry",
    "StatementParser",
    "quality_score",
    "run_parsers",
)


def run_parsers(
    text: str,
    *,
    currency: str = "INR",
    enabled_parsers: Sequence[str] | None = None,
    registry: ParserRegistry | None = None,
) -> ParserRunResult:
    """Run the registered parsers over ``text`` and return the winning run.

    ``enabled_parsers`` restricts the bank-specific parsers; the generic
    fallback always participates.
    """

    registry = registry or REGISTRY
    allowed: list[str] | None = None
    if enabled_parsers is not None:
        allowed = [name.lower() for name in enabled_parsers]
        if FALLBACK_PARSER in registry.names() and FALLBACK_PARSER not in allowed:
            allowed.append(FALLBACK_PARSER)
    return registry.select(text, currency=currency, allowed_names=allowed)
