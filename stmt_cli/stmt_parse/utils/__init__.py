"""Shared token grammars for statement parsers."""

from __future__ import annotations

from .amounts import AMOUNT_TOKEN_RE, RowFields, extract_fields, parse_amount_token
from .dates import DATE_TOKEN, is_date_token, to_iso

__all__ = [
    "AMOUNT_TOKEN_RE",
    "DATE_TOKEN",
    "RowFields",
    "extract_fields",
    "is_date_token",
    "parse_amount_token",
    "to_iso",
]
