"""Project-wide custom exceptions."""

from __future__ import annotations


class StatementError(Exception):
    """Base exception for the statement toolkit."""


class ConfigurationError(StatementError):
    """Raised when configuration loading or validation fails."""


class ParseError(StatementError):
    """Raised when statement text cannot be read or tokenized."""


class UnsupportedFormatError(ParseError):
    """Raised when a parser strategy name is unknown to the registry."""
