"""Bank statement text parsing and insights toolkit."""

__version__ = "0.1.0"
