"""Rich-based logging helpers for the stmt-cli tools."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "debug": "dim",
        "logging.level.debug": "dim",
        "logging.level.warning": "yellow",
    }
)

# Log chatter goes to stderr so stdout carries only the rendered report.
# Highlighting stays off: reference numbers like UPI/412345/... must not pick up
# ANSI sequences.
_stderr_console = Console(stderr=True, theme=_THEME, highlight=False)

LIBRARY_LOGGER = "stmt_cli"


@dataclass(slots=True)
class Logger:
    """Lightweight logger facade backed by a Rich console."""

    verbose: bool = False

    def info(self, message: str) -> None:
        _stderr_console.print(message, style="info", markup=False)

    def warning(self, message: str) -> None:
        _stderr_console.print(message, style="warning", markup=False)

    def debug(self, message: str) -> None:
        if self.verbose:
            _stderr_console.print(message, style="debug", markup=False)


def get_logger(verbose: bool = False) -> Logger:
    """Return a configured Logger instance."""
    return Logger(verbose=verbose)


def route_library_logs(verbose: bool = False) -> None:
    """Send ``stmt_cli.*`` log records (parser scoring, failures) to the stderr console.

    Warnings always show; per-parser debug lines only when ``verbose``.
    Calling again replaces the previously installed handler.
    """

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for handler in list(library_logger.handlers):
        if isinstance(handler, RichHandler):
            library_logger.removeHandler(handler)

    handler = RichHandler(
        console=_stderr_console,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    library_logger.addHandler(handler)
    library_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
