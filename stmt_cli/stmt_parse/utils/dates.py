"""Date token grammar and ISO conversion."""

from __future__ import annotations

import re

MONTHS: dict[str, int] = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

_MONTH_ALT = "|".join(MONTHS)

# Embedded into larger row patterns, so it carries no anchors or groups.
DATE_TOKEN = (
    r"(?:\d{1,2}[./-]\d{1,2}[./-](?:\d{4}|\d{2})"
    rf"|\d{{1,2}}\s+(?i:{_MONTH_ALT})\s+(?:\d{{4}}|\d{{2}})"
    rf"|\d{{1,2}}-(?i:{_MONTH_ALT})-(?:\d{{4}}|\d{{2}}))"
)

_NUMERIC_RE = re.compile(r"^(\d{1,2})[./-](\d{1,2})[./-](\d{4}|\d{2})$")
_MONTH_NAME_RE = re.compile(r"^(\d{1,2})[\s-]([A-Za-z]{3})[\s-](\d{4}|\d{2})$")
_DATE_TOKEN_RE = re.compile(rf"^{DATE_TOKEN}$")

PIVOT_YEAR = 70


def expand_year(raw: str) -> int:
    """Expand a 2-digit year around the fixed 1970 pivot."""

    year = int(raw)
    if len(raw) == 2:
        return 1900 + year if year >= PIVOT_YEAR else 2000 + year
    return year


def is_date_token(value: str) -> bool:
    return bool(_DATE_TOKEN_RE.match(value.strip()))


def to_iso(token: str) -> str:
    """Convert a statement date token to ``YYYY-MM-DD``.

    Accepts ``DD/MM/YYYY`` style tokens (``.``, ``/`` or ``-`` separators)
    and ``DD Mon YYYY`` / ``DD-Mon-YYYY``; years may have 2 or 4 digits.
    """

    value = token.strip()
    match = _NUMERIC_RE.match(value)
    if match:
        day, month, year = match.groups()
        return f"{expand_year(year):04d}-{int(month):02d}-{int(day):02d}"

    match = _MONTH_NAME_RE.match(value)
    if match:
        day, month_name, year = match.groups()
        month = MONTHS.get(month_name.lower())
        if month is not None:
            return f"{expand_year(year):04d}-{month:02d}-{int(day):02d}"

    raise ValueError(f"Unrecognized date token: {token!r}")
