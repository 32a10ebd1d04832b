from __future__ import annotations

import re

import pytest

from stmt_cli.stmt_parse.utils import DATE_TOKEN, is_date_token, to_iso


@pytest.mark.parametrize(
    "token, expected",
    [
        ("01/04/2024", "2024-04-01"),
        ("1.4.2024", "2024-04-01"),
        ("15-08-2023", "2023-08-15"),
        ("05/11/24", "2024-11-05"),
        ("01/01/70", "1970-01-01"),
        ("01/01/69", "2069-01-01"),
        ("31/12/99", "1999-12-31"),
        ("01/01/00", "2000-01-01"),
        ("3 Mar 2024", "2024-03-03"),
        ("03-MAR-24", "2024-03-03"),
        ("12 dec 2023", "2023-12-12"),
        ("7-Sep-71", "1971-09-07"),
    ],
)
def test_to_iso(token: str, expected: str) -> None:
    assert to_iso(token) == expected


def test_to_iso_is_canonical_fixed_point() -> None:
    iso = to_iso("9/7/2022")
    assert iso == "2022-07-09"
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", iso)


@pytest.mark.parametrize("token", ["2024-04-01", "12 Foo 2024", "01/04/202", "Apr 12 2024", ""])
def test_to_iso_rejects_unknown_tokens(token: str) -> None:
    with pytest.raises(ValueError):
        to_iso(token)


@pytest.mark.parametrize(
    "token, valid",
    [
        ("01/04/2024", True),
        ("01-Apr-2024", True),
        ("01 apr 24", True),
        ("01/04/202", False),
        ("01 Abc 2024", False),
        ("01.04", False),
    ],
)
def test_date_token_grammar(token: str, valid: bool) -> None:
    assert is_date_token(token) is valid


def test_date_token_embeds_without_capture_groups() -> None:
    assert re.compile(DATE_TOKEN).groups == 0
