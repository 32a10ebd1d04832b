from __future__ import annotations

from decimal import Decimal

from stmt_cli.stmt_parse.segmenter import (
    locate_table,
    looks_like_header,
    normalize_lines,
    segment_rows,
    start_row,
)

HEADER = "Date Value Date Particulars Withdrawals Deposits Balance"


def test_normalize_lines_collapses_and_drops_blanks() -> None:
    text = "  Account   Statement \r\n\n\t\nDate\t\tAmount  \n"
    assert normalize_lines(text) == ["Account Statement", "Date Amount"]


def test_normalize_lines_handles_empty_text() -> None:
    assert normalize_lines("") == []


def test_looks_like_header_variants() -> None:
    assert looks_like_header(HEADER)
    assert looks_like_header(
        "S No. Transaction Date Cheque Number Transaction Remarks Withdrawal Amount Deposit Amount Balance"
    )
    assert not looks_like_header("Date Particulars Withdrawals Deposits Balance")
    assert not looks_like_header("Date Value Date Withdrawals Deposits Balance")
    assert not looks_like_header("Date Value Date Particulars Debit Credit Balance")


def test_locate_table_discards_preamble() -> None:
    lines = ["HDFC BANK LTD", "Address line", HEADER, "01/04/2024 OPENING BALANCE 100.00"]
    assert locate_table(lines) == ["01/04/2024 OPENING BALANCE 100.00"]
    assert locate_table(["no header here"]) is None


def test_start_row_with_row_number_and_value_date() -> None:
    row = start_row("12 01/04/2024 02/04/2024 UPI/ZOMATO/4411 250.00 0.00 9,750.00")
    assert row is not None
    assert row.date == "2024-04-01"
    assert row.value_date == "2024-04-02"
    assert row.description == "UPI/ZOMATO/4411"
    assert row.withdrawal == Decimal("250.00")
    assert row.balance == Decimal("9750.00")


def test_start_row_rejects_non_date_lines() -> None:
    assert start_row("UPI REF 1234 FROM ALICE") is None
    assert start_row("Page 2 of 5") is None


def test_no_header_yields_no_rows() -> None:
    text = "01/04/2024 UPI/ZOMATO 250.00 0.00 9,750.00"
    assert segment_rows(text) == []


def test_continuation_lines_fold_into_description() -> None:
    text = "\n".join(
        [
            "Statement of account",
            HEADER,
            "01/04/2024 01/04/2024 UPI/ALICE 500.00 0.00 9,500.00",
            "PAYMENT FOR RENT",
            "REF 4411223344",
            "02/04/2024 02/04/2024 ATM WDL 1,000.00 0.00 8,500.00",
        ]
    )
    rows = segment_rows(text)
    assert [row.description for row in rows] == [
        "UPI/ALICE PAYMENT FOR RENT REF 4411223344",
        "ATM WDL",
    ]
    assert [row.date for row in rows] == ["2024-04-01", "2024-04-02"]


def test_repeated_header_is_not_folded() -> None:
    text = "\n".join(
        [
            HEADER,
            "01/04/2024 NEFT ACME 0.00 900.00 900.00",
            HEADER,
            "02/04/2024 POS DMART 100.00 0.00 800.00",
        ]
    )
    rows = segment_rows(text)
    assert [row.description for row in rows] == ["NEFT ACME", "POS DMART"]


def test_rows_with_empty_description_are_dropped() -> None:
    text = "\n".join([HEADER, "01/04/2024 100.00 0.00 900.00", "02/04/2024 POS DMART 100.00 0.00 800.00"])
    rows = segment_rows(text)
    assert [row.description for row in rows] == ["POS DMART"]


def test_date_only_line_picks_up_continuation_description() -> None:
    text = "\n".join([HEADER, "05 Apr 2024", "CASH DEPOSIT BRANCH"])
    rows = segment_rows(text)
    assert len(rows) == 1
    assert rows[0].date == "2024-04-05"
    assert rows[0].description == "CASH DEPOSIT BRANCH"
    assert rows[0].balance is None


def test_lines_before_first_row_are_ignored() -> None:
    text = "\n".join([HEADER, "Brought forward", "01/04/2024 NEFT ACME 0.00 900.00 900.00"])
    rows = segment_rows(text)
    assert [row.description for row in rows] == ["NEFT ACME"]
