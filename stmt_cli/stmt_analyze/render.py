"""Rendering helpers for statement analysis reports."""

from __future__ import annotations

import csv
import json
import sys
from decimal import Decimal
from typing import IO, Any

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from stmt_cli.shared.logging import Logger

from .types import AnalysisReport, AnalysisResult, TableSeries


def build_result(report: AnalysisReport) -> AnalysisResult:
    """Project a report into the title/summary/tables shape used for output."""

    insights = report.insights
    currency = report.transactions[0].currency if report.transactions else None
    unit = {"unit": currency} if currency else {}

    summary = [str(report.meta.get("note", ""))] if report.meta.get("note") else []
    if insights.transaction_count:
        summary.append(
            f"Debits {_fmt(insights.total_debits)}, credits {_fmt(insights.total_credits)}, "
            f"net flow {_fmt(insights.net_flow)}."
        )
        if insights.income_expense_ratio is not None:
            summary.append(f"Income/expense ratio: {insights.income_expense_ratio:.2f}.")
        if insights.subscriptions:
            summary.append(f"Recurring merchants detected: {len(insights.subscriptions)}.")
        if insights.unusual_spends:
            summary.append(f"Unusual spends flagged: {len(insights.unusual_spends)}.")

    tables = [
        TableSeries(
            name="transactions",
            columns=["Date", "Description", "Amount", "DR/CR", "Category", "Confidence"],
            rows=[
                [txn.date, txn.description, _fmt(txn.amount), txn.dr_cr, txn.category, txn.confidence]
                for txn in report.transactions
            ],
            metadata={**unit, "parser": report.meta.get("parserId")},
        ),
        TableSeries(
            name="categories",
            columns=["Category", "Count", "Total"],
            rows=[[entry.category, entry.count, _fmt(entry.total)] for entry in insights.category_breakdown],
            metadata=unit,
        ),
        TableSeries(
            name="months",
            columns=["Month", "Income", "Expense", "Net"],
            rows=[
                [entry.month, _fmt(entry.income), _fmt(entry.expense), _fmt(entry.net)]
                for entry in insights.month_over_month
            ],
            metadata=unit,
        ),
    ]
    if insights.subscriptions:
        tables.append(
            TableSeries(
                name="subscriptions",
                columns=["Merchant", "Count", "Average", "Total"],
                rows=[
                    [entry.merchant, entry.count, _fmt(entry.avg_amount), _fmt(entry.total_amount)]
                    for entry in insights.subscriptions
                ],
                metadata=unit,
            )
        )
    if insights.unusual_spends:
        tables.append(
            TableSeries(
                name="unusual_spends",
                columns=["Date", "Description", "Amount"],
                rows=[
                    [entry.date, entry.description, _fmt(entry.amount)]
                    for entry in insights.unusual_spends
                ],
                metadata=unit,
            )
        )

    return AnalysisResult(
        title="Statement Insights",
        summary=summary,
        tables=tables,
        json_payload=report.to_dict(),
    )


def render_report(
    report: AnalysisReport,
    *,
    output_format: str,
    logger: Logger,
    stream: IO[str] | None = None,
) -> None:
    render_result(build_result(report), output_format=output_format, logger=logger, stream=stream)


def render_result(
    result: AnalysisResult,
    *,
    output_format: str,
    logger: Logger,
    stream: IO[str] | None = None,
) -> None:
    stream = stream or sys.stdout
    fmt = (output_format or "text").lower()
    if fmt == "json":
        _render_json(result, stream=stream)
        return
    if fmt == "csv":
        _render_csv(result, stream=stream)
        return
    if fmt == "text":
        _render_text(result, logger=logger, stream=stream)
        return
    raise ValueError(f"Unsupported output format '{output_format}'.")


def _render_text(result: AnalysisResult, *, logger: Logger, stream: IO[str]) -> None:
    console = Console(file=stream, highlight=False, force_terminal=False)
    console.print(f"[bold]{result.title}[/bold]")
    for line in result.summary:
        console.print(f"• {line}", markup=False)
    populated = [table for table in result.tables if table.rows]
    for table_series in populated:
        console.print(_build_rich_table(table_series))
    if not populated and not result.summary:
        logger.info("Analysis returned no data to display.")


def _render_json(result: AnalysisResult, *, stream: IO[str]) -> None:
    payload = {
        "title": result.title,
        "summary": list(result.summary),
        "tables": [
            {
                "name": table.name,
                "columns": list(table.columns),
                "rows": [list(row) for row in table.rows],
                "metadata": dict(table.metadata),
            }
            for table in result.tables
        ],
        "payload": dict(result.json_payload),
    }
    json.dump(payload, stream, indent=2, sort_keys=True, default=_json_default)
    stream.write("\n")


def _render_csv(result: AnalysisResult, *, stream: IO[str]) -> None:
    """Emit a CSV representation that stays script-friendly."""

    writer = csv.writer(stream)
    writer.writerow(["title", result.title])

    for line in result.summary:
        writer.writerow(["summary", line])

    if result.tables:
        writer.writerow([])

    for index, table in enumerate(result.tables):
        if index > 0:
            writer.writerow([])

        writer.writerow(["table", table.name])

        for key, value in sorted(table.metadata.items()):
            writer.writerow(["metadata", key, json.dumps(value, sort_keys=True, default=str)])

        writer.writerow(list(table.columns))
        for row in table.rows:
            writer.writerow(["" if cell is None else cell for cell in row])


def _build_rich_table(table_series: TableSeries) -> Table:
    rich_table = Table(
        title=table_series.name,
        box=box.SIMPLE,
        show_header=True,
        header_style="bold",
    )
    for column in table_series.columns:
        rich_table.add_column(column or "")
    for row in table_series.rows:
        rich_table.add_row(*[Text("" if cell is None else str(cell)) for cell in row])
    return rich_table


def _fmt(value: Decimal) -> str:
    return f"{value:,.2f}"


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    return str(value)
