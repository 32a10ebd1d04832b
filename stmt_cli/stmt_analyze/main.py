"""stmt-analyze CLI entrypoint."""

from __future__ import annotations

import click

from stmt_cli.shared.cli import CLIContext, common_cli_options, handle_cli_errors
from stmt_cli.shared.exceptions import ParseError
from stmt_cli.stmt_parse.types import StatementInput

from . import render as result_render
from .pipeline import analyze_statement


@click.command(help="Parse extracted bank statement text and report insights.")
@click.argument("text_file", type=click.Path(allow_dash=True, dir_okay=False, path_type=str), default="-")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "csv"]),
    help="Output format (default: from config or 'text').",
)
@click.option("--page-count", type=int, help="Page count reported by the text extraction step.")
@click.option("--scanned", is_flag=True, help="Mark the source as a scanned/OCR document.")
@common_cli_options
@handle_cli_errors
def main(
    text_file: str,
    output_format: str | None,
    page_count: int | None,
    scanned: bool,
    cli_ctx: CLIContext,
) -> None:
    """Read statement text, run the parser pipeline, and render the report."""

    try:
        with click.open_file(text_file, "r", encoding="utf-8") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ParseError(f"Unable to read statement text from {text_file}: {exc}") from exc

    cli_ctx.logger.debug(f"Read {len(text)} characters from {text_file}")
    statement = StatementInput(text=text, page_count=page_count, looks_scanned=scanned or None)
    report = analyze_statement(statement, config=cli_ctx.config)

    note = str(report.meta.get("note", ""))
    if report.transactions:
        cli_ctx.logger.info(note)
    else:
        cli_ctx.logger.warning(note)

    result_render.render_report(
        report,
        output_format=output_format or cli_ctx.config.output.format,
        logger=cli_ctx.logger,
    )


if __name__ == "__main__":  # pragma: no cover
    main()
