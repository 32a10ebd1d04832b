from __future__ import annotations

from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from stmt_cli.shared.cli import CLIContext, common_cli_options, handle_cli_errors
from stmt_cli.shared.exceptions import ConfigurationError, ParseError


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_common_cli_options_loads_config(runner: CliRunner, tmp_path: Path) -> None:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("parsing:\n  currency: GBP\n", encoding="utf-8")

    @click.command()
    @common_cli_options
    def sample(cli_ctx: CLIContext) -> None:
        click.echo(f"currency={cli_ctx.config.parsing.currency} verbose={cli_ctx.verbose}")

    result = runner.invoke(sample, ["--config", str(cfg_file), "--verbose"])

    assert result.exit_code == 0, result.output
    assert "currency=GBP verbose=True" in result.output


def test_common_cli_options_reports_bad_config(runner: CliRunner, tmp_path: Path) -> None:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("- nope", encoding="utf-8")

    @click.command()
    @common_cli_options
    def sample(cli_ctx: CLIContext) -> None:  # pragma: no cover - never reached
        click.echo("unreachable")

    result = runner.invoke(sample, ["--config", str(cfg_file)])

    assert result.exit_code != 0
    assert "mapping root object" in result.output


@pytest.mark.parametrize(
    "exc, expected",
    [
        (ConfigurationError("bad value"), "Configuration error: bad value"),
        (ParseError("cannot read"), "cannot read"),
        (RuntimeError("boom"), "Unexpected error: boom"),
    ],
)
def test_handle_cli_errors_wraps_exceptions(runner: CliRunner, exc: Exception, expected: str) -> None:
    @click.command()
    @handle_cli_errors
    def failing() -> None:
        raise exc

    result = runner.invoke(failing, [])

    assert result.exit_code == 1
    assert expected in result.output
