from __future__ import annotations

from pathlib import Path

import pytest

from stmt_cli.shared import paths
from stmt_cli.shared.config import AppConfig, default_config, load_config
from stmt_cli.shared.exceptions import ConfigurationError


def test_load_config_defaults(tmp_path: Path) -> None:
    cfg = load_config(env={paths.CONFIG_DIR_ENV: str(tmp_path / "config")})
    assert isinstance(cfg, AppConfig)
    assert cfg.source_path == tmp_path / "config" / paths.DEFAULT_CONFIG_FILE
    assert cfg.parsing.currency == "INR"
    assert cfg.parsing.enabled_parsers == ("icici-v1",)
    assert cfg.output.format == "text"


def test_default_config_matches_file_defaults(tmp_path: Path) -> None:
    loaded = load_config(env={paths.CONFIG_DIR_ENV: str(tmp_path)})
    builtin = default_config()
    assert builtin.parsing == loaded.parsing
    assert builtin.output == loaded.output


def test_load_config_from_yaml(tmp_path: Path) -> None:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(
        """
        parsing:
          currency: usd
          enabled_parsers: []
        output:
          format: JSON
        """,
        encoding="utf-8",
    )
    cfg = load_config(config_path=cfg_file, env={})
    assert cfg.source_path == cfg_file
    assert cfg.parsing.currency == "USD"
    assert cfg.parsing.enabled_parsers == ()
    assert cfg.output.format == "json"


def test_partial_yaml_keeps_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("output:\n  format: csv\n", encoding="utf-8")
    cfg = load_config(config_path=cfg_file, env={})
    assert cfg.output.format == "csv"
    assert cfg.parsing.currency == "INR"


def test_load_config_env_overrides(tmp_path: Path) -> None:
    env = {
        paths.CONFIG_DIR_ENV: str(tmp_path),
        "STMTCLI_CURRENCY": "eur",
        "STMTCLI_ENABLED_PARSERS": "ICICI-v1, generic-v1",
        "STMTCLI_OUTPUT_FORMAT": "csv",
    }
    cfg = load_config(env=env)
    assert cfg.parsing.currency == "EUR"
    assert cfg.parsing.enabled_parsers == ("icici-v1", "generic-v1")
    assert cfg.output.format == "csv"


def test_empty_parser_override_disables_bank_parsers(tmp_path: Path) -> None:
    env = {paths.CONFIG_DIR_ENV: str(tmp_path), "STMTCLI_ENABLED_PARSERS": ""}
    cfg = load_config(env=env)
    assert cfg.parsing.enabled_parsers == ()


def test_with_output_format_returns_copy(tmp_path: Path) -> None:
    cfg = load_config(env={paths.CONFIG_DIR_ENV: str(tmp_path)})
    updated = cfg.with_output_format("json")
    assert updated.output.format == "json"
    assert cfg.output.format == "text"


def test_invalid_yaml_raises_configuration_error(tmp_path: Path) -> None:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("- just a list", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(config_path=cfg_file, env={})


def test_unparseable_yaml_raises_configuration_error(tmp_path: Path) -> None:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("parsing: [unclosed", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(config_path=cfg_file, env={})


@pytest.mark.parametrize(
    "env_key, value",
    [
        ("STMTCLI_CURRENCY", "rupees"),
        ("STMTCLI_OUTPUT_FORMAT", "xml"),
    ],
)
def test_invalid_values_rejected(tmp_path: Path, env_key: str, value: str) -> None:
    env = {paths.CONFIG_DIR_ENV: str(tmp_path), env_key: value}
    with pytest.raises(ConfigurationError):
        load_config(env=env)


def test_enabled_parsers_must_be_a_list(tmp_path: Path) -> None:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("parsing:\n  enabled_parsers: icici-v1\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(config_path=cfg_file, env={})
