"""Configuration loading utilities for the statement toolkit."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from . import paths
from .exceptions import ConfigurationError

OUTPUT_FORMATS = ("text", "json", "csv")

_CURRENCY_RE = re.compile(r"^[A-Z]{3}$")


@dataclass(frozen=True, slots=True)
class ParsingSettings:
    """Statement parsing configuration."""

    currency: str
    enabled_parsers: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class OutputSettings:
    """Rendering defaults for the CLI."""

    format: str


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Top-level application configuration."""

    source_path: Path
    parsing: ParsingSettings
    output: OutputSettings

    def with_output_format(self, output_format: str) -> AppConfig:
        """Return a copy with a different default output format."""
        return replace(self, output=replace(self.output, format=output_format))


def _default_config() -> dict[str, Any]:
    return {
        "parsing": {
            "currency": "INR",
            "enabled_parsers": ["icici-v1"],
        },
        "output": {
            "format": "text",
        },
    }


ENV_OVERRIDE_SPEC: dict[str, tuple[str, type]] = {
    "parsing.currency": ("STMTCLI_CURRENCY", str),
    "parsing.enabled_parsers": ("STMTCLI_ENABLED_PARSERS", list),
    "output.format": ("STMTCLI_OUTPUT_FORMAT", str),
}


def load_config(
    config_path: str | Path | None = None,
    env: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load configuration from defaults, YAML file, and env overrides."""
    env = dict(env if env is not None else os.environ)
    resolved_config_path = _resolve_config_path(config_path, env)
    file_data = _load_yaml(resolved_config_path)
    merged: dict[str, Any] = _deep_merge(_default_config(), file_data)
    merged = _apply_env_overrides(merged, env)
    return _build_config(merged, resolved_config_path)


def default_config() -> AppConfig:
    """Return the built-in configuration without consulting disk or env."""
    return _build_config(_default_config(), paths.resolve_path(paths.DEFAULT_CONFIG_DIR))


def _resolve_config_path(
    config_path: str | Path | None, env: Mapping[str, str]
) -> Path:
    if config_path:
        return paths.resolve_path(config_path)
    return paths.default_config_path(env=env)


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Config file at {path} is not valid YAML: {exc}") from exc
        if not isinstance(data, MutableMapping):
            raise ConfigurationError(f"Config file at {path} must define a mapping root object.")
        return dict(data)


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _apply_env_overrides(config: dict[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    config_copy = _deep_merge(config, {})
    for dotted_key, (env_key, expected_type) in ENV_OVERRIDE_SPEC.items():
        if env_key not in env:
            continue
        raw_value = env[env_key]
        try:
            value = _coerce_env_value(raw_value, expected_type)
        except ValueError as exc:
            raise ConfigurationError(
                f"Environment override {env_key} has invalid value '{raw_value}': {exc}"
            ) from exc
        _assign_nested(config_copy, dotted_key.split("."), value)
    return config_copy


def _coerce_env_value(raw: str, expected_type: type) -> Any:
    cleaned = raw.strip()
    if expected_type is list:
        if not cleaned:
            return []
        return tuple(part.strip() for part in cleaned.split(",") if part.strip())
    return cleaned


def _assign_nested(target: MutableMapping[str, Any], keys: list[str], value: Any) -> None:
    current = target
    for key in keys[:-1]:
        if key not in current or not isinstance(current[key], MutableMapping):
            current[key] = {}
        current = current[key]  # type: ignore[assignment]
    current[keys[-1]] = value


def _build_config(data: Mapping[str, Any], source_path: Path) -> AppConfig:
    try:
        parsing_cfg = data["parsing"]
        currency = str(parsing_cfg["currency"]).strip().upper()
        enabled = parsing_cfg["enabled_parsers"] or ()
        if isinstance(enabled, str):
            raise ValueError("parsing.enabled_parsers must be a list")
        parsing = ParsingSettings(
            currency=currency,
            enabled_parsers=tuple(str(name).strip().lower() for name in enabled),
        )
        output = OutputSettings(format=str(data["output"]["format"]).strip().lower())
    except (KeyError, TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid configuration structure: {exc}") from exc

    if not _CURRENCY_RE.match(parsing.currency):
        raise ConfigurationError(
            f"parsing.currency must be a three-letter ISO code, got '{parsing.currency}'."
        )
    if output.format not in OUTPUT_FORMATS:
        raise ConfigurationError(
            f"output.format must be one of {', '.join(OUTPUT_FORMATS)}, got '{output.format}'."
        )

    return AppConfig(source_path=source_path, parsing=parsing, output=output)
