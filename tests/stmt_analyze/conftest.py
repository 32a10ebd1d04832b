"""Shared pytest fixtures for stmt-analyze tests."""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from pathlib import Path

import pytest

from stmt_cli.shared import paths
from stmt_cli.shared.config import AppConfig, load_config
from stmt_cli.stmt_parse.categorize import infer_category
from stmt_cli.stmt_parse.types import Transaction

TransactionFactory = Callable[..., Transaction]


@pytest.fixture()
def app_config(tmp_path: Path) -> AppConfig:
    """Return an AppConfig isolated from the user's config directory and env."""

    return load_config(env={paths.CONFIG_DIR_ENV: str(tmp_path)})


@pytest.fixture()
def make_transaction() -> TransactionFactory:
    """Build transactions with sequential ordinals for analyzer tests."""

    counter = {"ordinal": 0}

    def factory(date: str, amount: str, description: str = "MISC", **overrides: object) -> Transaction:
        counter["ordinal"] += 1
        fields: dict[str, object] = {
            "date": date,
            "ordinal": counter["ordinal"],
            "description": description,
            "amount": Decimal(amount),
            "currency": "INR",
            "category": infer_category(description),
            "confidence": 0.84,
            "source_parser": "generic-v1",
        }
        fields.update(overrides)
        return Transaction.create(**fields)  # type: ignore[arg-type]

    return factory
