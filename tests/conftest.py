"""Shared pytest fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from exchanger.models import CurrencyPair  # noqa: E402


@pytest.fixture()
def usd_eur() -> CurrencyPair:
    """A fresh USD/EUR pair; identity checks rely on it not being shared."""

    return CurrencyPair.from_string("USD/EUR")
