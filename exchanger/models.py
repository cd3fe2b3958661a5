"""Dataclasses describing exchange rate queries and results."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date as date_type
from typing import TypeAlias

from exchanger.utils.datetime import utc_date

PAIR_SEPARATOR = "/"


def _normalize_code(code: str) -> str:
    normalized = str(code).strip().upper()
    if not normalized:
        raise ValueError("Currency code cannot be empty.")
    if not normalized.isascii():
        raise ValueError(f"Currency code must be ASCII: {code!r}")
    return normalized


@dataclass(frozen=True)
class CurrencyPair:
    """Ordered base/quote pair of ISO currency codes."""

    base_currency: str
    quote_currency: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_currency", _normalize_code(self.base_currency))
        object.__setattr__(self, "quote_currency", _normalize_code(self.quote_currency))

    @classmethod
    def from_string(cls, value: str) -> CurrencyPair:
        """Build a pair from its ``BASE/QUOTE`` representation."""

        parts = str(value).split(PAIR_SEPARATOR)
        if len(parts) != 2:
            raise ValueError(
                f"Currency pair must be in the form 'BASE{PAIR_SEPARATOR}QUOTE', got {value!r}"
            )
        return cls(parts[0], parts[1])

    @property
    def key(self) -> str:
        return f"{self.base_currency}_{self.quote_currency}"

    def is_identical(self) -> bool:
        return self.base_currency == self.quote_currency

    def __str__(self) -> str:
        return f"{self.base_currency}{PAIR_SEPARATOR}{self.quote_currency}"


@dataclass(frozen=True)
class ExchangeRateQuery:
    """Request for the current rate of a currency pair."""

    currency_pair: CurrencyPair


@dataclass(frozen=True)
class HistoricalExchangeRateQuery:
    """Request for the rate of a currency pair as of a calendar date (UTC)."""

    currency_pair: CurrencyPair
    date: date_type

    def __post_init__(self) -> None:
        if not isinstance(self.date, date_type):
            raise TypeError("date must be a date or datetime instance")
        object.__setattr__(self, "date", utc_date(self.date))


RateQuery: TypeAlias = ExchangeRateQuery | HistoricalExchangeRateQuery


@dataclass(frozen=True)
class ExchangeRate:
    """Normalized rate returned by an exchange rate service."""

    value: float
    currency_pair: CurrencyPair
    provider_name: str
    date: date_type

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))
        if not self.provider_name or not self.provider_name.strip():
            raise ValueError("provider_name must be provided for ExchangeRate")
