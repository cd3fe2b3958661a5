"""Abstract interface for exchange rate services."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from exchanger.errors import ExchangerError
from exchanger.models import CurrencyPair, ExchangeRate, RateQuery


class ProviderError(ExchangerError):
    """Raised when an upstream provider cannot fulfill a request."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        payload: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, payload=payload)
        self.status_code = status_code


class UnsupportedCurrencyPairError(ProviderError):
    """Raised when a provider has no rate for the requested pair."""

    def __init__(self, currency_pair: CurrencyPair, provider_name: str) -> None:
        super().__init__(
            f"The currency pair '{currency_pair}' is not supported by the service '{provider_name}'."
        )
        self.currency_pair = currency_pair
        self.provider_name = provider_name


class UnsupportedQueryError(ExchangerError):
    """Raised when a service is handed a query kind it does not handle."""


class BaseRateService(ABC):
    """Defines the interface all exchange rate services must implement."""

    name: str

    @abstractmethod
    def get_exchange_rate(self, query: RateQuery) -> ExchangeRate:
        """Fetch the rate answering ``query``."""

    @abstractmethod
    def supports_query(self, query: object) -> bool:
        """Return whether the service can answer ``query``."""

    def get_name(self) -> str:
        return self.name
