"""Exchange rate services backed by third-party HTTP APIs."""

from .errors import ConfigurationError, ExchangerError, ResponseDecodeError
from .models import (
    CurrencyPair,
    ExchangeRate,
    ExchangeRateQuery,
    HistoricalExchangeRateQuery,
    RateQuery,
)
from .providers import CurrencyConverter, CurrencyConverterOptions, ProviderError

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "ExchangerError",
    "ResponseDecodeError",
    "CurrencyPair",
    "ExchangeRate",
    "ExchangeRateQuery",
    "HistoricalExchangeRateQuery",
    "RateQuery",
    "CurrencyConverter",
    "CurrencyConverterOptions",
    "ProviderError",
]
