"""Service interfaces and implementations for exchange rate sources."""

from .base import BaseRateService, ProviderError, UnsupportedCurrencyPairError, UnsupportedQueryError
from .currency_converter import CurrencyConverter, CurrencyConverterOptions
from .http_client import HTTPClient, HTTPClientConfig, HttpResponse, HttpTransport
from .schemas import ConversionErrorPayload, ConversionPayload, parse_conversion_payload

__all__ = [
    "BaseRateService",
    "ProviderError",
    "UnsupportedCurrencyPairError",
    "UnsupportedQueryError",
    "CurrencyConverter",
    "CurrencyConverterOptions",
    "HTTPClient",
    "HTTPClientConfig",
    "HttpResponse",
    "HttpTransport",
    "ConversionErrorPayload",
    "ConversionPayload",
    "parse_conversion_payload",
]
