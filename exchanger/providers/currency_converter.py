"""currencyconverterapi.com service implementation."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

from exchanger.config import to_bool
from exchanger.errors import ConfigurationError, ResponseDecodeError
from exchanger.logging import provider_log_extra
from exchanger.models import ExchangeRate, ExchangeRateQuery, HistoricalExchangeRateQuery, RateQuery
from exchanger.providers.base import (
    BaseRateService,
    ProviderError,
    UnsupportedCurrencyPairError,
    UnsupportedQueryError,
)
from exchanger.providers.http_client import HTTPClient, HTTPClientConfig, HttpResponse, HttpTransport
from exchanger.providers.schemas import (
    ConversionErrorPayload,
    ConversionPayload,
    parse_conversion_payload,
)
from exchanger.utils.datetime import utc_now

logger = logging.getLogger(__name__)

FREE_HOST = "free.currencyconverterapi.com"
ENTERPRISE_HOST = "api.currencyconverterapi.com"
CONVERT_PATH = "/api/v6/convert"

MISSING_ACCESS_KEY_MESSAGE = "The access_key option must be provided."


@dataclass(frozen=True)
class CurrencyConverterOptions:
    """Options recognized by the currencyconverterapi.com service."""

    access_key: str | None = None
    enterprise: bool = False

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> CurrencyConverterOptions:
        values = options or {}
        access_key = values.get("access_key")
        return cls(
            access_key=str(access_key) if access_key is not None else None,
            enterprise=to_bool(values.get("enterprise", False)),
        )

    def validate(self) -> None:
        if self.enterprise and not self.access_key:
            raise ConfigurationError(MISSING_ACCESS_KEY_MESSAGE, payload={"option": "access_key"})

    @property
    def host(self) -> str:
        return ENTERPRISE_HOST if self.enterprise else FREE_HOST


class CurrencyConverter(BaseRateService):
    """Service that fetches rates from currencyconverterapi.com."""

    name = "currency_converter"

    def __init__(
        self,
        client: HttpTransport | None = None,
        request_factory: object | None = None,
        options: Mapping[str, Any] | CurrencyConverterOptions | None = None,
    ) -> None:
        if isinstance(options, CurrencyConverterOptions):
            resolved = options
        else:
            resolved = CurrencyConverterOptions.from_mapping(options)
        resolved.validate()

        self._options = resolved
        self._client: HttpTransport = client or HTTPClient(HTTPClientConfig())
        # Reserved slot; always None for this service.
        self._request_factory = request_factory

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> CurrencyConverter:
        client_config = HTTPClientConfig(timeout=float(config.get("REQUEST_TIMEOUT_SECONDS", 5)))
        options = CurrencyConverterOptions.from_mapping(
            {
                "access_key": config.get("CURRENCY_CONVERTER_ACCESS_KEY") or None,
                "enterprise": config.get("CURRENCY_CONVERTER_ENTERPRISE", False),
            }
        )
        return cls(HTTPClient(client_config), None, options)

    @property
    def options(self) -> CurrencyConverterOptions:
        return self._options

    def supports_query(self, query: object) -> bool:
        return isinstance(query, ExchangeRateQuery | HistoricalExchangeRateQuery)

    def get_exchange_rate(self, query: RateQuery) -> ExchangeRate:
        match query:
            case HistoricalExchangeRateQuery(currency_pair=pair, date=requested):
                historical = True
                rate_date = requested
            case ExchangeRateQuery(currency_pair=pair):
                historical = False
                rate_date = utc_now().date()
            case _:
                raise UnsupportedQueryError(
                    f"The service '{self.name}' does not support {type(query).__name__} queries."
                )

        url = self._build_url()
        params = self._build_params(pair.key, rate_date if historical else None)

        started = time.perf_counter()
        response = self._client.get(url, params=params)
        duration_ms = (time.perf_counter() - started) * 1000

        payload = self._parse_response(response)
        try:
            value = payload.value_for(pair.key, on=rate_date)
        except KeyError as exc:
            raise UnsupportedCurrencyPairError(pair, self.name) from exc

        logger.info(
            "Fetched %s rate from %s",
            pair,
            self.name,
            extra=provider_log_extra(
                provider=self.name,
                pair=str(pair),
                event="rate.fetched",
                status="ok",
                duration_ms=duration_ms,
                historical=historical,
            ),
        )
        return ExchangeRate(
            value=value,
            currency_pair=pair,
            provider_name=self.name,
            date=rate_date,
        )

    def _build_url(self) -> str:
        return f"https://{self._options.host}{CONVERT_PATH}"

    def _build_params(self, pair_key: str, on: date | None) -> dict[str, str]:
        params = {"q": pair_key}
        if on is not None:
            params["date"] = on.isoformat()
        if self._options.access_key:
            params["access_key"] = self._options.access_key
        return params

    def _parse_response(self, response: HttpResponse) -> ConversionPayload:
        status = response.status_code
        body = response.text

        if not 200 <= status < 300:
            message = f"Unexpected response status {status} from {self.name}"
            details: dict[str, Any] = {}
            try:
                parsed = parse_conversion_payload(body)
            except ResponseDecodeError:
                parsed = None
            if isinstance(parsed, ConversionErrorPayload):
                message = f"{message}: {parsed.message}"
                details = parsed.payload
            raise ProviderError(message, status_code=status, payload=details)

        parsed = parse_conversion_payload(body)
        if isinstance(parsed, ConversionErrorPayload):
            raise ProviderError(
                parsed.message,
                status_code=parsed.status if parsed.status is not None else status,
                payload=parsed.payload,
            )
        return parsed
