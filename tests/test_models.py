from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

import pytest

from exchanger.models import CurrencyPair, ExchangeRate, ExchangeRateQuery, HistoricalExchangeRateQuery


def test_currency_pair_from_string_normalizes_codes():
    pair = CurrencyPair.from_string(" usd/eur ")

    assert pair.base_currency == "USD"
    assert pair.quote_currency == "EUR"
    assert str(pair) == "USD/EUR"
    assert pair.key == "USD_EUR"


@pytest.mark.parametrize("value", ["USDEUR", "USD/EUR/GBP", "/EUR", "USD/"])
def test_currency_pair_from_string_rejects_malformed_values(value):
    with pytest.raises(ValueError):
        CurrencyPair.from_string(value)


def test_currency_pair_rejects_non_ascii_codes():
    with pytest.raises(ValueError):
        CurrencyPair("USD", "€UR")


def test_currency_pair_is_immutable_and_comparable():
    pair = CurrencyPair("USD", "EUR")

    assert pair == CurrencyPair.from_string("USD/EUR")
    assert not pair.is_identical()
    assert CurrencyPair("EUR", "eur").is_identical()
    with pytest.raises(FrozenInstanceError):
        pair.base_currency = "GBP"  # type: ignore[misc]


def test_historical_query_reduces_datetimes_to_utc_dates():
    pair = CurrencyPair("USD", "EUR")
    late_evening = datetime(2017, 1, 1, 23, 30, tzinfo=ZoneInfo("America/New_York"))

    query = HistoricalExchangeRateQuery(pair, late_evening)

    assert query.date == date(2017, 1, 2)
    assert query.currency_pair is pair


def test_historical_query_keeps_plain_dates():
    query = HistoricalExchangeRateQuery(CurrencyPair("USD", "EUR"), date(2017, 1, 1))

    assert query.date == date(2017, 1, 1)
    assert HistoricalExchangeRateQuery(CurrencyPair("USD", "EUR"), datetime(2017, 1, 1, tzinfo=UTC)) == query


def test_historical_query_requires_a_date():
    with pytest.raises(TypeError):
        HistoricalExchangeRateQuery(CurrencyPair("USD", "EUR"), "2017-01-01")  # type: ignore[arg-type]


def test_exchange_rate_coerces_value_and_requires_provider():
    pair = CurrencyPair("USD", "EUR")
    rate = ExchangeRate(value=1, currency_pair=pair, provider_name="test", date=date(2017, 1, 1))

    assert rate.value == 1.0
    assert isinstance(rate.value, float)
    assert rate.currency_pair is pair

    with pytest.raises(ValueError):
        ExchangeRate(value=1.0, currency_pair=pair, provider_name=" ", date=date(2017, 1, 1))


def test_plain_query_holds_pair():
    pair = CurrencyPair("USD", "EUR")

    assert ExchangeRateQuery(pair).currency_pair is pair
