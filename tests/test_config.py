from __future__ import annotations

import logging

import pytest

from exchanger import config as config_module
from exchanger.config import config_to_dict, get_config, to_bool
from exchanger.logging import reset_logging, setup_logging
from exchanger.providers.currency_converter import CurrencyConverter


def test_get_config_defaults_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)

    assert get_config() is config_module.DevelopmentConfig


def test_get_config_reads_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "Production")

    assert get_config() is config_module.ProductionConfig


def test_get_config_rejects_unknown_environment():
    with pytest.raises(KeyError, match="Unknown APP_ENV 'staging'"):
        get_config("staging")


def test_get_config_rejects_non_positive_timeout(monkeypatch):
    monkeypatch.setattr(config_module.TestingConfig, "REQUEST_TIMEOUT_SECONDS", 0.0)

    with pytest.raises(ValueError, match="REQUEST_TIMEOUT_SECONDS"):
        get_config("testing")


def test_config_to_dict_feeds_service_factory():
    settings = config_to_dict(get_config("testing"))

    assert settings["CURRENCY_CONVERTER_ACCESS_KEY"] == "secret"
    assert settings["TESTING"] is True

    service = CurrencyConverter.from_config(settings)
    assert service.options.access_key == "secret"
    assert service.options.enterprise is False


def test_config_to_dict_feeds_logging():
    root = logging.getLogger()
    previous_handlers = root.handlers[:]
    previous_level = root.level
    reset_logging()
    try:
        setup_logging(config_to_dict(get_config("testing")))
        assert root.level == logging.getLevelName(config_module.TestingConfig.LOG_LEVEL.upper())
    finally:
        reset_logging()
        root.handlers = previous_handlers
        root.setLevel(previous_level)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, True),
        (False, False),
        (None, False),
        ("false", False),
        (" Yes ", True),
        ("on", True),
        (0, False),
        (1, True),
    ],
)
def test_to_bool_interprets_flags(value, expected):
    assert to_bool(value) is expected
