"""Environment-driven configuration classes."""

from __future__ import annotations

import os
from typing import Any


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None else default


def to_bool(value: Any) -> bool:
    """Interpret config flags given as bools, numbers or strings like "false"."""

    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "exchanger"
    CURRENCY_CONVERTER_ACCESS_KEY: str | None = os.getenv("CURRENCY_CONVERTER_ACCESS_KEY") or None
    CURRENCY_CONVERTER_ENTERPRISE = to_bool(_get_env("CURRENCY_CONVERTER_ENTERPRISE", "false"))
    REQUEST_TIMEOUT_SECONDS = float(_get_env("REQUEST_TIMEOUT_SECONDS", "5"))
    LOG_LEVEL = _get_env("LOG_LEVEL", "INFO")
    LOG_JSON_ENABLED = to_bool(_get_env("LOG_JSON_ENABLED", "false"))
    LOG_FORMAT = _get_env("LOG_FORMAT", "%(asctime)s %(levelname)s [%(name)s] %(message)s")


class DevelopmentConfig(BaseConfig):
    """Configuration for local development."""

    DEBUG = True
    TESTING = False
    LOG_LEVEL = _get_env("LOG_LEVEL", "DEBUG")


class ProductionConfig(BaseConfig):
    """Configuration for production deployments."""

    DEBUG = False
    TESTING = False
    LOG_JSON_ENABLED = to_bool(_get_env("LOG_JSON_ENABLED", "true"))


class TestingConfig(BaseConfig):
    """Configuration used by the test suite."""

    DEBUG = False
    TESTING = True
    CURRENCY_CONVERTER_ACCESS_KEY = "secret"
    CURRENCY_CONVERTER_ENTERPRISE = False
    REQUEST_TIMEOUT_SECONDS = 2.0


CONFIG_BY_ENV = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}


def get_config(config_name: str | None = None) -> type[BaseConfig]:
    """Return the config class for the requested environment.

    Args:
        config_name: Optional explicit config identifier. If omitted, the
            APP_ENV environment variable is consulted.

    Raises:
        KeyError: If the requested configuration is not defined.
        ValueError: If the configured request timeout is not positive.
    """

    env_candidate = config_name if config_name is not None else os.getenv("APP_ENV", "development")
    env_name = (env_candidate or "development").lower()
    try:
        config_cls = CONFIG_BY_ENV[env_name]
    except KeyError as exc:
        raise KeyError(f"Unknown APP_ENV '{env_name}'") from exc

    if config_cls.REQUEST_TIMEOUT_SECONDS <= 0:
        raise ValueError(
            f"REQUEST_TIMEOUT_SECONDS must be positive, got {config_cls.REQUEST_TIMEOUT_SECONDS}"
        )
    return config_cls


def config_to_dict(config_cls: type[BaseConfig]) -> dict[str, Any]:
    """Flatten the upper-case attributes of a config class into a mapping."""

    return {name: getattr(config_cls, name) for name in dir(config_cls) if name.isupper()}
