"""Package-wide error types."""

from __future__ import annotations

from typing import Any


class ExchangerError(Exception):
    """Base class for errors raised by exchange rate services."""

    def __init__(self, message: str, *, payload: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.payload = payload or {}


class ConfigurationError(ExchangerError, ValueError):
    """Raised when a service is constructed with invalid options."""


class ResponseDecodeError(ExchangerError):
    """Raised when a provider response body cannot be interpreted."""
