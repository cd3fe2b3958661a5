"""Shared HTTP transport used by exchange rate services."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

import requests
from requests import Response, Session

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "exchanger/0.1"


class HttpResponse(Protocol):
    """Minimal response surface consumed by services."""

    status_code: int

    @property
    def text(self) -> str: ...


class HttpTransport(Protocol):
    """Anything able to issue a GET and hand back an ``HttpResponse``."""

    def get(self, url: str, params: Optional[Mapping[str, Any]] = None) -> HttpResponse: ...


@dataclass(frozen=True)
class HTTPClientConfig:
    """Configuration for the shared HTTP client."""

    timeout: float = 5.0
    headers: Mapping[str, str] = field(default_factory=lambda: {"User-Agent": DEFAULT_USER_AGENT})


class HTTPClient:
    """Thin ``requests`` wrapper issuing exactly one request per call.

    Status codes are not interpreted here and transport failures
    (``requests.RequestException``) propagate to the caller untouched.
    """

    def __init__(
        self,
        config: Optional[HTTPClientConfig] = None,
        session: Optional[Session] = None,
    ) -> None:
        self._config = config or HTTPClientConfig()
        self._session = session or requests.Session()

    @property
    def config(self) -> HTTPClientConfig:
        return self._config

    def get(self, url: str, params: Optional[Mapping[str, Any]] = None) -> Response:
        logger.debug("GET %s params=%s", url, _redact(params))
        response = self._session.get(
            url,
            params=params,
            headers=dict(self._config.headers),
            timeout=self._config.timeout,
        )
        logger.debug("GET %s returned %s", url, response.status_code)
        return response


def _redact(params: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    if not params:
        return {}
    return {key: ("***" if key == "access_key" else value) for key, value in params.items()}
