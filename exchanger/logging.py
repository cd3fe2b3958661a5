"""Logging helpers and structured JSON formatter for exchange rate services."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import Any

from exchanger.config import to_bool

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

RESERVED_ATTRS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "message",
    "asctime",
}

_configured_handler: logging.Handler | None = None


class JSONLogFormatter(logging.Formatter):
    """Format LogRecord instances into structured JSON strings."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = record.stack_info

        extras = _extract_extras(record.__dict__)
        if extras:
            payload.update(extras)

        return json.dumps(_json_safe(payload), separators=(",", ":"))


def setup_logging(config: Mapping[str, Any] | None = None, *, force: bool = False) -> logging.Handler:
    """Configure root logging handlers and formatters from a flat config mapping.

    Recognized keys are ``LOG_LEVEL``, ``LOG_JSON_ENABLED`` and ``LOG_FORMAT``.
    Repeated calls return the handler installed by the first one unless
    ``force`` is set.
    """

    global _configured_handler

    if _configured_handler is not None and not force:
        return _configured_handler

    settings = config or {}
    level = _resolve_level(settings.get("LOG_LEVEL", "INFO"))
    json_enabled = to_bool(settings.get("LOG_JSON_ENABLED", False))
    format_string = settings.get("LOG_FORMAT") or DEFAULT_LOG_FORMAT

    handler = logging.StreamHandler()
    handler.setLevel(level)
    if json_enabled:
        handler.setFormatter(JSONLogFormatter())
    else:
        handler.setFormatter(logging.Formatter(format_string))

    root_logger = logging.getLogger()
    _replace_handlers(root_logger, [handler])
    root_logger.setLevel(level)

    logging.getLogger("urllib3").setLevel(max(level, logging.INFO))

    _configured_handler = handler
    return handler


def reset_logging() -> None:
    """Forget the handler installed by ``setup_logging``; primarily for testing."""

    global _configured_handler

    if _configured_handler is not None:
        logging.getLogger().removeHandler(_configured_handler)
    _configured_handler = None


def provider_log_extra(
    *,
    provider: str,
    pair: str,
    event: str,
    status: str,
    duration_ms: float | None = None,
    historical: bool = False,
    error: str | None = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "event": event,
        "provider": provider,
        "pair": pair,
        "status": status,
        "duration_ms": round(duration_ms, 3) if duration_ms is not None else None,
        "historical": historical,
    }
    if error:
        payload["error"] = error
    return {key: value for key, value in payload.items() if value is not None}


def _extract_extras(record_dict: dict[str, Any]) -> dict[str, Any]:
    extras: dict[str, Any] = {}
    for key, value in record_dict.items():
        if key in RESERVED_ATTRS or key.startswith("_"):
            continue
        extras[key] = _json_safe(value)
    return extras


def _json_safe(value: Any) -> Any:
    if isinstance(value, str | int | float | bool) or value is None:
        return value
    if isinstance(value, dict):
        return {str(k): _json_safe(v) for k, v in value.items()}
    if isinstance(value, list | tuple | set):
        return [_json_safe(item) for item in value]
    return str(value)


def _resolve_level(level_name: Any) -> int:
    if isinstance(level_name, int):
        return level_name
    if not level_name:
        return logging.INFO
    candidate = str(level_name).upper()
    resolved = getattr(logging, candidate, logging.INFO)
    return resolved if isinstance(resolved, int) else logging.INFO


def _replace_handlers(logger: logging.Logger, handlers: Iterable[logging.Handler]) -> None:
    for existing in logger.handlers[:]:
        logger.removeHandler(existing)
    for handler in handlers:
        logger.addHandler(handler)
