"""Typed views over currencyconverterapi.com ``convert`` payloads."""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from exchanger.errors import ResponseDecodeError


@dataclass(frozen=True)
class ConversionErrorPayload:
    """Error shape: a JSON object carrying an ``error`` field."""

    message: str
    status: int | None = None
    payload: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ConversionPayload:
    """Success shape: pair keys (``USD_EUR``) mapped to ``{"val": ...}`` entries."""

    entries: dict[str, Any] = field(default_factory=dict)

    def value_for(self, key: str, on: date | None = None) -> float:
        """Return the numeric ``val`` stored under ``key``.

        Compact historical answers map dates to values; ``on`` selects the
        entry in that case.

        Raises:
            KeyError: If ``key`` is absent.
            ResponseDecodeError: If the entry does not hold a number.
        """

        entry = self.entries[key]
        if not isinstance(entry, Mapping) or "val" not in entry:
            raise ResponseDecodeError(
                f"Entry '{key}' has no 'val' field.", payload={key: entry}
            )

        value = entry["val"]
        if isinstance(value, Mapping):
            value = _pick_dated_value(key, value, on)
        return _to_float(key, value)


def parse_conversion_payload(text: str) -> ConversionPayload | ConversionErrorPayload:
    """Decode a ``convert`` body, trying the error shape before the success shape."""

    try:
        data = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise ResponseDecodeError(f"Invalid JSON response: {exc}") from exc

    if not isinstance(data, dict):
        raise ResponseDecodeError(
            f"Expected a JSON object, got {type(data).__name__}.", payload={"body": data}
        )

    if "error" in data:
        return ConversionErrorPayload(
            message=str(data["error"]),
            status=_to_status(data.get("status")),
            payload=data,
        )

    return ConversionPayload(entries=data)


def _pick_dated_value(key: str, values: Mapping[str, Any], on: date | None) -> Any:
    if on is not None and on.isoformat() in values:
        return values[on.isoformat()]
    if len(values) == 1:
        return next(iter(values.values()))
    raise ResponseDecodeError(
        f"Entry '{key}' holds dated values but none for {on.isoformat() if on else 'today'}.",
        payload={key: dict(values)},
    )


def _to_float(key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float | str):
        raise ResponseDecodeError(f"Entry '{key}' has a non-numeric value: {value!r}")
    try:
        number = float(value)
    except ValueError as exc:
        raise ResponseDecodeError(f"Entry '{key}' has a non-numeric value: {value!r}") from exc
    if not math.isfinite(number):
        raise ResponseDecodeError(f"Entry '{key}' has a non-finite value: {value!r}")
    return number


def _to_status(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return None
