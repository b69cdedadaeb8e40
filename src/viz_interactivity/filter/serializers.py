"""Serializers: convert applied filters to and from JSON strings."""

from __future__ import annotations

import json


def serialize_filter(applied_filter: dict | None) -> str:
    """Serialize an applied filter as a JSON string ("null" for no filter)."""
    return json.dumps(applied_filter)


def deserialize_filter(text: str) -> dict | None:
    """Parse a JSON string produced by ``serialize_filter``."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Applied filter is not valid JSON: {exc}") from None
    if data is not None and not isinstance(data, dict):
        raise ValueError(
            f"Applied filter JSON must be an object or null, got {type(data).__name__}."
        )
    return data
