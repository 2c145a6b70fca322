"""Ordered query-string codec.

Query strings are handled as ordered mappings of ``key -> value`` where the
value is either a string or the ``VALUELESS`` sentinel for bare flags such as
``?server_only``. Conversion to and from text only happens at the URL
boundary.

Keys and values are written with component encoding (a space becomes
``%20``); parsing also accepts ``+`` for a space.

Duplicate keys resolve last-wins: the value of the last occurrence is kept at
the position of the first one, matching what ``dict`` assignment does.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final
from urllib.parse import quote, unquote_plus


class _Valueless:
    """Marker for a query parameter present without ``=value``."""

    _instance: _Valueless | None = None

    def __new__(cls) -> _Valueless:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "VALUELESS"

    def __bool__(self) -> bool:
        return True


VALUELESS: Final = _Valueless()

# encodeURIComponent leaves these unescaped
COMPONENT_SAFE: Final = "!~*'()"

QueryValue = str | _Valueless
QueryMapping = dict[str, QueryValue]


def parse_query(raw: str | None) -> QueryMapping:
    """Parse a raw query string into an ordered mapping.

    Args:
        raw: Query string with or without the leading ``?``.

    Returns:
        Ordered mapping; flags without ``=`` map to ``VALUELESS``.

    Examples:
        >>> parse_query("?sort=best-matches&server_only")
        {'sort': 'best-matches', 'server_only': VALUELESS}
    """
    if not raw:
        return {}

    query = raw[1:] if raw.startswith("?") else raw
    mapping: QueryMapping = {}
    for token in query.split("&"):
        if not token:
            continue
        if "=" not in token:
            mapping[unquote_plus(token)] = VALUELESS
            continue
        key, value = token.split("=", 1)
        mapping[unquote_plus(key)] = unquote_plus(value)
    return mapping


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _encode_value(value: Any) -> str:
    return quote(_stringify(value), safe=COMPONENT_SAFE)


def serialize_query(mapping: Mapping[str, Any]) -> str:
    """Serialize an ordered mapping back into a query string (no leading ``?``)."""
    parts: list[str] = []
    for key, value in mapping.items():
        encoded_key = quote(str(key), safe=COMPONENT_SAFE)
        if value is VALUELESS:
            parts.append(encoded_key)
        else:
            parts.append(f"{encoded_key}={_encode_value(value)}")
    return "&".join(parts)


def merge_query(mapping: Mapping[str, Any], updates: Mapping[str, Any] | None) -> QueryMapping:
    """Return a copy of ``mapping`` with ``updates`` applied.

    ``None`` values delete the key (no-op when missing). Other values
    overwrite existing keys in place; new keys are appended in ``updates``
    order.
    """
    merged: QueryMapping = dict(mapping)
    for key, value in (updates or {}).items():
        if value is None:
            merged.pop(key, None)
        else:
            merged[key] = value if value is VALUELESS else _stringify(value)
    return merged


def split_url(url: str) -> tuple[str, str, str]:
    """Split a relative URL into ``(path, query, fragment)`` without decoding."""
    rest, _, fragment = url.partition("#")
    path, _, query = rest.partition("?")
    return path, query, fragment
