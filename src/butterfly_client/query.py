"""Query string encoding with bracket notation for nested keys.

``{"page": {"size": 1}, "filter": {"types": ["a", "b"]}}`` becomes
``?page[size]=1&filter[types]=a&filter[types]=b``. Keys are written as-is;
only values are percent-encoded.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any
from urllib.parse import quote

from butterfly_client.schemas.query import Query

# Hash signs reach the encoder already escaped once in some filter values.
_DOUBLE_ESCAPED_HASH = "%2523"
_ESCAPED_HASH = "%23"


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        value = "true" if value else "false"
    return quote(str(value), safe="")


def _iter_pairs(prefix: str, value: Any) -> Iterator[tuple[str, str]]:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            yield from _iter_pairs(f"{prefix}[{key}]" if prefix else str(key), item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _iter_pairs(prefix, item)
    else:
        yield prefix, _encode_value(value)


def encode_query(query: Query | Mapping[str, Any] | None) -> str:
    """Encode a query descriptor into a query string.

    Args:
        query: A ``Query`` model or an equivalent nested mapping. ``None``
            values are skipped.

    Returns:
        The query string with its leading ``?``, or ``""`` when there is
        nothing to encode.
    """
    if query is None:
        return ""
    if isinstance(query, Query):
        dumped = query.model_dump(exclude_none=True)
        if query.filter is not None:
            dumped["filter"] = query.filter.as_mapping()
        query = dumped

    encoded = "&".join(f"{key}={value}" for key, value in _iter_pairs("", query))
    if not encoded:
        return ""
    return "?" + encoded.replace(_DOUBLE_ESCAPED_HASH, _ESCAPED_HASH)
