# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header flattening utilities.

HTTP header field names are case-insensitive (RFC 9110) and a name may carry several
values. The request and response facades expose one value per name (the first one),
keeping the casing the name was first sent with.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import httpx


def _iter_header_items(headers: Any) -> Iterable[tuple[str, str]]:
    """
    Yield ``(name, value)`` pairs from the header containers we deal with:

    - httpx.Headers (original casing is read from ``.raw``)
    - plain dicts whose values may be lists of values
    - iterable-of-pairs (e.g. list[tuple[str, str]])
    """
    if isinstance(headers, httpx.Headers):
        encoding = headers.encoding
        for raw_key, raw_value in headers.raw:
            yield raw_key.decode(encoding), raw_value.decode(encoding)
        return

    items = headers.items() if isinstance(headers, Mapping) else headers
    for key, value in items:
        if key is None:
            continue
        if isinstance(value, (list, tuple)):
            for item in value:
                yield str(key), "" if item is None else str(item)
        else:
            yield str(key), "" if value is None else str(value)


def first_values(headers: Any) -> dict[str, str]:
    """Return one value per header name: the first one seen."""
    if not headers:
        return {}
    out: dict[str, str] = {}
    seen: set[str] = set()
    for name, value in _iter_header_items(headers):
        lower = name.lower()
        if lower in seen:
            continue
        seen.add(lower)
        out[name] = value
    return out


def header_items(headers: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Expand a merged header map into the pair list httpx sends on the wire."""
    if not headers:
        return []
    return list(_iter_header_items(headers))


def has_header(headers: Mapping[str, Any] | None, name: str) -> bool:
    """Case-insensitive membership test."""
    if not headers or not name:
        return False
    lower = name.lower()
    return any(str(key).lower() == lower for key in headers)


__all__ = ["first_values", "has_header", "header_items"]
