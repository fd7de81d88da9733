# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Request option merging.

Options are plain dicts keyed by option name. Header maps accumulate values for
repeated names (header names match case-insensitively, first-seen casing is kept),
query maps let the last value win per key, every other key is last-write-wins.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..config import BODY_FORMATS
from ..errors import UnsupportedBodyFormat

RequestOptions = dict[str, Any]

HEADER_KEYS = ("headers",)
QUERY_KEYS = ("query",)
KNOWN_OPTIONS = frozenset(
    {
        "headers",
        "query",
        "auth",
        "base_uri",
        "body_format",
        "allow_redirects",
        "verify_tls",
        "timeout_seconds",
        "cookie_jar",
        "transport_handle",
        *BODY_FORMATS,
    }
)


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def merge_headers(base: Mapping[str, Any] | None, extra: Mapping[str, Any] | None) -> dict[str, list[Any]]:
    """Merge two header maps, accumulating values for repeated names."""
    merged: dict[str, list[Any]] = {}
    names: dict[str, str] = {}
    for source in (base or {}, extra or {}):
        for name, value in source.items():
            lower = str(name).lower()
            key = names.setdefault(lower, str(name))
            merged.setdefault(key, []).extend(_as_list(value))
    return merged


def merge_query(*queries: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge query maps left to right; a repeated key keeps its position and takes the last value."""
    merged: dict[str, Any] = {}
    for query in queries:
        if not query:
            continue
        for key, value in query.items():
            merged[str(key)] = value
    return merged


def merge_options(*options: Mapping[str, Any] | None) -> RequestOptions:
    """Merge option maps left to right without mutating the inputs."""
    merged: RequestOptions = {}
    for source in options:
        if not source:
            continue
        for key, value in source.items():
            if key in HEADER_KEYS:
                merged[key] = merge_headers(merged.get(key), value)
            elif key in QUERY_KEYS:
                merged[key] = merge_query(merged.get(key), value)
            else:
                merged[key] = value
    return merged


def validate_body_format(body_format: Any) -> str:
    """Return ``body_format`` if the transport can encode it, else raise UnsupportedBodyFormat."""
    if body_format not in BODY_FORMATS:
        raise UnsupportedBodyFormat(body_format)
    return body_format


def extra_client_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """Options not recognized here; forwarded verbatim to the httpx client."""
    return {key: value for key, value in options.items() if key not in KNOWN_OPTIONS}


__all__ = [
    "KNOWN_OPTIONS",
    "RequestOptions",
    "extra_client_options",
    "merge_headers",
    "merge_options",
    "merge_query",
    "validate_body_format",
]
