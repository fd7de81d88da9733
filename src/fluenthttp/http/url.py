# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers shared by the dispatcher."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import unquote_plus, urlsplit, urlunsplit

import httpx


def _segment_key(segment: str) -> str:
    return unquote_plus(segment.split("=", 1)[0], errors="surrogateescape")


def drop_query_keys(url: str, keys: Iterable[str]) -> str:
    """
    Remove the ``keys`` parameters from the query string embedded in ``url``.

    Every other segment is kept byte for byte, in its original order, so encoded
    values that are not valid UTF-8 and valueless flags survive untouched.

    Example:
      drop_query_keys("http://host/get?a=1&flag&b=2", {"a"}) -> "http://host/get?flag&b=2"
    """
    url = str(url or "")
    drop = set(keys)
    parts = urlsplit(url)
    if not parts.query or not drop:
        return url
    kept = [segment for segment in parts.query.split("&") if segment and _segment_key(segment) not in drop]
    return urlunsplit(parts._replace(query="&".join(kept)))


def append_query(url: str, params: Mapping[str, Any] | None) -> str:
    """Append ``params`` (encoded the way httpx encodes them) after the query already in ``url``."""
    url = str(url or "")
    if not params:
        return url
    encoded = str(httpx.QueryParams(params))
    if not encoded:
        return url
    parts = urlsplit(url)
    query = f"{parts.query}&{encoded}" if parts.query else encoded
    return urlunsplit(parts._replace(query=query))


__all__ = ["append_query", "drop_query_keys"]
