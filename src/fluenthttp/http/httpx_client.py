# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed Transport implementation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from ..config import HttpSettings, load_http_settings
from .client import RequestObserver, Transport
from .headers import header_items
from .options import extra_client_options, validate_body_format
from .url import append_query

logger = logging.getLogger(__name__)


def build_auth(auth: Any) -> httpx.Auth | None:
    """Translate an ``auth`` option into an httpx auth flow."""
    if auth is None or isinstance(auth, httpx.Auth):
        return auth
    if isinstance(auth, (list, tuple)):
        if len(auth) == 2:
            return httpx.BasicAuth(auth[0], auth[1])
        if len(auth) == 3:
            mode = str(auth[2] or "basic").lower()
            if mode == "digest":
                return httpx.DigestAuth(auth[0], auth[1])
            if mode == "basic":
                return httpx.BasicAuth(auth[0], auth[1])
            raise ValueError(f"Unsupported auth mode: {auth[2]!r}")
    raise ValueError(f"auth must be (username, password[, mode]), got {type(auth).__name__}")


def _is_file_field(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray, tuple)) or hasattr(value, "read")


def multipart_fields(payload: Mapping[str, Any]) -> list[tuple[str, Any]]:
    """
    Expand a multipart payload into httpx ``files`` entries.

    Plain values become filename-less parts so that a payload without any file still
    goes out as multipart/form-data. A list value yields one part per item.
    """
    fields: list[tuple[str, Any]] = []
    for name, value in payload.items():
        values = value if isinstance(value, list) else [value]
        for item in values:
            if _is_file_field(item):
                fields.append((str(name), item))
            else:
                fields.append((str(name), (None, "" if item is None else str(item))))
    return fields


def body_kwargs(options: Mapping[str, Any]) -> dict[str, Any]:
    """Build the httpx request keyword arguments for the active body format."""
    body_format = validate_body_format(options.get("body_format", "json"))
    payload = options.get(body_format)
    if payload is None:
        return {}
    if body_format == "json":
        return {"json": payload}
    if body_format == "form_params":
        return {"data": payload}
    if body_format == "multipart":
        if not isinstance(payload, Mapping):
            raise TypeError("multipart payload must be a mapping of field name to value")
        return {"files": multipart_fields(payload)}
    return {"content": payload}


class HttpxTransport(Transport):
    """Synchronous httpx transport; one client per exchange, closed afterwards."""

    def __init__(self, settings: HttpSettings | None = None):
        self.settings = settings or load_http_settings()

    def client_kwargs(self, options: Mapping[str, Any], on_request: RequestObserver | None = None) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "follow_redirects": options.get("allow_redirects", self.settings.allow_redirects),
            "verify": options.get("verify_tls", self.settings.verify_tls),
            "timeout": options.get("timeout_seconds", self.settings.timeout),
        }
        if options.get("base_uri"):
            kwargs["base_url"] = options["base_uri"]
        if options.get("cookie_jar") is not None:
            # A CookieJar is shared by reference, so Set-Cookie lands in the caller's jar.
            kwargs["cookies"] = options["cookie_jar"]
        if options.get("transport_handle") is not None:
            kwargs["transport"] = options["transport_handle"]
        if on_request is not None:
            kwargs["event_hooks"] = {"request": [on_request]}
        kwargs.update(extra_client_options(options))
        return kwargs

    def request_kwargs(self, options: Mapping[str, Any]) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"headers": header_items(options.get("headers"))}
        auth = build_auth(options.get("auth"))
        if auth is not None:
            kwargs["auth"] = auth
        kwargs.update(body_kwargs(options))
        return kwargs

    def execute(
        self,
        method: str,
        url: str,
        options: Mapping[str, Any],
        on_request: RequestObserver | None = None,
    ) -> httpx.Response:
        request_kwargs = self.request_kwargs(options)
        # The URL's own query goes out unchanged; explicit params follow it.
        url = append_query(url, options.get("query"))
        with httpx.Client(**self.client_kwargs(options, on_request)) as client:
            logger.debug("httpx %s %s", method, url)
            response = client.request(method, url, **request_kwargs)
            response.read()
        return response


__all__ = ["HttpxTransport", "body_kwargs", "build_auth", "multipart_fields"]
