# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request and response facades handed to callers and before-sending hooks."""

from __future__ import annotations

import functools
import json
from collections.abc import Mapping
from typing import Any, ClassVar

import httpx
from lxml import etree

from .headers import first_values
from .macros import Macro, MacroRegistry


class HttpRequest:
    """Read-only snapshot of an outgoing request."""

    __slots__ = ("_url", "_method", "_body", "_headers")

    def __init__(self, url: str, method: str, body: str = "", headers: Mapping[str, str] | None = None):
        self._url = url
        self._method = method.upper()
        self._body = body
        self._headers = dict(headers or {})

    @classmethod
    def from_httpx(cls, request: httpx.Request) -> HttpRequest:
        """Capture an ``httpx.Request`` just before it is written to the wire."""
        content = request.read()
        return cls(
            url=str(request.url),
            method=request.method,
            body=content.decode("utf-8", errors="replace"),
            headers=first_values(request.headers),
        )

    def url(self) -> str:
        return self._url

    def method(self) -> str:
        return self._method

    def body(self) -> str:
        return self._body

    def headers(self) -> dict[str, str]:
        """First value of every header, keyed by the name as it was sent."""
        return dict(self._headers)

    def __repr__(self) -> str:
        return f"<HttpRequest [{self._method}] {self._url}>"


class HttpResponse:
    """
    Wrapper around an ``httpx.Response``.

    The body is read once when the wrapper is built; every accessor works from that
    buffer, so repeated calls to ``body()``/``json()``/``xml()`` are safe.
    """

    _macros: ClassVar[MacroRegistry] = MacroRegistry("HttpResponse")

    def __init__(self, response: httpx.Response):
        self._response = response
        self._content = response.read()
        self._text = response.text

    @classmethod
    def macro(cls, name: str, macro: Macro) -> None:
        """Register ``macro`` under ``name``; it is called as ``macro(response, *args, **kwargs)``."""
        cls._macros.register(name, macro)

    @classmethod
    def has_macro(cls, name: str) -> bool:
        return cls._macros.has(name)

    @classmethod
    def flush_macros(cls) -> None:
        cls._macros.flush()

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Invoke a registered extension bound to this response."""
        return self._macros.invoke(self, name, *args, **kwargs)

    def __getattr__(self, name: str) -> Any:
        # Only reached when regular attribute lookup fails.
        if name.startswith("__"):
            raise AttributeError(name)
        return functools.partial(type(self)._macros.get(name), self)

    @property
    def raw(self) -> httpx.Response:
        return self._response

    def status(self) -> int:
        return self._response.status_code

    def reason(self) -> str:
        return self._response.reason_phrase

    def url(self) -> str:
        """URL of the final response, after any redirects were followed."""
        return str(self._response.url)

    def body(self) -> str:
        return self._text

    def content(self) -> bytes:
        return self._content

    def json(self) -> dict[str, Any] | list[Any] | None:
        """
        Decoded JSON object or array.

        None when the body is empty, is not valid JSON, or holds a bare scalar
        such as `123` or `"text"`.
        """
        if not self._content.strip():
            return None
        try:
            decoded = json.loads(self._text)
        except ValueError:
            return None
        return decoded if isinstance(decoded, (dict, list)) else None

    def xml(self) -> etree._Element | None:
        """Parsed XML root element, or None when the body cannot be parsed."""
        if not self._content.strip():
            return None
        parser = etree.XMLParser(recover=True, strip_cdata=True, remove_blank_text=True, resolve_entities=False)
        try:
            return etree.fromstring(self._content, parser)
        except (etree.XMLSyntaxError, ValueError):
            return None

    def header(self, name: str) -> str:
        """All values of ``name`` joined with ", ", or an empty string."""
        return self._response.headers.get(name, "")

    def headers(self) -> dict[str, str]:
        """First value of every header, keyed by the name the server sent."""
        return first_values(self._response.headers)

    def is_success(self) -> bool:
        return 200 <= self.status() < 300

    def is_ok(self) -> bool:
        return self.is_success()

    def is_redirect(self) -> bool:
        return 300 <= self.status() < 400

    def is_client_error(self) -> bool:
        return 400 <= self.status() < 500

    def is_server_error(self) -> bool:
        return self.status() >= 500

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"<HttpResponse [{self.status()}]>"


__all__ = ["HttpRequest", "HttpResponse"]
