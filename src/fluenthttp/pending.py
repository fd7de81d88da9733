# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Fluent request builder and dispatcher."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from http.cookiejar import CookieJar
from typing import Any

import httpx

from .config import HttpSettings, load_http_settings
from .errors import ConnectionException, categorize_exception, error_category_to_reason
from .http.client import Transport, create_default_transport
from .http.cookies import default_cookie_jar
from .http.headers import has_header
from .http.hooks import BeforeSendingHook, HookChain
from .http.models import HttpRequest, HttpResponse
from .http.options import RequestOptions, merge_options, merge_query, validate_body_format
from .http.url import drop_query_keys

logger = logging.getLogger(__name__)


class PendingHttpRequest:
    """
    Accumulates request configuration through chained calls, then sends it.

    Nothing touches the network until one of the verb methods (``get``, ``post``,
    ``put``, ``patch``, ``delete`` or ``send``) is called. Every configuration method
    returns the builder itself.
    """

    def __init__(self, settings: HttpSettings | None = None, transport: Transport | None = None):
        self.settings = settings or load_http_settings()
        self._transport = transport
        self._before_sending = HookChain()
        self._options: RequestOptions = {
            "body_format": self.settings.body_format,
            "allow_redirects": self.settings.allow_redirects,
            "verify_tls": self.settings.verify_tls,
            "timeout_seconds": self.settings.timeout,
        }

    @classmethod
    def new(cls, *args: Any, **kwargs: Any) -> PendingHttpRequest:
        return cls(*args, **kwargs)

    @property
    def options(self) -> RequestOptions:
        """A copy of the accumulated options."""
        return merge_options(self._options)

    def _merge(self, options: Mapping[str, Any]) -> PendingHttpRequest:
        self._options = merge_options(self._options, options)
        return self

    # Body format ------------------------------------------------------------

    def body_format(self, body_format: str) -> PendingHttpRequest:
        """Set the body format; it is validated when the request is sent."""
        return self._merge({"body_format": body_format})

    def content_type(self, content_type: str) -> PendingHttpRequest:
        return self.with_headers({"Content-Type": content_type})

    def accept(self, accept: str) -> PendingHttpRequest:
        return self.with_headers({"Accept": accept})

    def as_json(self) -> PendingHttpRequest:
        return self.body_format("json").content_type("application/json")

    def as_form_params(self) -> PendingHttpRequest:
        return self.body_format("form_params").content_type("application/x-www-form-urlencoded")

    def as_multipart(self) -> PendingHttpRequest:
        # httpx writes the Content-Type itself, boundary included.
        return self.body_format("multipart")

    def as_body(self, content_type: str | None = None) -> PendingHttpRequest:
        self.body_format("raw_body")
        if content_type:
            self.content_type(content_type)
        return self

    # Options ----------------------------------------------------------------

    def with_base_uri(self, uri: str) -> PendingHttpRequest:
        return self._merge({"base_uri": uri})

    def with_basic_auth(self, username: str, password: str) -> PendingHttpRequest:
        return self._merge({"auth": (username, password)})

    def with_digest_auth(self, username: str, password: str) -> PendingHttpRequest:
        return self._merge({"auth": (username, password, "digest")})

    def with_headers(self, headers: Mapping[str, Any]) -> PendingHttpRequest:
        return self._merge({"headers": headers})

    def without_redirecting(self) -> PendingHttpRequest:
        return self._merge({"allow_redirects": False})

    def without_verifying(self) -> PendingHttpRequest:
        return self._merge({"verify_tls": False})

    def with_handler(self, handler: httpx.BaseTransport) -> PendingHttpRequest:
        """Route requests through ``handler`` (e.g. ``httpx.MockTransport``) instead of the network."""
        return self._merge({"transport_handle": handler})

    def timeout(self, seconds: float) -> PendingHttpRequest:
        return self._merge({"timeout_seconds": seconds})

    def with_cookies(self, jar: CookieJar | None = None) -> PendingHttpRequest:
        """
        Persist cookies in ``jar`` across requests.

        Without a jar the process-wide default jar is used; it is shared by every
        builder that calls ``with_cookies()`` without arguments.
        """
        return self._merge({"cookie_jar": jar if jar is not None else default_cookie_jar()})

    def with_options(self, options: Mapping[str, Any]) -> PendingHttpRequest:
        """Merge raw options; unrecognized keys are passed to ``httpx.Client``."""
        return self._merge(options)

    def before_sending(self, callback: BeforeSendingHook) -> PendingHttpRequest:
        self._before_sending.append(callback)
        return self

    # Verbs ------------------------------------------------------------------

    def get(self, url: str, query: Mapping[str, Any] | None = None) -> HttpResponse:
        return self.send("GET", url, {"query": query or {}})

    def post(self, url: str, body: Any = None) -> HttpResponse:
        return self.send("POST", url, self._payload(body))

    def put(self, url: str, body: Any = None) -> HttpResponse:
        return self.send("PUT", url, self._payload({} if body is None else body))

    def patch(self, url: str, body: Any = None) -> HttpResponse:
        return self.send("PATCH", url, self._payload({} if body is None else body))

    def delete(self, url: str, body: Any = None) -> HttpResponse:
        return self.send("DELETE", url, self._payload({} if body is None else body))

    def _payload(self, body: Any) -> RequestOptions:
        return {str(self._options.get("body_format")): body}

    def send(self, method: str, url: str, options: Mapping[str, Any] | None = None) -> HttpResponse:
        """Merge options, run the before-sending hooks and dispatch one request."""
        per_call = dict(options or {})
        final = self.build_options(url, per_call)
        validate_body_format(final.get("body_format"))
        if not has_header(final.get("headers"), "User-Agent") and self.settings.user_agent:
            final = merge_options(final, {"headers": {"User-Agent": self.settings.user_agent}})

        method = method.upper()
        # Explicit query params replace same-named ones already in the URL.
        target = drop_query_keys(url, final["query"])
        transport = self._transport or create_default_transport(self.settings)
        logger.debug("Sending %s %s (query=%s)", method, target, final["query"])
        try:
            raw = transport.execute(method, target, final, on_request=self._observe)
        except httpx.RequestError as exc:
            category = categorize_exception(exc)
            logger.warning("%s %s failed: %s (%s)", method, url, error_category_to_reason(category), exc)
            raise ConnectionException(str(exc) or type(exc).__name__, exc) from exc
        return HttpResponse(raw)

    def build_options(self, url: str, options: Mapping[str, Any] | None = None) -> RequestOptions:
        """
        Combine accumulated and per-call options for a request to ``url``.

        ``query`` holds the explicit params only: the accumulated query, then the
        per-call query, a repeated key taking the last value. The query string
        embedded in ``url`` stays in the URL; ``send`` drops from it the keys
        that the explicit params override.
        """
        per_call = dict(options or {})
        query = merge_query(self._options.get("query"), per_call.get("query"))
        per_call.pop("query", None)
        final = merge_options(self._options, per_call)
        final["query"] = query
        return final

    def _observe(self, request: httpx.Request) -> None:
        if self._before_sending:
            self._before_sending.run(HttpRequest.from_httpx(request))


__all__ = ["PendingHttpRequest"]
