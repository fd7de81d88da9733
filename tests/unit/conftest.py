# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json
from urllib.parse import parse_qs

import httpx
import pytest

from fluenthttp.http.cookies import reset_default_cookie_jar
from fluenthttp.http.models import HttpResponse

_PROXY_ENV = ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy")


def _flatten(values: dict[str, list[str]]) -> dict[str, object]:
    return {key: items[0] if len(items) == 1 else items for key, items in values.items()}


def echo_handler(request: httpx.Request) -> httpx.Response:
    """Small stand-in for an echo server, routed on the request path."""
    path = request.url.path

    if path.startswith("/status/"):
        return httpx.Response(int(path.rsplit("/", 1)[-1]), text="")
    if path == "/redirect":
        return httpx.Response(302, headers={"Location": "/get"})
    if path == "/xml":
        return httpx.Response(
            200,
            content=b"<?xml version='1.0' encoding='UTF-8'?><http><name>John</name></http>",
            headers={"Content-Type": "application/xml"},
        )
    if path == "/raw":
        return httpx.Response(200, text="A simple string response")
    if path == "/cookies/set":
        return httpx.Response(200, headers={"Set-Cookie": "session=abc123; Path=/"}, json={})

    body = request.read().decode("utf-8")
    content_type = request.headers.get("content-type", "")
    payload = {
        "method": request.method,
        "url": str(request.url),
        "args": _flatten(parse_qs(request.url.query.decode("ascii"), keep_blank_values=True)),
        "headers": {key: ", ".join(request.headers.get_list(key)) for key in request.headers.keys()},
        "json": json.loads(body) if body and content_type.startswith("application/json") else None,
        "form": _flatten(parse_qs(body)) if content_type.startswith("application/x-www-form-urlencoded") else None,
        "body": body,
    }
    return httpx.Response(200, json=payload, headers={"Content-Type": "application/json"})


@pytest.fixture
def echo_transport() -> httpx.MockTransport:
    return httpx.MockTransport(echo_handler)


@pytest.fixture(autouse=True)
def _isolate(monkeypatch):
    for name in _PROXY_ENV:
        monkeypatch.delenv(name, raising=False)
    for name in ("FLUENTHTTP_HTTP_TIMEOUT", "FLUENTHTTP_HTTP_REDIRECTS", "FLUENTHTTP_HTTP_VERIFY_SSL", "FLUENTHTTP_USER_AGENT", "FLUENTHTTP_BODY_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    reset_default_cookie_jar()
    HttpResponse.flush_macros()
    yield
    reset_default_cookie_jar()
    HttpResponse.flush_macros()
