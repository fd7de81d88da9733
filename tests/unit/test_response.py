# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx
import pytest

from fluenthttp import Http, NoSuchOperation
from fluenthttp.http.models import HttpRequest, HttpResponse


def make_response(status_code=200, **kwargs) -> HttpResponse:
    return HttpResponse(httpx.Response(status_code, request=httpx.Request("GET", "http://example.com/"), **kwargs))


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        (200, "success"),
        (204, "success"),
        (302, "redirect"),
        (404, "client_error"),
        (418, "client_error"),
        (500, "server_error"),
        (508, "server_error"),
    ],
)
def test_status_predicates_are_mutually_exclusive(status, expected):
    response = make_response(status)
    results = {
        "success": response.is_success(),
        "redirect": response.is_redirect(),
        "client_error": response.is_client_error(),
        "server_error": response.is_server_error(),
    }
    assert [name for name, value in results.items() if value] == [expected]
    assert response.is_ok() is response.is_success()
    assert response.status() == status


def test_body_accessors_can_be_called_repeatedly():
    response = make_response(200, content=b'{"a": [1, 2]}')
    assert response.body() == '{"a": [1, 2]}'
    assert response.json() == {"a": [1, 2]}
    assert response.json() == {"a": [1, 2]}
    assert response.body() == '{"a": [1, 2]}'
    assert str(response) == '{"a": [1, 2]}'
    assert response.content() == b'{"a": [1, 2]}'


def test_json_returns_none_for_invalid_or_empty_bodies():
    assert make_response(200, text="<html>not json</html>").json() is None
    assert make_response(204).json() is None


@pytest.mark.parametrize("content", [b"123", b'"text"', b"true", b"null"])
def test_json_returns_none_for_bare_scalars(content):
    assert make_response(200, content=content).json() is None


def test_can_retrieve_the_raw_response_body(echo_transport):
    response = Http.with_handler(echo_transport).get("http://example.com/raw")
    assert response.body() == "A simple string response"


def test_xml_body_is_parsed(echo_transport):
    response = Http.with_handler(echo_transport).get("http://example.com/xml")
    root = response.xml()
    assert root.tag == "http"
    assert root.findtext("name") == "John"


def test_xml_strips_cdata_and_blank_text():
    response = make_response(200, content=b"<root>\n  <item><![CDATA[<b>bold</b>]]></item>\n</root>")
    root = response.xml()
    assert root.findtext("item") == "<b>bold</b>"
    assert root.text is None


def test_xml_returns_none_for_empty_body():
    assert make_response(200, content=b"").xml() is None
    assert make_response(200, content=b"   ").xml() is None


def test_xml_returns_none_for_bodies_that_are_not_xml(echo_transport):
    assert make_response(200, content=b"not xml at all").xml() is None
    assert Http.with_handler(echo_transport).get("http://example.com/get").xml() is None


def test_header_joins_values_and_headers_keeps_first():
    response = make_response(
        200,
        headers=[("Content-Type", "application/json"), ("X-Multi", "one"), ("X-Multi", "two")],
    )
    assert response.header("Content-Type") == "application/json"
    assert response.header("content-type") == "application/json"
    assert response.header("X-Multi") == "one, two"
    assert response.header("Missing") == ""

    headers = response.headers()
    assert headers["Content-Type"] == "application/json"
    assert headers["X-Multi"] == "one"


def test_response_exposes_reason_url_and_raw():
    response = make_response(404)
    assert response.reason() == "Not Found"
    assert response.url() == "http://example.com/"
    assert isinstance(response.raw, httpx.Response)
    assert repr(response) == "<HttpResponse [404]>"


def test_macros_are_bound_to_the_response():
    HttpResponse.macro("status_plus", lambda response, offset=0: response.status() + offset)
    response = make_response(201)

    assert HttpResponse.has_macro("status_plus")
    assert response.call("status_plus") == 201
    assert response.call("status_plus", 5) == 206
    assert response.status_plus(offset=1) == 202


def test_unregistered_macro_raises_no_such_operation():
    response = make_response(200)
    with pytest.raises(NoSuchOperation) as excinfo:
        response.call("missing")
    assert excinfo.value.name == "missing"

    with pytest.raises(NoSuchOperation):
        response.missing()

    assert hasattr(response, "missing") is False


def test_flush_macros_removes_registrations():
    HttpResponse.macro("temp", lambda response: "x")
    HttpResponse.flush_macros()
    assert HttpResponse.has_macro("temp") is False


def test_macro_registration_validates_arguments():
    with pytest.raises(TypeError):
        HttpResponse.macro("bad", "not callable")
    with pytest.raises(ValueError):
        HttpResponse.macro("", lambda response: None)


def test_request_view_is_read_only_snapshot():
    request = httpx.Request(
        "post",
        "http://example.com/post?x=1",
        headers=[("X-Multi", "a"), ("X-Multi", "b")],
        content=b"payload",
    )
    view = HttpRequest.from_httpx(request)
    assert view.url() == "http://example.com/post?x=1"
    assert view.method() == "POST"
    assert view.body() == "payload"
    assert view.headers()["X-Multi"] == "a"

    view.headers()["X-Multi"] = "changed"
    assert view.headers()["X-Multi"] == "a"
