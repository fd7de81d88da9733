# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl
from enum import Enum

import httpx


class FluentHttpError(Exception):
    """Base class for every error raised by fluenthttp."""


class ConnectionException(FluentHttpError):
    """The transport could not complete the exchange (refused, DNS, TLS, timeout)."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class UnsupportedBodyFormat(FluentHttpError, ValueError):
    """A request was dispatched with a body format the transport cannot encode."""

    def __init__(self, body_format: object):
        super().__init__(f"Unsupported body format: {body_format!r}")
        self.body_format = body_format


class NoSuchOperation(FluentHttpError, AttributeError):
    """An unregistered extension was invoked on a response."""

    def __init__(self, name: str, owner: str = "HttpResponse"):
        super().__init__(f"Method {owner}::{name} does not exist.")
        self.name = name


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


def _root_cause(exc: BaseException) -> BaseException:
    seen = set()
    current = exc
    while current.__cause__ is not None or current.__context__ is not None:
        if id(current) in seen:
            break
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return current


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map httpx/socket exceptions to ErrorCategory.

    httpx wraps the low-level socket error, so the innermost cause is inspected for
    TLS and name resolution failures.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    root = _root_cause(exc)
    if isinstance(root, (ssl.SSLError, ssl.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(root, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.NetworkError, httpx.ProxyError, httpx.RemoteProtocolError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(root, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """Human-readable reason string for log lines."""
    mapping = {
        ErrorCategory.TIMEOUT: "Request timed out",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.UNKNOWN_ERROR: "Transport error",
        None: "",
    }
    return mapping.get(category, "Transport error")


__all__ = [
    "ConnectionException",
    "ErrorCategory",
    "FluentHttpError",
    "NoSuchOperation",
    "UnsupportedBodyFormat",
    "categorize_exception",
    "error_category_to_reason",
]
