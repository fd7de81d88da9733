# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
fluenthttp package entrypoint.

A fluent builder for outbound HTTP requests: configuration (headers, body format,
auth, cookies, timeouts, redirect policy, before-sending hooks) accumulates through
chained calls and a single request is dispatched through httpx. Responses are
wrapped in a small accessor object that buffers the body once.
"""

from .config import HttpSettings, load_http_settings
from .errors import ConnectionException, FluentHttpError, NoSuchOperation, UnsupportedBodyFormat
from .facade import Http
from .http import HttpRequest, HttpResponse, HttpxTransport, Transport, create_default_transport
from .log import setup_logging
from .pending import PendingHttpRequest
from .version import __version__

__all__ = [
    "ConnectionException",
    "FluentHttpError",
    "Http",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxTransport",
    "NoSuchOperation",
    "PendingHttpRequest",
    "Transport",
    "UnsupportedBodyFormat",
    "create_default_transport",
    "load_http_settings",
    "setup_logging",
    "__version__",
]
