# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP layer exports."""

from .client import Transport, create_default_transport
from .cookies import default_cookie_jar, reset_default_cookie_jar
from .headers import first_values, has_header, header_items
from .hooks import BeforeSendingHook, HookChain
from .httpx_client import HttpxTransport
from .macros import MacroRegistry
from .models import HttpRequest, HttpResponse
from .options import RequestOptions, merge_headers, merge_options, merge_query, validate_body_format
from .url import append_query, drop_query_keys

__all__ = [
    "BeforeSendingHook",
    "HookChain",
    "HttpRequest",
    "HttpResponse",
    "HttpxTransport",
    "MacroRegistry",
    "RequestOptions",
    "Transport",
    "append_query",
    "create_default_transport",
    "default_cookie_jar",
    "drop_query_keys",
    "first_values",
    "has_header",
    "header_items",
    "merge_headers",
    "merge_options",
    "merge_query",
    "reset_default_cookie_jar",
    "validate_body_format",
]
