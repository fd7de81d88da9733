# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport abstraction and factory."""

from collections.abc import Callable, Mapping
from typing import Any, Protocol

import httpx

from ..config import HttpSettings, load_http_settings

RequestObserver = Callable[[httpx.Request], None]


class Transport(Protocol):
    """
    Executes one HTTP exchange.

    Implementations return 4xx/5xx responses normally and raise ``httpx.RequestError``
    (or a subclass) when no response could be obtained.
    """

    def execute(
        self,
        method: str,
        url: str,
        options: Mapping[str, Any],
        on_request: RequestObserver | None = None,
    ) -> httpx.Response: ...


def create_default_transport(settings: HttpSettings | None = None) -> Transport:
    """Factory for the default httpx-backed transport."""
    from .httpx_client import HttpxTransport

    return HttpxTransport(settings or load_http_settings())
