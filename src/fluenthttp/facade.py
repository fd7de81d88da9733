# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Top-level entry point: ``Http.with_headers(...).get(url)``."""

from __future__ import annotations

from typing import Any

from .pending import PendingHttpRequest


class _HttpFactory:
    """
    Starts a fresh PendingHttpRequest for every top-level call.

    ``Http.get(url)`` and ``Http.as_form_params().post(url, data)`` never share
    state with another chain.
    """

    def new(self, **kwargs: Any) -> PendingHttpRequest:
        return PendingHttpRequest.new(**kwargs)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or not callable(getattr(PendingHttpRequest, name, None)):
            raise AttributeError(f"Http has no attribute {name!r}")
        return getattr(PendingHttpRequest.new(), name)

    def __dir__(self) -> list[str]:
        public = [name for name in dir(PendingHttpRequest) if not name.startswith("_")]
        return sorted(set(public) | {"new"})


Http = _HttpFactory()

__all__ = ["Http"]
