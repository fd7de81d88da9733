# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pre-send hook chain."""

from __future__ import annotations

from collections.abc import Callable

from .models import HttpRequest

BeforeSendingHook = Callable[[HttpRequest], "HttpRequest | None"]


class HookChain:
    """Ordered callbacks run against a read-only view of every outgoing request."""

    def __init__(self, hooks: list[BeforeSendingHook] | None = None):
        self._hooks: list[BeforeSendingHook] = list(hooks or [])

    def append(self, hook: BeforeSendingHook) -> None:
        if not callable(hook):
            raise TypeError(f"before-sending hook must be callable, got {type(hook).__name__}")
        self._hooks.append(hook)

    def run(self, request: HttpRequest) -> HttpRequest:
        """
        Invoke the hooks in registration order.

        Each hook receives the view returned by the previous one; a hook returning
        None passes its input along unchanged.
        """
        current = request
        for hook in self._hooks:
            result = hook(current)
            if result is not None:
                current = result
        return current

    def __len__(self) -> int:
        return len(self._hooks)

    def __bool__(self) -> bool:
        return bool(self._hooks)


__all__ = ["BeforeSendingHook", "HookChain"]
