# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Named extension operations that can be attached to a class at runtime."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..errors import NoSuchOperation

Macro = Callable[..., Any]


class MacroRegistry:
    """
    Mapping of operation name -> function.

    A macro is called with the bound instance as its first argument, followed by
    whatever the caller passed.
    """

    def __init__(self, owner: str):
        self.owner = owner
        self._macros: dict[str, Macro] = {}

    def register(self, name: str, macro: Macro) -> None:
        if not name or not isinstance(name, str):
            raise ValueError("macro name must be a non-empty string")
        if not callable(macro):
            raise TypeError(f"macro {name!r} must be callable")
        self._macros[name] = macro

    def has(self, name: str) -> bool:
        return name in self._macros

    def get(self, name: str) -> Macro:
        try:
            return self._macros[name]
        except KeyError:
            raise NoSuchOperation(name, self.owner) from None

    def invoke(self, instance: Any, name: str, *args: Any, **kwargs: Any) -> Any:
        return self.get(name)(instance, *args, **kwargs)

    def flush(self) -> None:
        self._macros.clear()


__all__ = ["Macro", "MacroRegistry"]
