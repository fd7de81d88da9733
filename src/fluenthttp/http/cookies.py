# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Cookie jar handles.

Callers normally pass their own ``CookieJar`` to ``with_cookies()``. The
process-wide default jar only exists once ``with_cookies()`` is called without one.
``CookieJar`` serializes access to its store with an internal lock, so sharing a jar
across threads is safe for reads and writes of individual cookies.
"""

from __future__ import annotations

import threading
from http.cookiejar import CookieJar

_default_jar: CookieJar | None = None
_default_jar_lock = threading.Lock()


def default_cookie_jar() -> CookieJar:
    """Return the shared process-wide jar, creating it on first use."""
    global _default_jar
    with _default_jar_lock:
        if _default_jar is None:
            _default_jar = CookieJar()
        return _default_jar


def reset_default_cookie_jar() -> None:
    """Forget the shared jar; the next ``default_cookie_jar()`` call starts empty."""
    global _default_jar
    with _default_jar_lock:
        _default_jar = None


__all__ = ["CookieJar", "default_cookie_jar", "reset_default_cookie_jar"]
