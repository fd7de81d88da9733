# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for fluenthttp."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("FLUENTHTTP_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
PACKAGE_LOGGER = "fluenthttp"


def setup_logging(level: str | None = None, stream=None) -> logging.Logger:
    """
    Attach a stream handler to the ``fluenthttp`` logger and set its level.

    The root logger is left alone, so an application's own logging setup is not
    overridden. Calling this again updates the level and reuses the handler.
    """
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, effective_level, logging.WARNING))

    handler = next((h for h in package_logger.handlers if getattr(h, "_fluenthttp", False)), None)
    if handler is None:
        handler = logging.StreamHandler(stream)
        handler._fluenthttp = True  # type: ignore[attr-defined]
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    elif stream is not None:
        handler.setStream(stream)
    return package_logger


__all__ = ["LOG_FORMAT", "PACKAGE_LOGGER", "setup_logging"]
