# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for JiraScan."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("JIRASCAN_LOG_LEVEL", "WARNING").upper()
VERBOSE_LOG_LEVEL = "INFO"

# httpx/httpcore log every request at INFO, which duplicates our own fetch lines.
_NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str | None = None, *, verbose: bool = False) -> None:
    """Configure standard logging for CLI/library use."""
    effective_level = VERBOSE_LOG_LEVEL if verbose else (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = ["setup_logging"]
