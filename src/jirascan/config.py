# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for JiraScan."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"JiraScan/{__version__}"
DEFAULT_ACCEPT_ENCODING = "gzip,deflate"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _optional_float_env(name: str, default: float | None) -> float | None:
    try:
        value = os.getenv(name)
        if value is None:
            return default
        parsed = float(value)
        return parsed if parsed > 0 else None
    except ValueError:
        return default


@dataclass
class HttpSettings:
    """Fetch layer defaults."""

    connect_timeout: float = 20.0
    read_timeout: float = 20.0
    user_agent: str = DEFAULT_USER_AGENT
    accept_encoding: str = DEFAULT_ACCEPT_ENCODING
    verify_ssl: bool = True
    max_body_bytes: int = 16 * 1024 * 1024

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_body_bytes = _int_env("JIRASCAN_HTTP_MAX_BODY_BYTES", cls.max_body_bytes)
        if max_body_bytes <= 0:
            max_body_bytes = cls.max_body_bytes
        return cls(
            connect_timeout=_float_env("JIRASCAN_HTTP_CONNECT_TIMEOUT", cls.connect_timeout),
            read_timeout=_float_env("JIRASCAN_HTTP_READ_TIMEOUT", cls.read_timeout),
            user_agent=os.getenv("JIRASCAN_USER_AGENT", cls.user_agent),
            verify_ssl=_bool_env("JIRASCAN_HTTP_VERIFY_SSL", cls.verify_ssl),
            max_body_bytes=max_body_bytes,
        )


@dataclass
class ScanSettings:
    """Probe scheduling defaults."""

    max_workers: int = 4
    deadline: float | None = None

    @classmethod
    def from_env(cls) -> "ScanSettings":
        max_workers = _int_env("JIRASCAN_MAX_WORKERS", cls.max_workers)
        return cls(
            max_workers=max_workers if max_workers > 0 else cls.max_workers,
            deadline=_optional_float_env("JIRASCAN_SCAN_DEADLINE", cls.deadline),
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()


def load_scan_settings() -> ScanSettings:
    return ScanSettings.from_env()
