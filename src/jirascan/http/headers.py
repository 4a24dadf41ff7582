# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Case-insensitive header helpers.

Responses keep headers as lowercase-keyed dicts so probes and log lines never
depend on the casing a Jira front end or proxy happened to send.
"""

from __future__ import annotations

from typing import Any


def normalize_headers(headers: Any) -> dict[str, str]:
    """Return a lowercase-keyed copy of a dict, ``httpx.Headers`` or list of pairs."""
    if not headers:
        return {}
    pairs = headers.items() if callable(getattr(headers, "items", None)) else headers
    out: dict[str, str] = {}
    for key, value in pairs:
        name = "" if key is None else str(key).strip().lower()
        if name:
            out[name] = "" if value is None else str(value)
    return out


def header_value(headers: Any, name: str, default: str = "") -> str:
    if not name:
        return default
    value = normalize_headers(headers).get(name.strip().lower())
    return default if value is None else value.strip()


__all__ = ["header_value", "normalize_headers"]
