# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used by the fetch layer and probes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..errors import ErrorCategory
from .headers import header_value

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None


@dataclass
class HttpResponse:
    """
    Normalized HTTP response.

    A transport failure is represented by ``ok=False`` with no status code; the
    ``url`` still names the target that could not be fetched.
    """

    ok: bool
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    text: str = ""
    content: bytes = b""
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    error_category: ErrorCategory = ErrorCategory.NONE
    meta: dict[str, Any] = field(default_factory=dict)

    def header(self, name: str, default: str = "") -> str:
        """Case-insensitive header lookup."""
        return header_value(self.headers, name, default)

    @classmethod
    def failure(cls, url: str, exc: BaseException, category: ErrorCategory) -> HttpResponse:
        return cls(
            ok=False,
            url=url,
            error_message=str(exc),
            error_type=type(exc).__name__,
            error_category=category,
        )
