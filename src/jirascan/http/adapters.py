# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-memory HttpClient used for tests and offline fixtures."""

from __future__ import annotations

from ..errors import ErrorCategory
from .client import HttpClient
from .models import HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """
    Deterministic, programmable HttpClient.

    Responses are keyed by exact URL; ``add_prefix`` covers paths with random
    components.
    """

    def __init__(self, responses: dict[str, HttpResponse] | None = None):
        self._responses: dict[str, HttpResponse] = dict(responses or {})
        self._prefixes: list[tuple[str, HttpResponse]] = []
        self.requests: list[HttpRequest] = []

    def add(self, url: str, response: HttpResponse) -> None:
        self._responses[url] = response

    def add_prefix(self, prefix: str, response: HttpResponse) -> None:
        self._prefixes.append((prefix, response))

    def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        if request.url in self._responses:
            return self._responses[request.url]
        for prefix, response in self._prefixes:
            if request.url.startswith(prefix):
                return response
        return HttpResponse(
            ok=False,
            url=request.url,
            error_message="No stubbed response configured",
            error_category=ErrorCategory.CONNECTION_ERROR,
        )

    def close(self) -> None:
        return None
