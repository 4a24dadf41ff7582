# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import ErrorCategory, categorize_exception, error_category_to_reason
from .client import HttpClient
from .headers import header_value, normalize_headers
from .models import HttpRequest, HttpResponse


class HttpxClient(HttpClient):
    """
    Synchronous httpx client wrapper.

    Redirects are never followed: every probe classifies the status code of the
    exact URL it asked for. gzip/deflate bodies are decoded by httpx while the
    body is streamed, so callers only ever see decompressed text.
    """

    def __init__(
        self,
        settings: HttpSettings | None = None,
        client: httpx.Client | None = None,
        logger: logging.Logger | None = None,
    ):
        self.settings = settings or load_http_settings()
        self.logger = logger or logging.getLogger(__name__)
        self._client = client or httpx.Client(
            follow_redirects=False,
            timeout=self._timeout(),
            verify=self.settings.verify_ssl,
        )

    def _timeout(self) -> httpx.Timeout:
        return httpx.Timeout(
            self.settings.read_timeout,
            connect=self.settings.connect_timeout,
            read=self.settings.read_timeout,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)
        headers.setdefault("Accept-Encoding", self.settings.accept_encoding)
        max_body_bytes = self.settings.max_body_bytes
        if max_body_bytes <= 0:
            max_body_bytes = 16 * 1024 * 1024

        self.logger.info("Fetching %s", request.url)
        try:
            with self._client.stream(
                request.method,
                request.url,
                headers=headers,
                timeout=self._timeout(),
                follow_redirects=False,
            ) as resp:
                content = bytearray()
                truncated = False
                for chunk in resp.iter_bytes():
                    if not chunk:
                        continue
                    remaining = max_body_bytes - len(content)
                    if len(chunk) > remaining:
                        content.extend(chunk[:remaining])
                        truncated = True
                        break
                    content.extend(chunk)

                encoding = resp.encoding or "utf-8"
                try:
                    text = bytes(content).decode(encoding, errors="replace")
                except LookupError:
                    text = bytes(content).decode("utf-8", errors="replace")
        except Exception as exc:  # noqa: BLE001
            category = categorize_exception(exc)
            reason = error_category_to_reason(category) if category == ErrorCategory.TIMEOUT else str(exc)
            self.logger.error("Could not retrieve URL %s: %s", request.url, reason)
            return HttpResponse.failure(request.url, exc, category)

        self.logger.info("Received reply (%d bytes)", len(content))
        content_encoding = header_value(resp.headers, "content-encoding")
        if content_encoding:
            self.logger.debug("Decoded %s body from %s", content_encoding, request.url)
        if truncated:
            self.logger.warning("Reply from %s truncated at %d bytes", request.url, max_body_bytes)
        return HttpResponse(
            ok=True,
            status_code=resp.status_code,
            headers=normalize_headers(resp.headers),
            text=text,
            content=bytes(content),
            url=str(resp.url),
            meta={
                "body_truncated": truncated,
                "body_bytes_read": len(content),
                "body_bytes_limit": max_body_bytes,
            },
        )

    def close(self) -> None:
        self._client.close()
