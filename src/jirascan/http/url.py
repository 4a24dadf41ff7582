# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers shared across probes."""

from __future__ import annotations

from urllib.parse import urlparse


def build_base_dir_url(base_url: str) -> str:
    """
    Convert a target URL into a "directory" URL with exactly one trailing slash.

    Example:
      http://host/jira   -> http://host/jira/
      http://host/jira// -> http://host/jira/
    """
    parsed = urlparse(str(base_url or "").strip())
    path = parsed.path.rstrip("/") + "/"
    return parsed._replace(path=path, params="", query="", fragment="").geturl()


def resolve_probe_url(base_dir_url: str, path: str, query: str | None = None) -> str:
    """Append a relative probe path (and optional query) to a directory URL."""
    url = base_dir_url + str(path or "").lstrip("/")
    if query:
        url = f"{url}?{query}"
    return url


__all__ = ["build_base_dir_url", "resolve_probe_url"]
