# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Target and probe request models."""

from __future__ import annotations

from dataclasses import dataclass

from ..http.url import build_base_dir_url, resolve_probe_url


@dataclass(frozen=True)
class Target:
    """Base URL of the system under examination, always ending in exactly one ``/``."""

    base_url: str

    @classmethod
    def from_url(cls, url: str) -> Target:
        return cls(base_url=build_base_dir_url(url))

    def request(self, path: str, query: str | None = None) -> ProbeRequest:
        return ProbeRequest(target=self, path=path, query=query)


@dataclass(frozen=True)
class ProbeRequest:
    target: Target
    path: str
    query: str | None = None

    @property
    def url(self) -> str:
        return resolve_probe_url(self.target.base_url, self.path, self.query)
