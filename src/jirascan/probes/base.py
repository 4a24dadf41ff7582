# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe base classes.

A probe issues one GET per candidate path, checks the status code and turns the
body into a Finding. Fetch failures, unexpected status codes and bodies that do
not match all fold into the absent Finding for the probe's kind.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from ..http import HttpClient, HttpRequest, HttpResponse
from ..models import Finding, FindingKind, ProbeRequest, Target

logger = logging.getLogger(__name__)


def guarded_json(text: str, prefix: str, required: Iterable[str] = ()) -> Any | None:
    """
    Parse ``text`` as JSON only when it starts with ``prefix`` and mentions every
    ``required`` token.

    The literal prefix rejects HTML error pages served with a 200 status before
    any parsing happens. Returns ``None`` when the guard or the parse fails.
    """
    if not text.startswith(prefix):
        return None
    if any(token not in text for token in required):
        return None
    try:
        return json.loads(text)
    except (ValueError, RecursionError):
        return None


def as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


class Probe(ABC):
    name: str = "base"
    description: str = ""
    kind: FindingKind = FindingKind.FLAG
    expected_status: int = 200
    paths: tuple[str, ...] = ()
    query: str | None = None

    def requests(self, target: Target) -> list[ProbeRequest]:
        return [target.request(path, self.query) for path in self.paths]

    @abstractmethod
    def classify(self, response: HttpResponse) -> Any: ...

    def run(self, target: Target | str, client: HttpClient) -> Finding:
        if not isinstance(target, Target):
            target = Target.from_url(target)

        for probe_request in self.requests(target):
            response = client.request(HttpRequest(url=probe_request.url))
            if not response.ok:
                logger.debug(
                    "Probe %s could not fetch %s: %s (%s)",
                    self.name,
                    probe_request.url,
                    response.error_message,
                    response.error_category.value,
                )
                continue
            if response.status_code != self.expected_status:
                logger.debug(
                    "Probe %s got status %s from %s (expected %s)",
                    self.name,
                    response.status_code,
                    probe_request.url,
                    self.expected_status,
                )
                continue
            value = self.classify(response)
            if value:
                return Finding(probe=self.name, kind=self.kind, value=value)
            logger.debug("Probe %s found no match at %s", self.name, probe_request.url)

        return Finding.absent(self.name, self.kind)

    def __call__(self, target: Target | str, client: HttpClient) -> Finding:
        return self.run(target, client)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"{self.__class__.__name__}(name={self.name!r})"


class MarkerProbe(Probe):
    """Positive when the body contains any of ``markers``."""

    markers: tuple[str, ...] = ()

    def classify(self, response: HttpResponse) -> bool:
        body = response.text or ""
        return any(marker in body for marker in self.markers)


class JsonProbe(Probe):
    """Base for probes reading a JSON document guarded by a literal prefix."""

    kind = FindingKind.RECORDS
    json_prefix: str = ""
    required_tokens: tuple[str, ...] = ()

    def classify(self, response: HttpResponse) -> Any:
        data = guarded_json(response.text or "", self.json_prefix, self.required_tokens)
        if data is None:
            return self.kind.empty()
        return self.extract(data)

    @abstractmethod
    def extract(self, data: Any) -> Any: ...


class JsonRecordsProbe(JsonProbe):
    """
    Extract one tuple of ``fields`` per object.

    The objects are the top-level array, or the array under ``container`` when
    the document is an object. Missing fields become ``None``.
    """

    container: str | None = None
    fields: tuple[str, ...] = ()

    def extract(self, data: Any) -> list[tuple[Any, ...]]:
        items = as_dict(data).get(self.container) if self.container else data
        return [tuple(item.get(field) for field in self.fields) for item in as_list(items) if isinstance(item, dict)]


__all__ = [
    "JsonProbe",
    "JsonRecordsProbe",
    "MarkerProbe",
    "Probe",
    "as_dict",
    "as_list",
    "guarded_json",
]
