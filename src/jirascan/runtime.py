# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level JiraScan facade."""

from __future__ import annotations

from collections.abc import Iterable
from contextlib import suppress

from .config import HttpSettings, ScanSettings, load_http_settings, load_scan_settings
from .http.client import HttpClient, create_default_http_client
from .models import Finding, ScanReport, Target
from .probes import get_probe
from .scan.engine import ScanEngine


class JiraScan:
    """
    Convenience wrapper that wires one HTTP client into every probe.

    Use as a context manager so the underlying connection pool is closed.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        *,
        http_settings: HttpSettings | None = None,
        scan_settings: ScanSettings | None = None,
    ):
        self.http_settings = http_settings or load_http_settings()
        self.scan_settings = scan_settings or load_scan_settings()
        self.http_client = http_client or create_default_http_client(self.http_settings)
        self.scan_engine = ScanEngine(self.http_client, self.scan_settings)

    def check(self, name: str, url: str) -> Finding:
        """Run a single named probe."""
        return self.scan_engine.run_probe(get_probe(name), Target.from_url(url))

    def scan(self, url: str, probes: Iterable[str] | None = None) -> ScanReport:
        return self.scan_engine.run(url, probes)

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> JiraScan:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
