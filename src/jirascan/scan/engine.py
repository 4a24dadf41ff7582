# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Scan engine: runs selected probes against a single target."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from concurrent.futures import TimeoutError as FuturesTimeoutError

from ..config import ScanSettings, load_scan_settings
from ..http import HttpClient, create_default_http_client
from ..models import Finding, ScanReport, Target
from ..probes import Probe, select_probes

logger = logging.getLogger(__name__)


class ScanEngine:
    """
    Coordinates probes for one target.

    Probes share nothing but the read-only HTTP client, so they may run on a
    bounded thread pool. Findings are always reported in catalog order.
    """

    def __init__(self, http_client: HttpClient | None = None, settings: ScanSettings | None = None):
        self.http_client = http_client or create_default_http_client()
        self.settings = settings or load_scan_settings()

    def run(self, url: str, probes: Iterable[str] | None = None) -> ScanReport:
        target = Target.from_url(url)
        selected = select_probes(probes)
        findings = self._run_probes(target, selected)
        return ScanReport(
            target=target.base_url,
            findings={probe.name: findings[probe.name] for probe in selected},
        )

    def run_probe(self, probe: Probe, target: Target) -> Finding:
        try:
            return probe.run(target, self.http_client)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Probe %s failed: %s", probe.name, exc)
            return Finding.absent(probe.name, probe.kind)

    def _run_probes(self, target: Target, probes: list[Probe]) -> dict[str, Finding]:
        if not probes:
            return {}
        workers = max(1, min(self.settings.max_workers, len(probes)))
        if workers == 1 and self.settings.deadline is None:
            return {probe.name: self.run_probe(probe, target) for probe in probes}

        findings: dict[str, Finding] = {}
        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="jirascan-probe")
        futures: dict[Future[Finding], Probe] = {executor.submit(self.run_probe, probe, target): probe for probe in probes}
        try:
            for future in as_completed(futures, timeout=self.settings.deadline):
                findings[futures[future].name] = future.result()
        except FuturesTimeoutError:
            for future, probe in futures.items():
                if future.done() and probe.name not in findings:
                    findings[probe.name] = future.result()
            unfinished = [probe.name for probe in probes if probe.name not in findings]
            logger.warning(
                "Scan deadline of %ss reached; %d probe(s) unfinished: %s",
                self.settings.deadline,
                len(unfinished),
                ", ".join(unfinished),
            )
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        for probe in probes:
            findings.setdefault(probe.name, Finding.absent(probe.name, probe.kind))
        return findings
