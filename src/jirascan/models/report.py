# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Scan report model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .finding import Finding


@dataclass
class ScanReport:
    """Findings for one target, in catalog order."""

    target: str
    findings: dict[str, Finding] = field(default_factory=dict)

    def get(self, probe: str) -> Finding | None:
        return self.findings.get(probe)

    def value(self, probe: str) -> Any:
        finding = self.findings.get(probe)
        return finding.value if finding is not None else None

    def positive_findings(self) -> list[Finding]:
        return [finding for finding in self.findings.values() if finding.positive]

    def to_dict(self) -> dict[str, Any]:
        return {
            "target": self.target,
            "findings": {name: finding.to_dict() for name, finding in self.findings.items()},
        }
