# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Finding and version models produced by probes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class FindingKind(str, Enum):
    FLAG = "flag"
    VALUE = "value"
    RECORD = "record"
    RECORDS = "records"

    def empty(self) -> Any:
        """Canonical negative value for this kind."""
        if self is FindingKind.FLAG:
            return False
        if self is FindingKind.RECORD:
            return {}
        if self is FindingKind.RECORDS:
            return []
        return None


@dataclass(frozen=True)
class VersionInfo:
    version: str
    build: str

    def __str__(self) -> str:
        return f"{self.version}-#{self.build}"


@dataclass(frozen=True)
class Finding:
    """
    Classified output of one probe.

    Absent findings hold the empty value of their kind. A probe that could not
    reach the target and a probe that found nothing produce the same absent
    finding.
    """

    probe: str
    kind: FindingKind
    value: Any

    @classmethod
    def absent(cls, probe: str, kind: FindingKind) -> Finding:
        return cls(probe=probe, kind=kind, value=kind.empty())

    @property
    def positive(self) -> bool:
        return bool(self.value)

    def to_dict(self) -> dict[str, Any]:
        value = self.value
        if self.kind == FindingKind.RECORDS:
            value = [list(item) for item in value]
        elif self.kind == FindingKind.RECORD:
            value = dict(value)
        return {"probe": self.probe, "kind": self.kind.value, "value": value}
