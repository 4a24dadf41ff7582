# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for JiraScan."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .finding import Finding, FindingKind, VersionInfo
from .report import ScanReport
from .target import ProbeRequest, Target

__all__ = [
    "Finding",
    "FindingKind",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "ProbeRequest",
    "ScanReport",
    "Target",
    "VersionInfo",
]
