# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
JiraScan package entrypoint.

JiraScan fingerprints a Jira instance from the outside and runs a fixed catalog
of anonymous GET probes for known misconfigurations and information leaks.
HTTP behavior is abstracted behind an injectable client interface, and each
probe is a registered object producing a typed Finding.
"""

from .config import HttpSettings, ScanSettings, load_http_settings, load_scan_settings
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .models import Finding, FindingKind, ScanReport, Target, VersionInfo
from .probes import PROBES, Probe, extract_version, get_probe
from .runtime import JiraScan
from .scan import ScanEngine
from .version import __version__

__all__ = [
    "Finding",
    "FindingKind",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "JiraScan",
    "PROBES",
    "Probe",
    "ScanEngine",
    "ScanReport",
    "ScanSettings",
    "StubHttpClient",
    "Target",
    "VersionInfo",
    "create_default_http_client",
    "extract_version",
    "get_probe",
    "load_http_settings",
    "load_scan_settings",
    "setup_logging",
    "__version__",
]
