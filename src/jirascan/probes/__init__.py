# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe catalog: independent checks mapping a target to a Finding."""

from .base import JsonProbe, JsonRecordsProbe, MarkerProbe, Probe, guarded_json
from .registry import PROBES, get_probe, probe_names, select_probes
from .version import extract_version

__all__ = [
    "JsonProbe",
    "JsonRecordsProbe",
    "MarkerProbe",
    "PROBES",
    "Probe",
    "extract_version",
    "get_probe",
    "guarded_json",
    "probe_names",
    "select_probes",
]
