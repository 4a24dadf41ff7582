# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Jira fingerprinting probes: platform markers, version and server info."""

from __future__ import annotations

from typing import Any

from ...http import HttpResponse
from ...models import FindingKind
from ..base import JsonProbe, MarkerProbe, Probe, as_dict
from ..constants import (
    DEV_MODE_MARKER,
    JIRA_MARKER,
    PATH_DASHBOARD,
    PATH_LOGIN,
    PATH_ROOT,
    PATH_SERVER_INFO,
    PREFIX_SERVER_INFO,
)
from ..version import extract_version


class LoginPageProbe(MarkerProbe):
    name = "login_page"
    description = "Jira detected from login page"
    paths = (PATH_LOGIN,)
    markers = (JIRA_MARKER,)


class DashboardPageProbe(MarkerProbe):
    name = "dashboard_page"
    description = "Jira detected from dashboard page"
    paths = (PATH_DASHBOARD,)
    markers = (JIRA_MARKER,)


class VersionProbe(Probe):
    kind = FindingKind.VALUE

    def classify(self, response: HttpResponse) -> str | None:
        version = extract_version(response.text)
        return str(version) if version else None


class DashboardVersionProbe(VersionProbe):
    name = "version_dashboard"
    description = "Jira version from dashboard page"
    paths = (PATH_DASHBOARD,)


class LoginVersionProbe(VersionProbe):
    name = "version_login"
    description = "Jira version from login page"
    paths = (PATH_LOGIN,)


class ServerInfoProbe(JsonProbe):
    name = "server_info"
    description = "Server information"
    kind = FindingKind.RECORD
    paths = (PATH_SERVER_INFO,)
    json_prefix = PREFIX_SERVER_INFO

    def extract(self, data: Any) -> dict[str, Any]:
        return as_dict(data)


class DevModeProbe(MarkerProbe):
    name = "dev_mode"
    description = "Dev mode enabled"
    paths = (PATH_ROOT,)
    markers = (DEV_MODE_MARKER,)
