# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from jirascan.http.url import build_base_dir_url, resolve_probe_url
from jirascan.models import Finding, FindingKind, ScanReport, Target, VersionInfo


@pytest.mark.parametrize(
    "url",
    ["http://jira.test/jira", "http://jira.test/jira/", "http://jira.test/jira//", "http://jira.test/jira?x=1#top"],
)
def test_target_always_has_exactly_one_trailing_slash(url):
    target = Target.from_url(url)
    assert target.base_url == "http://jira.test/jira/"
    assert target.request("login.jsp").url == "http://jira.test/jira/login.jsp"


def test_target_root_and_query_resolution():
    target = Target.from_url("https://jira.test")
    assert target.base_url == "https://jira.test/"
    assert target.request("").url == "https://jira.test/"
    request = target.request("rest/api/2/dashboard", "maxResults=1000")
    assert request.url == "https://jira.test/rest/api/2/dashboard?maxResults=1000"


def test_url_helpers():
    assert build_base_dir_url("http://h") == "http://h/"
    assert resolve_probe_url("http://h/", "/secure/Dashboard.jspa") == "http://h/secure/Dashboard.jspa"
    assert resolve_probe_url("http://h/", "secure/QueryComponent!Jql.jspa", "jql=") == "http://h/secure/QueryComponent!Jql.jspa?jql="


def test_version_info_serialization():
    assert str(VersionInfo(version="9.4.14", build="940014")) == "9.4.14-#940014"


@pytest.mark.parametrize(
    ("kind", "empty"),
    [
        (FindingKind.FLAG, False),
        (FindingKind.VALUE, None),
        (FindingKind.RECORD, {}),
        (FindingKind.RECORDS, []),
    ],
)
def test_absent_findings_use_canonical_empty_values(kind, empty):
    finding = Finding.absent("probe", kind)
    assert finding.value == empty
    assert finding.positive is False


def test_finding_and_report_to_dict():
    users = Finding(probe="user_picker_users", kind=FindingKind.RECORDS, value=[("admin", "Admin")])
    flag = Finding.absent("dev_mode", FindingKind.FLAG)
    report = ScanReport(target="http://jira.test/", findings={users.probe: users, flag.probe: flag})

    assert report.positive_findings() == [users]
    assert report.value("user_picker_users") == [("admin", "Admin")]
    assert report.value("missing") is None
    assert report.get("dev_mode") is flag
    assert report.to_dict() == {
        "target": "http://jira.test/",
        "findings": {
            "user_picker_users": {"probe": "user_picker_users", "kind": "records", "value": [["admin", "Admin"]]},
            "dev_mode": {"probe": "dev_mode", "kind": "flag", "value": False},
        },
    }
