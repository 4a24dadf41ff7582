# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import re

import pytest

from jirascan.http import HttpResponse, StubHttpClient
from jirascan.models import FindingKind
from jirascan.probes import get_probe
from jirascan.probes.checks.disclosure import random_token

BASE = "http://jira.test/"
USER_PICKER_URL = BASE + "secure/popups/UserPickerBrowser.jspa?max=1000"

ROW_WITH_EMAIL = """<tr>
    <td data-cell-type="name" class="user-name">{name}</td>
    <td data-cell-type="fullname" >{full}</td>
    <td data-cell-type="email" class="cell-type-email">{email}</td>
</tr>"""
ROW = """<tr>
    <td data-cell-type="name" class="user-name">{name}</td>
    <td data-cell-type="fullname" >{full}</td>
    <td data-cell-type="groups">jira-users</td>
</tr>"""
USERS = [("admin", "Administrator", "admin@example.com"), ("jdoe", "Jane Doe", "jdoe@example.com"), ("bob", "Bob", "bob@example.com")]


def ok(text: str, status: int = 200) -> HttpResponse:
    return HttpResponse(ok=True, status_code=status, text=text)


def _picker_page(rows: str) -> str:
    return f"<html><h1>User Picker</h1><table>{rows}</table></html>"


def test_user_enumeration_with_email_column():
    rows = "\n".join(ROW_WITH_EMAIL.format(name=n, full=f, email=e) for n, f, e in USERS)
    finding = get_probe("user_picker_users").run(BASE, StubHttpClient({USER_PICKER_URL: ok(_picker_page(rows))}))
    assert finding.kind == FindingKind.RECORDS
    assert finding.value == USERS


def test_user_enumeration_without_email_column():
    rows = "\n".join(ROW.format(name=n, full=f) for n, f, _ in USERS)
    finding = get_probe("user_picker_users").run(BASE, StubHttpClient({USER_PICKER_URL: ok(_picker_page(rows))}))
    assert finding.value == [(n, f) for n, f, _ in USERS]


def test_user_enumeration_requires_heading_and_status():
    rows = ROW.format(name="admin", full="Administrator")
    assert get_probe("user_picker_users").run(BASE, StubHttpClient({USER_PICKER_URL: ok(rows)})).value == []
    forbidden = StubHttpClient({USER_PICKER_URL: ok(_picker_page(rows), 403)})
    assert get_probe("user_picker_users").run(BASE, forbidden).value == []


def test_popular_filters_request_id_links():
    body = (
        "<h1>Manage Filters</h1>"
        '<a href="/secure/IssueNavigator.jspa?mode=hide&amp;requestId=10000">All bugs</a>'
        '<a href="/secure/IssueNavigator.jspa?mode=hide&amp;requestId=10001">My open issues</a>'
    )
    client = StubHttpClient({BASE + "secure/ManageFilters.jspa?filter=popular&filterView=popular": ok(body)})
    assert get_probe("popular_filters").run(BASE, client).value == [("10000", "All bugs"), ("10001", "My open issues")]


def test_popular_filters_filter_id_links():
    body = '<h1>Manage Filters</h1><a href="/issues/?filter=10100">Ops backlog</a>'
    client = StubHttpClient({BASE + "secure/ManageFilters.jspa?filter=popular&filterView=popular": ok(body)})
    assert get_probe("popular_filters").run(BASE, client).value == [("10100", "Ops backlog")]


def test_popular_filters_without_heading_or_links():
    url = BASE + "secure/ManageFilters.jspa?filter=popular&filterView=popular"
    assert get_probe("popular_filters").run(BASE, StubHttpClient({url: ok('<a href="?filter=1">x</a>')})).value == []
    assert get_probe("popular_filters").run(BASE, StubHttpClient({url: ok("<h1>Manage Filters</h1>")})).value == []


def test_meta_inf_probe_uses_random_token():
    client = StubHttpClient()
    client.add_prefix(BASE + "s/", ok('<project xmlns="http://maven.apache.org/POM/4.0.0">'))
    assert get_probe("meta_inf").run(BASE, client).value is True
    assert re.fullmatch(
        r"http://jira\.test/s/[0-9a-z]{6}/_/META-INF/maven/com\.atlassian\.jira/atlassian-jira-webapp/pom\.xml",
        client.requests[0].url,
    )


def test_meta_inf_probe_requires_project_prefix():
    client = StubHttpClient()
    client.add_prefix(BASE + "s/", ok("<html><project></project></html>"))
    assert get_probe("meta_inf").run(BASE, client).value is False


def test_random_token_shape(monkeypatch):
    assert re.fullmatch(r"[0-9a-z]{6}", random_token())
    monkeypatch.setattr("jirascan.probes.checks.disclosure.secrets.choice", lambda alphabet: alphabet[-1])
    assert random_token(3) == "zzz"


@pytest.mark.parametrize(
    ("name", "path", "body", "expected"),
    [
        (
            "dashboards",
            "rest/api/2/dashboard?maxResults=1000",
            '{"startAt":0,"maxResults":1000,"total":2,"dashboards":[{"id":"10000","name":"System Dashboard"},{"id":"10100","name":"Ops"}]}',
            [("10000", "System Dashboard"), ("10100", "Ops")],
        ),
        (
            "resolutions",
            "rest/api/2/resolution",
            '[{"self":"http://jira.test/rest/api/2/resolution/1","id":"1","description":"Work has been done","name":"Fixed"}]',
            [("1", "Fixed", "Work has been done")],
        ),
        (
            "projects",
            "rest/api/2/project?maxResults=1000",
            '[{"expand":"description,lead","self":"http://jira.test/rest/api/2/project/10000","id":"10000","key":"OPS","name":"Operations"}]',
            [("10000", "OPS", "Operations")],
        ),
        (
            "project_categories",
            "rest/api/2/projectCategory",
            '[{"self":"http://jira.test/rest/api/2/projectCategory/10000","id":"10000","name":"Internal","description":"Internal work"}]',
            [("10000", "Internal", "Internal work")],
        ),
        (
            "linked_applications",
            "rest/menu/latest/admin",
            '[{"key":"admin","link":"http://jira.test/secure/admin","label":"Jira administration","applicationType":"jira"}]',
            [("http://jira.test/secure/admin", "Jira administration", "jira")],
        ),
        (
            "gadgets",
            "rest/config/1.0/directory.json",
            '{"categories":[{"name":"Charts"}],"gadgets":[{"title":"Pie Chart","authorName":"Atlassian","authorEmail":"jira@atlassian.com","description":"Pie"},{"title":"Clock"}]}',
            [("Pie Chart", "Atlassian", "jira@atlassian.com", "Pie"), ("Clock", None, None, None)],
        ),
    ],
)
def test_json_listing_probes(name, path, body, expected):
    finding = get_probe(name).run(BASE, StubHttpClient({BASE + path: ok(body)}))
    assert finding.kind == FindingKind.RECORDS
    assert finding.value == expected

    html = StubHttpClient({BASE + path: ok("<html><title>Error</title>" + body + "</html>")})
    assert get_probe(name).run(BASE, html).value == []

    broken = StubHttpClient({BASE + path: ok(body[: len(body) // 2])})
    assert get_probe(name).run(BASE, broken).value == []

    unauthorized = StubHttpClient({BASE + path: ok(body, 401)})
    assert get_probe(name).run(BASE, unauthorized).value == []


def test_json_guard_rejects_before_parsing(monkeypatch):
    calls = []

    def fake_loads(text, *args, **kwargs):  # noqa: ARG001
        calls.append(text)
        return []

    monkeypatch.setattr("jirascan.probes.base.json.loads", fake_loads)
    body = '{"values":[{"id":"1","name":"Fixed","description":"done"}]}'
    client = StubHttpClient({BASE + "rest/api/2/resolution": ok(body)})
    assert get_probe("resolutions").run(BASE, client).value == []
    assert calls == []


def test_json_listing_requires_field_tokens():
    body = '[{"self":"http://jira.test/rest/api/2/resolution/1","id":"1","name":"Fixed"}]'
    client = StubHttpClient({BASE + "rest/api/2/resolution": ok(body)})
    assert get_probe("resolutions").run(BASE, client).value == []


def test_deeply_nested_json_listing_is_empty():
    body = '[{"self":"id name description","x":' + "[" * 200000
    client = StubHttpClient({BASE + "rest/api/2/resolution": ok(body)})
    assert get_probe("resolutions").run(BASE, client).value == []


def test_gadgets_without_gadget_list():
    client = StubHttpClient({BASE + "rest/config/1.0/directory.json": ok('{"categories":[],"gadgets":[]}')})
    assert get_probe("gadgets").run(BASE, client).value == []
    client = StubHttpClient({BASE + "rest/config/1.0/directory.json": ok('{"categories":[]}')})
    assert get_probe("gadgets").run(BASE, client).value == []


SEARCHERS = (
    '{"searchers":{"groups":['
    '{"type":"DETAILS","searchers":[{"name":"Project","id":"project","key":"issue.field.project","isShown":true,"lastViewed":1600000000000}]},'
    '{"type":"CUSTOM","searchers":[{"name":"Sprint","id":"customfield_10001","key":"com.pyxis.greenhopper.jira:gh-sprint","isShown":false}]}'
    ']},"values":{}}'
)


@pytest.mark.parametrize(
    ("name", "path"),
    [
        ("field_names_default", "secure/QueryComponent!Default.jspa"),
        ("field_names_jql", "secure/QueryComponent!Jql.jspa?jql="),
    ],
)
def test_field_names_probes(name, path):
    finding = get_probe(name).run(BASE, StubHttpClient({BASE + path: ok(SEARCHERS)}))
    assert finding.value == [
        ("Project", "project", "issue.field.project", "true", 1600000000000),
        ("Sprint", "customfield_10001", "com.pyxis.greenhopper.jira:gh-sprint", "false", None),
    ]


@pytest.mark.parametrize(
    "body",
    [
        '{"searchers":{}}',
        '{"searchers":{"groups":[]}}',
        '{"searchers":{"groups":[{"searchers":"oops"}]}}',
        '{"searchers":null}',
        "<html>Login required</html>",
    ],
)
def test_field_names_malformed_bodies_are_empty(body):
    client = StubHttpClient({BASE + "secure/QueryComponent!Default.jspa": ok(body)})
    assert get_probe("field_names_default").run(BASE, client).value == []
