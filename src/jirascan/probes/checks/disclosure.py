# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Information disclosure probes: exposed metadata and anonymous listings."""

from __future__ import annotations

import secrets
from typing import Any

from ...http import HttpResponse
from ...models import FindingKind, ProbeRequest, Target
from ..base import JsonProbe, JsonRecordsProbe, Probe, as_dict, as_list
from ..constants import (
    FILTER_ID_HINT,
    FILTER_ID_LINK,
    FILTER_REQUEST_ID_HINT,
    FILTER_REQUEST_ID_LINK,
    MANAGE_FILTERS_HEADING,
    MAX_RESULTS,
    PATH_ADMIN_MENU,
    PATH_DASHBOARDS,
    PATH_GADGET_DIRECTORY,
    PATH_MANAGE_FILTERS,
    PATH_META_INF_POM,
    PATH_PROJECT_CATEGORIES,
    PATH_PROJECTS,
    PATH_QUERY_COMPONENT_DEFAULT,
    PATH_QUERY_COMPONENT_JQL,
    PATH_RESOLUTIONS,
    POM_PREFIX,
    PREFIX_ADMIN_MENU,
    PREFIX_DASHBOARDS,
    PREFIX_GADGETS,
    PREFIX_PROJECTS,
    PREFIX_SEARCHERS,
    PREFIX_SELF_ARRAY,
    TOKEN_ALPHABET,
    TOKEN_LENGTH,
)


def random_token(length: int = TOKEN_LENGTH) -> str:
    """Return a random base-36 token used to defeat path caching."""
    return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(length))


class GadgetsProbe(JsonRecordsProbe):
    name = "gadgets"
    description = "Installed gadgets"
    paths = (PATH_GADGET_DIRECTORY,)
    json_prefix = PREFIX_GADGETS
    container = "gadgets"
    fields = ("title", "authorName", "authorEmail", "description")


class MetaInfProbe(Probe):
    """CVE-2019-8442: META-INF contents served through the resource cache path."""

    name = "meta_inf"
    description = "META-INF contents accessible (CVE-2019-8442)"

    def requests(self, target: Target) -> list[ProbeRequest]:
        return [target.request(PATH_META_INF_POM.format(token=random_token()))]

    def classify(self, response: HttpResponse) -> bool:
        return (response.text or "").startswith(POM_PREFIX)


class PopularFiltersProbe(Probe):
    name = "popular_filters"
    description = "Popular filters"
    kind = FindingKind.RECORDS
    paths = (PATH_MANAGE_FILTERS,)
    query = "filter=popular&filterView=popular"

    def classify(self, response: HttpResponse) -> list[tuple[str, str]]:
        body = response.text or ""
        if MANAGE_FILTERS_HEADING not in body:
            return []
        if FILTER_REQUEST_ID_HINT.search(body):
            return FILTER_REQUEST_ID_LINK.findall(body)
        if FILTER_ID_HINT.search(body):
            return FILTER_ID_LINK.findall(body)
        return []


class DashboardsProbe(JsonRecordsProbe):
    name = "dashboards"
    description = "Dashboards"
    paths = (PATH_DASHBOARDS,)
    query = f"maxResults={MAX_RESULTS}"
    json_prefix = PREFIX_DASHBOARDS
    required_tokens = ("id", "name")
    container = "dashboards"
    fields = ("id", "name")


class ResolutionsProbe(JsonRecordsProbe):
    name = "resolutions"
    description = "Resolutions"
    paths = (PATH_RESOLUTIONS,)
    json_prefix = PREFIX_SELF_ARRAY
    required_tokens = ("id", "name", "description")
    fields = ("id", "name", "description")


class ProjectsProbe(JsonRecordsProbe):
    name = "projects"
    description = "Projects"
    paths = (PATH_PROJECTS,)
    query = f"maxResults={MAX_RESULTS}"
    json_prefix = PREFIX_PROJECTS
    required_tokens = ("id", "key", "name")
    fields = ("id", "key", "name")


class ProjectCategoriesProbe(JsonRecordsProbe):
    name = "project_categories"
    description = "Project categories"
    paths = (PATH_PROJECT_CATEGORIES,)
    json_prefix = PREFIX_SELF_ARRAY
    required_tokens = ("id", "name", "description")
    fields = ("id", "name", "description")


class LinkedApplicationsProbe(JsonRecordsProbe):
    name = "linked_applications"
    description = "Linked applications"
    paths = (PATH_ADMIN_MENU,)
    json_prefix = PREFIX_ADMIN_MENU
    required_tokens = ("link", "label", "applicationType")
    fields = ("link", "label", "applicationType")


def _render_flag(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class FieldNamesProbe(JsonProbe):
    """
    CVE-2020-14179: QueryComponent actions list searchable custom fields.

    Records are ``(name, id, key, isShown, lastViewed)`` gathered across every
    searcher group.
    """

    json_prefix = PREFIX_SEARCHERS

    def extract(self, data: Any) -> list[tuple[Any, ...]]:
        groups = as_dict(as_dict(data).get("searchers")).get("groups")
        records: list[tuple[Any, ...]] = []
        for group in as_list(groups):
            for searcher in as_list(as_dict(group).get("searchers")):
                if not isinstance(searcher, dict):
                    continue
                records.append(
                    (
                        searcher.get("name"),
                        searcher.get("id"),
                        searcher.get("key"),
                        _render_flag(searcher.get("isShown")),
                        searcher.get("lastViewed"),
                    )
                )
        return records


class FieldNamesDefaultProbe(FieldNamesProbe):
    name = "field_names_default"
    description = "Field names from QueryComponent!Default.jspa (CVE-2020-14179)"
    paths = (PATH_QUERY_COMPONENT_DEFAULT,)


class FieldNamesJqlProbe(FieldNamesProbe):
    name = "field_names_jql"
    description = "Field names from QueryComponent!Jql.jspa (CVE-2020-14179)"
    paths = (PATH_QUERY_COMPONENT_JQL,)
    query = "jql="
