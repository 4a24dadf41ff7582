# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Anonymous user enumeration probes."""

from __future__ import annotations

from ...http import HttpResponse
from ...models import FindingKind
from ..base import MarkerProbe, Probe
from ..constants import (
    MAX_RESULTS,
    MISSING_USERNAME_MESSAGE,
    PATH_REST_GROUP_USER_PICKER,
    PATH_REST_USER_PICKER,
    PATH_REST_USER_PICKER_LATEST,
    PATH_USER_PICKER_BROWSER,
    PATH_VIEW_USER_HOVER,
    USER_DOES_NOT_EXIST_MESSAGE,
    USER_PICKER_EMAIL_MARKER,
    USER_PICKER_HEADING,
    USER_ROW_PATTERN,
    USER_ROW_WITH_EMAIL_PATTERN,
)


class UserPickerBrowserProbe(MarkerProbe):
    name = "user_picker_browser"
    description = "Unauthenticated access to UserPickerBrowser.jspa"
    paths = (PATH_USER_PICKER_BROWSER,)
    markers = (USER_PICKER_HEADING,)


class UserPickerUsersProbe(Probe):
    """
    List the first users shown by UserPickerBrowser.jspa.

    Rows are ``(name, fullname, email)`` when the email column is rendered and
    ``(name, fullname)`` otherwise.
    """

    name = "user_picker_users"
    description = "Users from UserPickerBrowser.jspa"
    kind = FindingKind.RECORDS
    paths = (PATH_USER_PICKER_BROWSER,)
    query = f"max={MAX_RESULTS}"

    def classify(self, response: HttpResponse) -> list[tuple[str, ...]]:
        body = response.text or ""
        if USER_PICKER_HEADING not in body:
            return []
        if USER_PICKER_EMAIL_MARKER in body:
            return USER_ROW_WITH_EMAIL_PATTERN.findall(body)
        return USER_ROW_PATTERN.findall(body)


class RestUserPickerProbe(MarkerProbe):
    """CVE-2019-3403: the REST user picker answers anonymous requests."""

    name = "rest_user_picker"
    description = "Unauthenticated access to REST UserPicker (CVE-2019-3403)"
    expected_status = 400
    paths = (PATH_REST_USER_PICKER, PATH_REST_USER_PICKER_LATEST)
    markers = (MISSING_USERNAME_MESSAGE,)


class RestGroupUserPickerProbe(MarkerProbe):
    """CVE-2019-8449: the REST group user picker answers anonymous requests."""

    name = "rest_group_user_picker"
    description = "Unauthenticated access to REST GroupUserPicker (CVE-2019-8449)"
    expected_status = 400
    paths = (PATH_REST_GROUP_USER_PICKER,)
    markers = (MISSING_USERNAME_MESSAGE,)


class ViewUserHoverProbe(MarkerProbe):
    """CVE-2020-14181: ViewUserHover.jspa reveals whether a username exists."""

    name = "view_user_hover"
    description = "Unauthenticated access to ViewUserHover.jspa (CVE-2020-14181)"
    paths = (PATH_VIEW_USER_HOVER,)
    markers = (USER_DOES_NOT_EXIST_MESSAGE,)
