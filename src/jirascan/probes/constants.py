# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Markers, patterns and endpoint paths shared by the probe catalog."""

import re

JIRA_MARKER = "JIRA"
DEV_MODE_MARKER = '<meta name="ajs-dev-mode" content="true">'
SIGNUP_HEADING = "<h1>Sign up</h1>"
SERVICE_DESK_MARKERS = ("serviceDeskVersion", "com.atlassian.servicedesk")
USER_PICKER_HEADING = "<h1>User Picker</h1>"
MANAGE_FILTERS_HEADING = "<h1>Manage Filters</h1>"
MISSING_USERNAME_MESSAGE = "The username query parameter was not provided"
USER_DOES_NOT_EXIST_MESSAGE = "User does not exist"
POM_PREFIX = "<project"

USER_PICKER_EMAIL_MARKER = "cell-type-email"
MAX_RESULTS = 1_000

# Version rendering differs between Jira releases: newer pages carry AJS meta
# tags, older ones only the footer "Version: x.y.z-#build" string.
VERSION_META_PATTERN = re.compile(r'<meta name="ajs-version-number" content="([\d.]+)">')
BUILD_META_PATTERN = re.compile(r'<meta name="ajs-build-number" content="(\d+)">')
VERSION_FOOTER_PATTERN = re.compile(r"Version: ([\d.]+)-#(\d+)")

USER_ROW_WITH_EMAIL_PATTERN = re.compile(
    r'<td data-cell-type="name" class="user-name">(.*?)</td>\s+'
    r'<td data-cell-type="fullname" >(.*?)</td>\s+'
    r'<td data-cell-type="email" class="cell-type-email">(.*?)</td>',
    re.DOTALL,
)
USER_ROW_PATTERN = re.compile(
    r'<td data-cell-type="name" class="user-name">(.*?)</td>\s+'
    r'<td data-cell-type="fullname" >(.*?)</td>',
    re.DOTALL,
)

# Older releases link filters with requestId=, newer ones with filter=.
FILTER_REQUEST_ID_HINT = re.compile(r"requestId=\d")
FILTER_REQUEST_ID_LINK = re.compile(r'requestId=(\d+)">(.+?)</a>')
FILTER_ID_HINT = re.compile(r"filter=\d")
FILTER_ID_LINK = re.compile(r'filter=(\d+)">(.+?)</a>')

TOKEN_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
TOKEN_LENGTH = 6

PATH_ROOT = ""
PATH_LOGIN = "login.jsp"
PATH_DASHBOARD = "secure/Dashboard.jspa"
PATH_SERVER_INFO = "rest/api/latest/serverInfo"
PATH_SIGNUP = "secure/Signup!default.jspa"
PATH_SERVICE_DESK_SIGNUP = "servicedesk/customer/user/signup"
PATH_USER_PICKER_BROWSER = "secure/popups/UserPickerBrowser.jspa"
PATH_REST_USER_PICKER = "rest/api/2/user/picker"
PATH_REST_USER_PICKER_LATEST = "rest/api/latest/user/picker"
PATH_REST_GROUP_USER_PICKER = "rest/api/2/groupuserpicker"
PATH_GADGET_DIRECTORY = "rest/config/1.0/directory.json"
PATH_VIEW_USER_HOVER = "secure/ViewUserHover.jspa"
PATH_META_INF_POM = "s/{token}/_/META-INF/maven/com.atlassian.jira/atlassian-jira-webapp/pom.xml"
PATH_MANAGE_FILTERS = "secure/ManageFilters.jspa"
PATH_DASHBOARDS = "rest/api/2/dashboard"
PATH_RESOLUTIONS = "rest/api/2/resolution"
PATH_PROJECTS = "rest/api/2/project"
PATH_PROJECT_CATEGORIES = "rest/api/2/projectCategory"
PATH_ADMIN_MENU = "rest/menu/latest/admin"
PATH_QUERY_COMPONENT_DEFAULT = "secure/QueryComponent!Default.jspa"
PATH_QUERY_COMPONENT_JQL = "secure/QueryComponent!Jql.jspa"

PREFIX_SERVER_INFO = '{"baseUrl"'
PREFIX_GADGETS = '{"categories"'
PREFIX_DASHBOARDS = '{"startAt"'
PREFIX_SELF_ARRAY = '[{"self"'
PREFIX_PROJECTS = '[{"expand"'
PREFIX_ADMIN_MENU = '[{"key"'
PREFIX_SEARCHERS = '{"searchers"'
