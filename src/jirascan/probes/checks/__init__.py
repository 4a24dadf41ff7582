# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Concrete probe implementations."""

from .detection import (
    DashboardPageProbe,
    DashboardVersionProbe,
    DevModeProbe,
    LoginPageProbe,
    LoginVersionProbe,
    ServerInfoProbe,
)
from .disclosure import (
    DashboardsProbe,
    FieldNamesDefaultProbe,
    FieldNamesJqlProbe,
    GadgetsProbe,
    LinkedApplicationsProbe,
    MetaInfProbe,
    PopularFiltersProbe,
    ProjectCategoriesProbe,
    ProjectsProbe,
    ResolutionsProbe,
)
from .registration import ServiceDeskRegistrationProbe, UserRegistrationProbe
from .users import (
    RestGroupUserPickerProbe,
    RestUserPickerProbe,
    UserPickerBrowserProbe,
    UserPickerUsersProbe,
    ViewUserHoverProbe,
)

__all__ = [
    "DashboardPageProbe",
    "DashboardVersionProbe",
    "DashboardsProbe",
    "DevModeProbe",
    "FieldNamesDefaultProbe",
    "FieldNamesJqlProbe",
    "GadgetsProbe",
    "LinkedApplicationsProbe",
    "LoginPageProbe",
    "LoginVersionProbe",
    "MetaInfProbe",
    "PopularFiltersProbe",
    "ProjectCategoriesProbe",
    "ProjectsProbe",
    "ResolutionsProbe",
    "RestGroupUserPickerProbe",
    "RestUserPickerProbe",
    "ServerInfoProbe",
    "ServiceDeskRegistrationProbe",
    "UserPickerBrowserProbe",
    "UserPickerUsersProbe",
    "UserRegistrationProbe",
    "ViewUserHoverProbe",
]
