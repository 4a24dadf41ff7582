# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe catalog registry."""

from __future__ import annotations

from collections.abc import Iterable

from .base import Probe
from .checks import (
    DashboardPageProbe,
    DashboardsProbe,
    DashboardVersionProbe,
    DevModeProbe,
    FieldNamesDefaultProbe,
    FieldNamesJqlProbe,
    GadgetsProbe,
    LinkedApplicationsProbe,
    LoginPageProbe,
    LoginVersionProbe,
    MetaInfProbe,
    PopularFiltersProbe,
    ProjectCategoriesProbe,
    ProjectsProbe,
    ResolutionsProbe,
    RestGroupUserPickerProbe,
    RestUserPickerProbe,
    ServerInfoProbe,
    ServiceDeskRegistrationProbe,
    UserPickerBrowserProbe,
    UserPickerUsersProbe,
    UserRegistrationProbe,
    ViewUserHoverProbe,
)

PROBES: list[Probe] = [
    LoginPageProbe(),
    DashboardPageProbe(),
    DashboardVersionProbe(),
    LoginVersionProbe(),
    ServerInfoProbe(),
    DevModeProbe(),
    UserRegistrationProbe(),
    ServiceDeskRegistrationProbe(),
    UserPickerBrowserProbe(),
    UserPickerUsersProbe(),
    RestUserPickerProbe(),
    RestGroupUserPickerProbe(),
    GadgetsProbe(),
    ViewUserHoverProbe(),
    MetaInfProbe(),
    PopularFiltersProbe(),
    DashboardsProbe(),
    ResolutionsProbe(),
    ProjectsProbe(),
    ProjectCategoriesProbe(),
    LinkedApplicationsProbe(),
    FieldNamesDefaultProbe(),
    FieldNamesJqlProbe(),
]

_PROBES_BY_NAME = {probe.name: probe for probe in PROBES}


def probe_names() -> list[str]:
    return [probe.name for probe in PROBES]


def get_probe(name: str) -> Probe:
    """Look a probe up by name; raises KeyError for unknown names."""
    try:
        return _PROBES_BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown probe: {name}") from None


def select_probes(names: Iterable[str] | None = None) -> list[Probe]:
    """Return probes in catalog order, restricted to ``names`` when given."""
    if names is None:
        return list(PROBES)
    wanted = set(names)
    for name in wanted:
        get_probe(name)
    return [probe for probe in PROBES if probe.name in wanted]


__all__ = ["PROBES", "get_probe", "probe_names", "select_probes"]
