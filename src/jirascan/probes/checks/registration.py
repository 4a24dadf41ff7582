# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Public signup probes."""

from ..base import MarkerProbe
from ..constants import PATH_SERVICE_DESK_SIGNUP, PATH_SIGNUP, SERVICE_DESK_MARKERS, SIGNUP_HEADING


class UserRegistrationProbe(MarkerProbe):
    name = "user_registration"
    description = "User registration enabled"
    paths = (PATH_SIGNUP,)
    markers = (SIGNUP_HEADING,)


class ServiceDeskRegistrationProbe(MarkerProbe):
    name = "service_desk_registration"
    description = "Service Desk user registration enabled"
    paths = (PATH_SERVICE_DESK_SIGNUP,)
    markers = SERVICE_DESK_MARKERS
