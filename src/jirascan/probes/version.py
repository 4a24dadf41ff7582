# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Jira version/build extraction from rendered pages."""

from __future__ import annotations

from ..models.finding import VersionInfo
from .constants import BUILD_META_PATTERN, VERSION_FOOTER_PATTERN, VERSION_META_PATTERN


def extract_version_from_meta(body: str) -> VersionInfo | None:
    version = VERSION_META_PATTERN.search(body)
    build = BUILD_META_PATTERN.search(body)
    if not version or not build:
        return None
    return VersionInfo(version=version.group(1), build=build.group(1))


def extract_version_from_footer(body: str) -> VersionInfo | None:
    match = VERSION_FOOTER_PATTERN.search(body)
    if not match:
        return None
    return VersionInfo(version=match.group(1), build=match.group(2))


def extract_version(body: str | None) -> VersionInfo | None:
    """
    Return the version/build pair rendered in a Jira page.

    The AJS meta tags are tried first; only when either tag is missing does the
    footer pattern get a chance. ``None`` means neither format was present.
    """
    text = body or ""
    return extract_version_from_meta(text) or extract_version_from_footer(text)


__all__ = ["extract_version", "extract_version_from_footer", "extract_version_from_meta"]
