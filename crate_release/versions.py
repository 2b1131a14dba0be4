"""Version parsing and bumping utilities.

Versions follow SemVer 2.0, prerelease and build metadata included. The only
supported bump is to the next minor release.
"""

from __future__ import annotations

import semver

from .errors import ReleaseError


def parse_version(version_str: str) -> semver.Version:
    """Parse a full semantic version string.

    Unlike lenient parsers, incomplete versions such as "1.2" are rejected:
    a crate version must always have three components.

    Raises:
        ReleaseError: If the string is not a valid semantic version.
    """
    try:
        return semver.Version.parse(version_str)
    except ValueError as exc:
        raise ReleaseError(f"Invalid version {version_str!r}: {exc}") from exc


def is_prerelease(version: semver.Version) -> bool:
    """Whether the version carries a prerelease tag (e.g. "1.2.0-dev")."""
    return version.prerelease is not None


def bump_minor(version: semver.Version) -> semver.Version:
    """Increment the minor version, dropping prerelease and build metadata.

    Examples:
        "1.3.0-dev" → "1.4.0"
        "0.9.2-rc.1+build.5" → "0.10.0"
    """
    # TODO: accept a bump kind once major/patch releases are needed
    return version.bump_minor()
