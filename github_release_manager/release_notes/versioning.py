"""Resolves the version a release operation should act on."""

import structlog
from packaging.version import InvalidVersion, Version

from github_release_manager.exceptions import InvalidVersionError

logger = structlog.get_logger(__name__)

BUMP_KEYWORDS = ("major", "minor", "patch", "premajor", "preminor", "prepatch", "prerelease")
PRERELEASE_LABEL = "rc"


def _bump_prerelease(current: Version) -> str:
    """Advance the pre-release number, or start a patch pre-release from a final version."""
    major, minor, patch = current.major, current.minor, current.micro
    if current.pre is not None:
        label, number = current.pre
        return f"{major}.{minor}.{patch}{label}{number + 1}"
    if current.is_prerelease:
        return f"{major}.{minor}.{patch}{PRERELEASE_LABEL}0"
    return f"{major}.{minor}.{patch + 1}{PRERELEASE_LABEL}0"


def bump_version(current_version: str, keyword: str) -> str:
    """Increment one component of a version.

    A pre-release is promoted rather than bumped when the requested component
    already holds its next value: ``2.0.0rc1`` bumped by ``major`` is ``2.0.0``,
    and ``1.2.3rc1`` bumped by ``patch`` is ``1.2.3``.

    The ``pre*`` keywords start an ``rc0`` pre-release of the next version.
    ``prerelease`` advances an existing pre-release (``1.2.4rc0`` becomes
    ``1.2.4rc1``) and behaves like ``prepatch`` on a final release.
    """
    if keyword not in BUMP_KEYWORDS:
        raise InvalidVersionError(f"Unknown version bump '{keyword}', expected one of {', '.join(BUMP_KEYWORDS)} or a version number")
    try:
        current = Version(current_version)
    except InvalidVersion as exc:
        raise InvalidVersionError(f"Current project version '{current_version}' is not a valid version") from exc

    major, minor, patch = current.major, current.minor, current.micro
    if keyword == "premajor":
        return f"{major + 1}.0.0{PRERELEASE_LABEL}0"
    if keyword == "preminor":
        return f"{major}.{minor + 1}.0{PRERELEASE_LABEL}0"
    if keyword == "prepatch":
        return f"{major}.{minor}.{patch + 1}{PRERELEASE_LABEL}0"
    if keyword == "prerelease":
        return _bump_prerelease(current)

    promote = current.is_prerelease
    if keyword == "major":
        if promote and minor == 0 and patch == 0:
            return f"{major}.0.0"
        return f"{major + 1}.0.0"
    if keyword == "minor":
        if promote and patch == 0:
            return f"{major}.{minor}.0"
        return f"{major}.{minor + 1}.0"
    if promote:
        return f"{major}.{minor}.{patch}"
    return f"{major}.{minor}.{patch + 1}"


def resolve_version(version_or_bump: str | None, current_version: str | None) -> str:
    """Turn a version number or bump keyword into the concrete target version.

    Anything starting with a digit (after an optional leading ``v``) is taken
    literally; anything else is a bump keyword applied to ``current_version``.
    """
    if not version_or_bump:
        raise InvalidVersionError("No version specified, pass a bump keyword or a version number")

    literal = version_or_bump.removeprefix("v")
    if literal[:1].isdigit():
        return literal

    if current_version is None:
        raise InvalidVersionError(f"Cannot apply '{version_or_bump}' bump without a current project version")
    version = bump_version(current_version, version_or_bump)
    logger.info("Resolved version bump", bump=version_or_bump, current_version=current_version, version=version)
    return version
