"""Plain MAJOR.MINOR.PATCH version helpers."""

import re
from typing import Literal, cast

BumpType = Literal["major", "minor", "patch"]

_SEMVER_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)$")


def is_semver(value: str) -> bool:
    return _SEMVER_RE.match(value) is not None


def validate_bump_type(value: str) -> BumpType:
    """Validate and return bump type.

    Raises:
        ValueError: If value is not major, minor or patch
    """
    if value not in ("major", "minor", "patch"):
        raise ValueError(f"Invalid bump type: {value} (expected major, minor or patch)")
    return cast(BumpType, value)


def bump_version(version: str, bump_type: BumpType) -> str:
    """Increment a MAJOR.MINOR.PATCH version string.

    Raises:
        ValueError: If version is not MAJOR.MINOR.PATCH
    """
    match = _SEMVER_RE.match(version)
    if match is None:
        raise ValueError(f"Invalid version: {version}")

    major, minor, patch = (int(part) for part in match.groups())
    if bump_type == "major":
        return f"{major + 1}.0.0"
    if bump_type == "minor":
        return f"{major}.{minor + 1}.0"
    return f"{major}.{minor}.{patch + 1}"
