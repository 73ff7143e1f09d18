"""Version management utilities"""

from typing import Optional, Tuple

from packaging.version import parse, Version, InvalidVersion

from ..api.exceptions import InvalidVersionFormatError


def parse_version(version_str: str) -> Optional[Version]:
    """
    Parse version string

    Args:
        version_str: Version string

    Returns:
        Version object or None if invalid
    """
    try:
        return parse(version_str)
    except (InvalidVersion, TypeError):
        return None


def split_version(version: str) -> Tuple[int, int, int]:
    """
    Split a strict ``major.minor.patch`` version

    Args:
        version: Version string

    Returns:
        Tuple of (major, minor, patch)

    Raises:
        InvalidVersionFormatError: unless there are exactly three
            dot-separated numeric parts
    """
    parts = str(version).split('.')
    if len(parts) != 3 or not all(part.isdigit() for part in parts):
        raise InvalidVersionFormatError(version)

    major, minor, patch = (int(part) for part in parts)
    return major, minor, patch


def increment_patch(version: str) -> str:
    """
    Increment the patch component only (``2.9.9`` -> ``2.9.10``)

    Args:
        version: Current version

    Returns:
        New version string
    """
    major, minor, patch = split_version(version)
    return f"{major}.{minor}.{patch + 1}"


def is_valid_version(version: str) -> bool:
    """
    Check if version string is a strict major.minor.patch triple

    Args:
        version: Version string

    Returns:
        True if valid
    """
    try:
        split_version(version)
        return True
    except InvalidVersionFormatError:
        return False


def compare_versions(version1: str, version2: str) -> int:
    """
    Compare two versions

    Args:
        version1: First version
        version2: Second version

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2
    """
    v1 = parse_version(version1)
    v2 = parse_version(version2)

    if v1 is None or v2 is None:
        # Fallback to string comparison
        v1, v2 = str(version1), str(version2)

    if v1 < v2:
        return -1
    elif v1 > v2:
        return 1
    else:
        return 0
