"""Release version utilities for evm-deployment-info."""

import re
from typing import Optional, Tuple

_RELEASE_TAG = re.compile(r"v?(\d+)\.(\d+)\.(\d+)")


def parse_version(tag: str) -> Optional[Tuple[int, int, int]]:
    """
    Parse a release tag into a comparable version tuple.

    Args:
        tag: Release tag or version string ("v0.2.1" or "0.2.1")

    Returns:
        (major, minor, patch), or None if the tag is not a stable release
    """
    match = _RELEASE_TAG.fullmatch(tag.strip())
    if match is None:
        return None
    major, minor, patch = (int(part) for part in match.groups())
    return major, minor, patch


def is_newer(candidate: str, current: str) -> bool:
    """
    Check if a release tag is newer than the running version.

    Unparseable versions never compare as newer.
    """
    candidate_version = parse_version(candidate)
    current_version = parse_version(current)
    if candidate_version is None or current_version is None:
        return False
    return candidate_version > current_version
