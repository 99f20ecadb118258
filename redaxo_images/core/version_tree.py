"""Version tree resolution for release versions."""

import re
from typing import List

from ..services.exceptions import InvalidVersionError


# X, X.Y or X.Y.Z without leading zeros; beta and other suffixes are skipped
VERSION_PATTERN = re.compile(r"^(0|[1-9][0-9]*)(\.(0|[1-9][0-9]*)){0,2}$")


def is_valid_version(version: str) -> bool:
    """Check whether a version string is a plain X, X.Y or X.Y.Z release."""
    return bool(VERSION_PATTERN.fullmatch(version))


def resolve_version_tree(version: str) -> List[str]:
    """Get the tree of a release version, most specific first.

    Example: 5.8.1 resolves to 5.8.1, 5.8 and 5.

    Raises:
        InvalidVersionError: If the version is not X, X.Y or X.Y.Z
    """
    if not is_valid_version(version):
        raise InvalidVersionError(version)

    tree = [version]
    while "." in version:
        version = version.rsplit(".", 1)[0]
        tree.append(version)
    return tree
