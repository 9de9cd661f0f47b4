# SPDX-License-Identifier: MIT
"""Selection of one entry among version-named directories."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import Any

from packaging.version import InvalidVersion, Version

from modrules.core.errors import ConfigureError


class VersionPolicy(Enum):
    """How to pick one of several installed versions.

    LAST_LISTED takes whatever the directory listing returned last.
    NEWEST compares the directory names as versions.
    """

    LAST_LISTED = "last"
    NEWEST = "newest"

    @classmethod
    def from_name(cls, name: str) -> VersionPolicy:
        for policy in cls:
            if policy.value == name.strip().lower():
                return policy
        choices = ", ".join(p.value for p in cls)
        raise ConfigureError(
            f"invalid version policy {name!r}, expected one of: {choices}"
        )


def version_key(name: str) -> tuple[int, Any]:
    """Sort key ranking parseable versions above anything else.

    Names that are not versions sort lexically among themselves.
    """
    try:
        return (1, Version(name))
    except InvalidVersion:
        return (0, name)


def select_version(entries: Sequence[Path], policy: VersionPolicy) -> Path:
    """Pick one directory from a non-empty listing.

    Raises:
        ValueError: If entries is empty.
    """
    if not entries:
        raise ValueError("no versioned directories to choose from")
    if policy is VersionPolicy.NEWEST:
        return max(entries, key=lambda entry: version_key(entry.name))
    return entries[-1]
