# SPDX-License-Identifier: MIT
"""Result type for path resolution.

Resolvers never raise on filesystem problems. They return a Resolution
that says whether a usable path was found, and if not, why. The caller
decides whether a degraded result is acceptable for the current build.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class FailureReason(Enum):
    """Why a resolution did not produce a usable path."""

    MISSING_TOOLCHAIN_ROOT = "missing-toolchain-root"
    MISSING_VERSIONED_SUBDIRECTORY = "missing-versioned-subdirectory"
    MISSING_ARTIFACT_ON_DISK = "missing-artifact-on-disk"


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a path.

    A failed resolution may still carry a path: when the composed path
    simply does not exist on disk, the path is kept so the caller can
    report or use it anyway.

    Attributes:
        path: The resolved path, or None if nothing could be composed.
        reason: None on success, otherwise why resolution failed.
        detail: Human-readable description of the failure.
    """

    path: Path | None
    reason: FailureReason | None = None
    detail: str = ""

    @classmethod
    def success(cls, path: Path) -> Resolution:
        return cls(path=path)

    @classmethod
    def failure(
        cls,
        reason: FailureReason,
        detail: str,
        path: Path | None = None,
    ) -> Resolution:
        return cls(path=path, reason=reason, detail=detail)

    @property
    def ok(self) -> bool:
        return self.reason is None

    @property
    def value(self) -> str:
        """The path as a string, empty when there is no path."""
        return "" if self.path is None else str(self.path)

    def to_dict(self) -> dict[str, str | None]:
        return {
            "path": self.value,
            "status": "ok" if self.reason is None else self.reason.value,
            "detail": self.detail or None,
        }
