# SPDX-License-Identifier: MIT
"""Visual Studio toolchain discovery (Windows only).

Finds the Visual Studio installation and the ATL directory that ships
with each MSVC toolset, e.g.::

    C:/Program Files/Microsoft Visual Studio/2022/Community/VC/Tools/MSVC/14.38.33130/atlmfc

Nothing here raises on a missing or odd installation. The locator falls
back to a configured default and the resolver returns a Resolution
describing what went wrong; both log a warning for the build output.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from modrules.core.result import FailureReason, Resolution
from modrules.util.versions import VersionPolicy, select_version

logger = logging.getLogger(__name__)

DEFAULT_PRIMARY_DIR = r"C:\Program Files\Microsoft Visual Studio\2022"
# Example default only; configure toolchain.fallback_dir for real machines.
DEFAULT_FALLBACK_DIR = r"E:\Microsoft Visual Studio\2022"

MSVC_TOOLS_SUBPATH = ("VC", "Tools", "MSVC")
ATL_DIR_NAME = "atlmfc"

DirectoryLister = Callable[[Path], list[Path]]
RootSource = Literal["primary", "fallback", "unresolved"]


def list_subdirectories(path: Path) -> list[Path]:
    """List the immediate subdirectories of path in filesystem order.

    Raises:
        OSError: If path cannot be listed.
    """
    return [entry for entry in path.iterdir() if entry.is_dir()]


@dataclass(frozen=True)
class ToolchainRoot:
    """Root directory of a Visual Studio installation.

    Attributes:
        path: The installation directory, None when unresolved.
        verified: Whether the directory was seen to exist.
        source: Which candidate the path came from.
    """

    path: Path | None
    verified: bool = False
    source: RootSource = "unresolved"

    @classmethod
    def unresolved(cls) -> ToolchainRoot:
        return cls(path=None)

    def __bool__(self) -> bool:
        return self.path is not None

    def to_dict(self) -> dict[str, object]:
        return {
            "path": "" if self.path is None else str(self.path),
            "verified": self.verified,
            "source": self.source,
        }


class ToolchainLocator:
    """Locate the Visual Studio installation root.

    The primary directory is the year folder of the default install
    location; the first edition folder found in it (Community,
    Professional, ...) is the root. When the primary directory is
    missing, the fallback directory is returned as-is, without checking
    that it exists.

    Example:
        root = ToolchainLocator().locate()
        if root:
            print(f"Visual Studio at {root.path}")
    """

    def __init__(
        self,
        primary_dir: Path | str = DEFAULT_PRIMARY_DIR,
        fallback_dir: Path | str = DEFAULT_FALLBACK_DIR,
        *,
        lister: DirectoryLister = list_subdirectories,
    ) -> None:
        self.primary_dir = Path(primary_dir)
        self.fallback_dir = Path(fallback_dir)
        self._lister = lister

    def locate(self) -> ToolchainRoot:
        if not self.primary_dir.is_dir():
            logger.debug(
                "%s not found, using fallback %s", self.primary_dir, self.fallback_dir
            )
            return ToolchainRoot(self.fallback_dir, verified=False, source="fallback")

        try:
            editions = self._lister(self.primary_dir)
        except OSError as e:
            logger.warning(
                "Cannot list Visual Studio editions in %s: %s", self.primary_dir, e
            )
            return ToolchainRoot.unresolved()

        if not editions:
            logger.warning("No Visual Studio edition found in %s", self.primary_dir)
            return ToolchainRoot.unresolved()

        root = self.primary_dir / editions[0].name
        logger.debug("Using Visual Studio at %s", root)
        return ToolchainRoot(root, verified=True, source="primary")


class SDKPathResolver:
    """Resolve the ATL directory of an MSVC toolset under a toolchain root.

    The toolset is picked from ``VC/Tools/MSVC`` according to the
    version policy. The default policy takes the last directory in
    listing order, which is usually but not always the newest one.
    """

    def __init__(
        self,
        policy: VersionPolicy = VersionPolicy.LAST_LISTED,
        *,
        lister: DirectoryLister = list_subdirectories,
    ) -> None:
        self.policy = policy
        self._lister = lister

    def resolve(self, toolchain_root: ToolchainRoot | Path | str | None) -> Resolution:
        root = _root_path(toolchain_root)
        if root is None:
            detail = "no Visual Studio installation to search for ATL"
            logger.warning("Cannot find ATL path: %s", detail)
            return Resolution.failure(FailureReason.MISSING_TOOLCHAIN_ROOT, detail)

        msvc_dir = root.joinpath(*MSVC_TOOLS_SUBPATH)
        try:
            toolsets = self._lister(msvc_dir)
            toolset = select_version(toolsets, self.policy)
        except (OSError, ValueError) as e:
            detail = f"no MSVC toolset under {msvc_dir}: {e}"
            logger.warning("Cannot find ATL path: %s", detail)
            return Resolution.failure(
                FailureReason.MISSING_VERSIONED_SUBDIRECTORY, detail
            )

        atl_path = msvc_dir / toolset.name / ATL_DIR_NAME
        logger.debug(
            "Selected MSVC toolset %s (policy %s)", toolset.name, self.policy.value
        )
        if not atl_path.is_dir():
            detail = f"{atl_path} does not exist"
            logger.warning(
                "Couldn't find an ATL path (%s); set toolchain.fallback_dir", detail
            )
            return Resolution.failure(
                FailureReason.MISSING_ARTIFACT_ON_DISK, detail, path=atl_path
            )
        return Resolution.success(atl_path)


def _root_path(toolchain_root: ToolchainRoot | Path | str | None) -> Path | None:
    if isinstance(toolchain_root, ToolchainRoot):
        return toolchain_root.path
    if toolchain_root is None or str(toolchain_root) == "":
        return None
    return Path(toolchain_root)

