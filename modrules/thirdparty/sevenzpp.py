# SPDX-License-Identifier: MIT
"""Link configuration for the bundled 7zpp library.

7zpp is a C++ wrapper around 7-Zip shipped pre-built in the plugin's
ThirdParty directory::

    ThirdParty/7zpp/
        Include/
        Lib/Win64/atls.lib
        Lib/Win64/7zpp_u.lib
        dll/Win64/7z.dll

Only 64-bit Windows binaries are shipped. For every other platform the
plan is empty and the archive feature is left out of the build.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from modrules.core.platform import TargetPlatform
from modrules.core.rules import BINARY_OUTPUT_DIR, RuntimeDependency

logger = logging.getLogger(__name__)

SUPPORTED_PLATFORMS = frozenset({TargetPlatform.WIN64})

STATIC_LIBRARIES = ("atls.lib", "7zpp_u.lib")
SHARED_LIBRARY = "7z.dll"


@dataclass
class PlatformLinkPlan:
    """What a module adds to the build to use a native library.

    Attributes:
        platform: Platform the plan was built for.
        supported: False when the library is not available there.
        public_include_dirs: Include dirs exported to dependent modules.
        private_include_dirs: Include dirs for the module itself.
        static_libraries: Libraries passed to the linker.
        delay_load_dlls: DLLs loaded on first use instead of at startup.
        runtime_dependencies: Files staged next to the executable.
    """

    platform: TargetPlatform
    supported: bool = False
    public_include_dirs: list[Path] = field(default_factory=list)
    private_include_dirs: list[Path] = field(default_factory=list)
    static_libraries: list[Path] = field(default_factory=list)
    delay_load_dlls: list[str] = field(default_factory=list)
    runtime_dependencies: list[RuntimeDependency] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (
            self.public_include_dirs
            or self.private_include_dirs
            or self.static_libraries
            or self.delay_load_dlls
            or self.runtime_dependencies
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "platform": str(self.platform),
            "supported": self.supported,
            "public_include_dirs": [str(p) for p in self.public_include_dirs],
            "private_include_dirs": [str(p) for p in self.private_include_dirs],
            "static_libraries": [str(p) for p in self.static_libraries],
            "delay_load_dlls": list(self.delay_load_dlls),
            "runtime_dependencies": [d.to_dict() for d in self.runtime_dependencies],
        }


def platform_subpath(platform: TargetPlatform) -> str:
    """Directory name holding the binaries for a Windows platform."""
    return "Win64" if platform is TargetPlatform.WIN64 else "Win32"


class LinkConfigurationBuilder:
    """Build the 7zpp link plan for a target platform.

    File existence is not checked here; a missing library surfaces as a
    link error from the orchestrator.

    Example:
        plan = LinkConfigurationBuilder().build(TargetPlatform.WIN64, sdk_dir)
        if plan.supported:
            rules.apply_link_plan(plan)
    """

    def __init__(self, output_dir: str = BINARY_OUTPUT_DIR) -> None:
        self.output_dir = output_dir

    def is_supported(self, platform: TargetPlatform) -> bool:
        return platform in SUPPORTED_PLATFORMS

    def build(self, platform: TargetPlatform, sdk_root: Path | str) -> PlatformLinkPlan:
        if not self.is_supported(platform):
            logger.info("7zpp is not available for %s", platform)
            return PlatformLinkPlan(platform)

        sdk_root = Path(sdk_root)
        subpath = platform_subpath(platform)
        lib_dir = sdk_root / "Lib" / subpath
        dll_dir = sdk_root / "dll" / subpath

        return PlatformLinkPlan(
            platform,
            supported=True,
            private_include_dirs=[sdk_root / "Include"],
            static_libraries=[lib_dir / name for name in STATIC_LIBRARIES],
            delay_load_dlls=[SHARED_LIBRARY],
            runtime_dependencies=[
                RuntimeDependency(
                    dll_dir / SHARED_LIBRARY, f"{self.output_dir}/{SHARED_LIBRARY}"
                )
            ],
        )
