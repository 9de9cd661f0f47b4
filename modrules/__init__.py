# SPDX-License-Identifier: MIT
"""
modrules: module and target build rules for engine plugin projects.

modrules declares what each module of a game project compiles against
and links with, and resolves the native toolchain paths those rules
need (the Visual Studio ATL headers for the 7zpp archive library).
"""

from __future__ import annotations

__version__ = "0.1.0"

# Re-export commonly used classes for convenient imports
from modrules.configure.config import Configure  # noqa: E402
from modrules.core.platform import (  # noqa: E402
    EngineVersion,
    TargetInfo,
    TargetPlatform,
    TargetType,
)
from modrules.core.result import FailureReason, Resolution  # noqa: E402
from modrules.core.rules import ModuleRules, TargetRules  # noqa: E402
from modrules.modules.catalog import ProjectRules, configure_project  # noqa: E402
from modrules.thirdparty.sevenzpp import (  # noqa: E402
    LinkConfigurationBuilder,
    PlatformLinkPlan,
)
from modrules.toolchains.msvc import (  # noqa: E402
    SDKPathResolver,
    ToolchainLocator,
    ToolchainRoot,
)

__all__ = [
    "Configure",
    "EngineVersion",
    "FailureReason",
    "LinkConfigurationBuilder",
    "ModuleRules",
    "PlatformLinkPlan",
    "ProjectRules",
    "Resolution",
    "SDKPathResolver",
    "TargetInfo",
    "TargetPlatform",
    "TargetRules",
    "TargetType",
    "ToolchainLocator",
    "ToolchainRoot",
    "configure_project",
    "__version__",
]
