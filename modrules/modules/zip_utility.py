# SPDX-License-Identifier: MIT
"""Rules for the ZipUtility module.

ZipUtility wraps 7-Zip through the bundled 7zpp library, which in turn
needs the ATL headers from the installed MSVC toolset. The module is
only buildable where 7zpp ships binaries; elsewhere it is skipped.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from modrules.core.rules import ModuleRules
from modrules.thirdparty.sevenzpp import LinkConfigurationBuilder

if TYPE_CHECKING:
    from modrules.modules.catalog import ModuleContext

logger = logging.getLogger(__name__)

MODULE_NAME = "ZipUtility"


def sevenzpp_dir(module_dir: Path) -> Path:
    """The 7zpp directory, ``<module_dir>/../ThirdParty/7zpp``."""
    return module_dir.parent / "ThirdParty" / "7zpp"


def zip_utility_rules(context: ModuleContext) -> ModuleRules | None:
    """Declare ZipUtility, or return None where 7zpp is unsupported."""
    plan = LinkConfigurationBuilder().build(
        context.target.platform, sevenzpp_dir(context.module_dir)
    )
    if not plan.supported:
        return None

    rules = ModuleRules(
        MODULE_NAME,
        module_dir=context.module_dir,
        private_pch_header="Private/ZipUtilityPrivatePCH.h",
        use_precompiled=False,
    )
    rules.add_public_include_paths([context.module_dir / "Public"])
    rules.add_private_include_paths([context.module_dir / "Private"])
    rules.apply_link_plan(plan)

    atl = context.toolchain.atl
    if atl.path is not None:
        rules.add_private_include_paths([atl.path / "include"])
    else:
        logger.warning(
            "%s: building without ATL headers (%s)", MODULE_NAME, atl.detail
        )

    rules.add_public_dependencies(["Core", "WindowsFileUtility"])
    rules.add_private_dependencies(
        ["CoreUObject", "Engine", "Slate", "SlateCore", "Projects"]
    )
    return rules
