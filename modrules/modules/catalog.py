# SPDX-License-Identifier: MIT
"""Module and target declarations for the project.

Each module has a rules function that receives a ModuleContext and
returns its ModuleRules, or None if the module cannot be built for the
current target. configure_project() runs one configuration pass over
all of them and drops modules that depend on a skipped module.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from modrules.configure.config import ToolchainInfo
from modrules.core.platform import TargetInfo, TargetType
from modrules.core.rules import ModuleRules, TargetRules
from modrules.modules.zip_utility import zip_utility_rules

logger = logging.getLogger(__name__)

DEFAULT_PROJECT_NAME = "ProjectOlympusAlpha"

# Unity builds are turned off by requiring more source files than any
# module has (the largest 32-bit signed int).
UNITY_BUILD_DISABLED = 2**31 - 1


@dataclass(frozen=True)
class ModuleContext:
    """What a rules function gets to work with.

    Attributes:
        target: The target being configured.
        module_dir: Directory holding the module's sources.
        toolchain: Toolchain discovery results for this pass.
    """

    target: TargetInfo
    module_dir: Path
    toolchain: ToolchainInfo


RulesFunction = Callable[[ModuleContext], ModuleRules | None]


def unreal_bucket_rules(context: ModuleContext) -> ModuleRules:
    rules = ModuleRules("UnrealBucket", module_dir=context.module_dir)
    rules.use_precompiled = False
    rules.add_public_dependencies(["Core", "ZipUtility"])
    rules.add_private_dependencies(
        [
            "AssetRegistry",
            "Blutility",
            "CoreUObject",
            "Engine",
            "InputCore",
            "LevelEditor",
            "ContentBrowser",
            "Projects",
            "Slate",
            "SlateCore",
            "UMG",
            "UMGEditor",
            "UnrealEd",
            "HTTP",
            "Json",
            "JsonUtilities",
            "ApplicationCore",
            "EditorStyle",
            "PropertyEditor",
        ]
    )
    version = context.target.engine_version
    if version.at_least(4, 26):
        rules.add_private_dependencies(["DeveloperSettings"])
    if version.at_least(5, 3):
        rules.add_private_dependencies(["ScriptableEditorWidgets"])
    return rules


def gmc_core_rules(context: ModuleContext) -> ModuleRules:
    module_dir = context.module_dir
    rules = ModuleRules(
        "GMCCore",
        module_dir=module_dir,
        private_pch_header="Private/GMCCore.pch",
        min_source_files_for_unity_build_override=UNITY_BUILD_DISABLED,
    )
    rules.add_public_dependencies(
        [
            "Core",
            "CoreUObject",
            "Engine",
            "InputCore",
            "NetCore",
            "PhysicsCore",
            "SlateCore",
            "AnimGraphRuntime",
            "AIModule",
            "UMG",
            "EnhancedInput",
            "GameplayTags",
        ]
    )
    public = ["", "Actors", "Components", "Replication", "Utility", "Widgets"]
    private = ["", "Actors", "Components", "Debug", "Replication", "Utility", "Widgets"]
    rules.add_public_include_paths(module_dir / "Public" / sub for sub in public)
    rules.add_private_include_paths(module_dir / "Private" / sub for sub in private)
    return rules


def _terminal_ballistics_common(name: str, context: ModuleContext) -> ModuleRules:
    rules = ModuleRules(
        name,
        module_dir=context.module_dir,
        cpp_standard="Cpp20",
        default_build_settings="Latest",
        include_order_version="Latest",
        iwyu_support="Full",
    )
    rules.add_public_include_paths([context.module_dir / "Public"])
    rules.add_private_include_paths([context.module_dir / "Private"])
    return rules


def terminal_ballistics_rules(context: ModuleContext) -> ModuleRules:
    rules = _terminal_ballistics_common("TerminalBallistics", context)
    rules.add_public_dependencies(
        [
            "Core",
            "CoreUObject",
            "Engine",
            "PhysicsCore",
            "Niagara",
            "GameplayTags",
            "DeveloperSettings",
            "NetCore",
        ]
    )
    return rules


def terminal_ballistics_editor_rules(context: ModuleContext) -> ModuleRules:
    rules = _terminal_ballistics_common("TerminalBallisticsEditor", context)
    rules.add_public_dependencies(["Core", "CoreUObject", "Engine", "UnrealEd"])
    return rules


# Module name -> (directory relative to the project root, rules function)
MODULES: dict[str, tuple[str, RulesFunction]] = {
    "ZipUtility": ("Plugins/UnrealBucket/Source/ZipUtility", zip_utility_rules),
    "UnrealBucket": ("Plugins/UnrealBucket/Source/UnrealBucket", unreal_bucket_rules),
    "GMCCore": ("Plugins/GMC/Source/GMCCore", gmc_core_rules),
    "TerminalBallistics": (
        "Plugins/TerminalBallistics/Source/TerminalBallistics",
        terminal_ballistics_rules,
    ),
    "TerminalBallisticsEditor": (
        "Plugins/TerminalBallistics/Source/TerminalBallisticsEditor",
        terminal_ballistics_editor_rules,
    ),
}


def project_targets(project_name: str = DEFAULT_PROJECT_NAME) -> list[TargetRules]:
    """The game and editor targets, both built around the game module."""
    return [
        TargetRules(
            project_name,
            target_type=TargetType.GAME,
            extra_module_names=[project_name],
        ),
        TargetRules(
            f"{project_name}Editor",
            target_type=TargetType.EDITOR,
            extra_module_names=[project_name],
        ),
    ]


@dataclass
class ProjectRules:
    """Outcome of one configuration pass.

    Attributes:
        name: Project name.
        root_dir: Project root directory.
        target: Target the pass was run for.
        toolchain: Toolchain discovery results.
        modules: Registered module rules, in declaration order.
        targets: Target rules of the project.
        skipped: Modules left out, mapped to the reason.
    """

    name: str
    root_dir: Path
    target: TargetInfo
    toolchain: ToolchainInfo
    modules: list[ModuleRules] = field(default_factory=list)
    targets: list[TargetRules] = field(default_factory=list)
    skipped: dict[str, str] = field(default_factory=dict)

    def get_module(self, name: str) -> ModuleRules | None:
        for module in self.modules:
            if module.name == name:
                return module
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "project": self.name,
            "root_dir": str(self.root_dir),
            "target": self.target.to_dict(),
            "toolchain": self.toolchain.to_dict(),
            "targets": [t.to_dict() for t in self.targets],
            "modules": [m.to_dict() for m in self.modules],
            "skipped": dict(self.skipped),
        }


def configure_project(
    root_dir: Path | str,
    target: TargetInfo,
    toolchain: ToolchainInfo,
    *,
    name: str = DEFAULT_PROJECT_NAME,
    register: Callable[[ModuleRules], None] | None = None,
    modules: dict[str, tuple[str, RulesFunction]] | None = None,
) -> ProjectRules:
    """Run a configuration pass over every declared module.

    Args:
        root_dir: Project root; module directories are relative to it.
        target: Target being configured.
        toolchain: Toolchain discovery results (see Configure.find_toolchain).
        name: Project name, used for the target names.
        register: Called once per registered module, in declaration order.
        modules: Module table to use instead of MODULES.

    Returns:
        The configured project.
    """
    root_dir = Path(root_dir)
    table = MODULES if modules is None else modules
    project = ProjectRules(
        name, root_dir, target, toolchain, targets=project_targets(name)
    )

    configured: list[ModuleRules] = []
    for module_name, (rel_dir, rules_fn) in table.items():
        context = ModuleContext(target, root_dir / rel_dir, toolchain)
        rules = rules_fn(context)
        if rules is None:
            project.skipped[module_name] = f"not supported on {target.platform}"
            logger.info(
                "Skipping %s: not supported on %s", module_name, target.platform
            )
            continue
        configured.append(rules)

    # Drop modules that depend on a skipped one until nothing changes.
    changed = True
    while changed:
        changed = False
        for rules in list(configured):
            missing = [n for n in rules.dependency_names() if n in project.skipped]
            if missing:
                configured.remove(rules)
                project.skipped[rules.name] = f"depends on skipped {missing[0]}"
                logger.info("Skipping %s: depends on %s", rules.name, missing[0])
                changed = True

    for rules in configured:
        if register is not None:
            register(rules)
        project.modules.append(rules)
    return project
