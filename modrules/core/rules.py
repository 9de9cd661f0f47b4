# SPDX-License-Identifier: MIT
"""Module and target rules.

ModuleRules describes what one engine module compiles against and links
with: include paths, dependency module names, native libraries and
files that must ship next to the executable. TargetRules describes a
buildable target (the game or the editor) and which modules it pulls in.

Module names in dependency lists are opaque to modrules and are passed
through to the orchestrator unchanged.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from modrules.core.platform import TargetType

if TYPE_CHECKING:
    from modrules.thirdparty.sevenzpp import PlatformLinkPlan

# Orchestrator token for the directory holding the built executable.
BINARY_OUTPUT_DIR = "$(BinaryOutputDir)"


def _extend_unique(dest: list[Any], items: Iterable[Any]) -> None:
    for item in items:
        if item not in dest:
            dest.append(item)


@dataclass(frozen=True)
class RuntimeDependency:
    """A file copied next to the built executable.

    Attributes:
        source: Where the file lives in the source tree.
        destination: Where it is staged in the build output.
    """

    source: Path
    destination: str

    def to_dict(self) -> dict[str, str]:
        return {"source": str(self.source), "destination": self.destination}


@dataclass
class ModuleRules:
    """Build rules for a single module.

    Example:
        rules = ModuleRules("MyPlugin", module_dir=Path("Source/MyPlugin"))
        rules.add_public_include_paths([rules.module_dir / "Public"])
        rules.add_public_dependencies(["Core", "Engine"])
    """

    name: str
    module_dir: Path
    pch_usage: str = "UseExplicitOrSharedPCHs"
    private_pch_header: str | None = None
    use_precompiled: bool = True
    cpp_standard: str | None = None
    default_build_settings: str | None = None
    include_order_version: str | None = None
    iwyu_support: str | None = None
    min_source_files_for_unity_build_override: int | None = None
    public_include_paths: list[Path] = field(default_factory=list)
    private_include_paths: list[Path] = field(default_factory=list)
    public_dependency_module_names: list[str] = field(default_factory=list)
    private_dependency_module_names: list[str] = field(default_factory=list)
    dynamically_loaded_module_names: list[str] = field(default_factory=list)
    public_additional_libraries: list[Path] = field(default_factory=list)
    public_delay_load_dlls: list[str] = field(default_factory=list)
    runtime_dependencies: list[RuntimeDependency] = field(default_factory=list)

    def add_public_include_paths(self, paths: Iterable[Path]) -> None:
        _extend_unique(self.public_include_paths, paths)

    def add_private_include_paths(self, paths: Iterable[Path]) -> None:
        _extend_unique(self.private_include_paths, paths)

    def add_public_dependencies(self, names: Iterable[str]) -> None:
        _extend_unique(self.public_dependency_module_names, names)

    def add_private_dependencies(self, names: Iterable[str]) -> None:
        _extend_unique(self.private_dependency_module_names, names)

    def add_dynamically_loaded(self, names: Iterable[str]) -> None:
        _extend_unique(self.dynamically_loaded_module_names, names)

    def apply_link_plan(self, plan: PlatformLinkPlan) -> None:
        """Merge a native-library link plan into these rules.

        An unsupported plan is empty, so applying it changes nothing.
        """
        _extend_unique(self.public_include_paths, plan.public_include_dirs)
        _extend_unique(self.private_include_paths, plan.private_include_dirs)
        _extend_unique(self.public_additional_libraries, plan.static_libraries)
        _extend_unique(self.public_delay_load_dlls, plan.delay_load_dlls)
        _extend_unique(self.runtime_dependencies, plan.runtime_dependencies)

    def dependency_names(self) -> list[str]:
        """All module names this module refers to, in declaration order."""
        names: list[str] = []
        _extend_unique(names, self.public_dependency_module_names)
        _extend_unique(names, self.private_dependency_module_names)
        _extend_unique(names, self.dynamically_loaded_module_names)
        return names

    def depends_on(self, name: str) -> bool:
        return name in self.dependency_names()

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dict with string paths."""
        return {
            "name": self.name,
            "module_dir": str(self.module_dir),
            "pch_usage": self.pch_usage,
            "private_pch_header": self.private_pch_header,
            "use_precompiled": self.use_precompiled,
            "cpp_standard": self.cpp_standard,
            "default_build_settings": self.default_build_settings,
            "include_order_version": self.include_order_version,
            "iwyu_support": self.iwyu_support,
            "min_source_files_for_unity_build_override": (
                self.min_source_files_for_unity_build_override
            ),
            "public_include_paths": [str(p) for p in self.public_include_paths],
            "private_include_paths": [str(p) for p in self.private_include_paths],
            "public_dependency_module_names": list(
                self.public_dependency_module_names
            ),
            "private_dependency_module_names": list(
                self.private_dependency_module_names
            ),
            "dynamically_loaded_module_names": list(
                self.dynamically_loaded_module_names
            ),
            "public_additional_libraries": [
                str(p) for p in self.public_additional_libraries
            ],
            "public_delay_load_dlls": list(self.public_delay_load_dlls),
            "runtime_dependencies": [d.to_dict() for d in self.runtime_dependencies],
        }


@dataclass
class TargetRules:
    """Build settings for a target executable.

    Attributes:
        name: Target name (e.g. "MyGame", "MyGameEditor").
        target_type: Game, Editor, ...
        default_build_settings: Build settings version, e.g. "V4".
        extra_module_names: Primary game modules pulled into the target.
    """

    name: str
    target_type: TargetType = TargetType.GAME
    default_build_settings: str = "V4"
    extra_module_names: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": str(self.target_type),
            "default_build_settings": self.default_build_settings,
            "extra_module_names": list(self.extra_module_names),
        }
