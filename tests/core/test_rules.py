# SPDX-License-Identifier: MIT
"""Tests for modrules.core.rules."""

from pathlib import Path

from modrules.core.platform import TargetPlatform, TargetType
from modrules.core.rules import ModuleRules, RuntimeDependency, TargetRules
from modrules.thirdparty.sevenzpp import LinkConfigurationBuilder, PlatformLinkPlan


class TestModuleRules:
    def test_creation(self):
        rules = ModuleRules("Core", module_dir=Path("Source/Core"))
        assert rules.name == "Core"
        assert rules.pch_usage == "UseExplicitOrSharedPCHs"
        assert rules.use_precompiled is True
        assert rules.public_include_paths == []
        assert rules.runtime_dependencies == []

    def test_add_keeps_order_and_drops_duplicates(self):
        rules = ModuleRules("Mod", module_dir=Path("Mod"))
        rules.add_public_dependencies(["Core", "Engine"])
        rules.add_public_dependencies(["Engine", "Slate"])
        rules.add_private_include_paths([Path("Private"), Path("Private")])

        assert rules.public_dependency_module_names == ["Core", "Engine", "Slate"]
        assert rules.private_include_paths == [Path("Private")]

    def test_add_accepts_generators(self):
        rules = ModuleRules("Mod", module_dir=Path("Mod"))
        rules.add_public_include_paths(Path("Public") / s for s in ["A", "B"])
        assert rules.public_include_paths == [Path("Public/A"), Path("Public/B")]

    def test_depends_on(self):
        rules = ModuleRules("Mod", module_dir=Path("Mod"))
        rules.add_public_dependencies(["Core"])
        rules.add_private_dependencies(["Engine"])
        rules.add_dynamically_loaded(["OnlineSubsystem"])

        assert rules.depends_on("Core")
        assert rules.depends_on("Engine")
        assert rules.depends_on("OnlineSubsystem")
        assert not rules.depends_on("Slate")
        assert rules.dependency_names() == ["Core", "Engine", "OnlineSubsystem"]

    def test_apply_supported_link_plan(self):
        rules = ModuleRules("Zip", module_dir=Path("Zip"))
        plan = LinkConfigurationBuilder().build(TargetPlatform.WIN64, Path("7zpp"))

        rules.apply_link_plan(plan)
        rules.apply_link_plan(plan)

        assert rules.private_include_paths == [Path("7zpp/Include")]
        assert len(rules.public_additional_libraries) == 2
        assert rules.public_delay_load_dlls == ["7z.dll"]
        assert len(rules.runtime_dependencies) == 1

    def test_apply_empty_link_plan(self):
        rules = ModuleRules("Zip", module_dir=Path("Zip"))
        rules.apply_link_plan(PlatformLinkPlan(TargetPlatform.LINUX))

        assert rules.public_additional_libraries == []
        assert rules.public_delay_load_dlls == []

    def test_to_dict_uses_strings(self):
        rules = ModuleRules("Mod", module_dir=Path("Mod"), cpp_standard="Cpp20")
        rules.add_public_include_paths([Path("Mod/Public")])
        rules.runtime_dependencies.append(
            RuntimeDependency(Path("dll/7z.dll"), "$(BinaryOutputDir)/7z.dll")
        )

        data = rules.to_dict()
        assert data["name"] == "Mod"
        assert data["cpp_standard"] == "Cpp20"
        assert data["default_build_settings"] is None
        assert data["iwyu_support"] is None
        assert "public_definitions" not in data
        assert data["public_include_paths"] == [str(Path("Mod/Public"))]
        assert data["runtime_dependencies"] == [
            {
                "source": str(Path("dll/7z.dll")),
                "destination": "$(BinaryOutputDir)/7z.dll",
            }
        ]


class TestTargetRules:
    def test_defaults(self):
        target = TargetRules("Game")
        assert target.target_type is TargetType.GAME
        assert target.default_build_settings == "V4"
        assert target.extra_module_names == []

    def test_to_dict(self):
        target = TargetRules(
            "GameEditor", target_type=TargetType.EDITOR, extra_module_names=["Game"]
        )
        assert target.to_dict() == {
            "name": "GameEditor",
            "type": "Editor",
            "default_build_settings": "V4",
            "extra_module_names": ["Game"],
        }
