# SPDX-License-Identifier: MIT
"""End-to-end test: locate Visual Studio, resolve ATL, build the 7zpp plan."""

from pathlib import Path

from modrules import (
    LinkConfigurationBuilder,
    SDKPathResolver,
    TargetPlatform,
    ToolchainLocator,
)
from modrules.modules.zip_utility import sevenzpp_dir


def test_win64_from_fake_install(tmp_path: Path) -> None:
    primary = tmp_path / "Microsoft Visual Studio" / "2022"
    msvc = primary / "Community" / "VC" / "Tools" / "MSVC"
    for version in ["14.16.27023", "14.29.30133"]:
        (msvc / version / "atlmfc").mkdir(parents=True)
    # Ordered listing so the last entry is deterministic.
    lister = lambda path: sorted(p for p in path.iterdir() if p.is_dir())  # noqa: E731

    root = ToolchainLocator(primary, tmp_path / "unused", lister=lister).locate()
    atl = SDKPathResolver(lister=lister).resolve(root)

    assert root.verified
    assert atl.ok
    assert atl.path == msvc / "14.29.30133" / "atlmfc"

    module_dir = tmp_path / "Plugins" / "UnrealBucket" / "Source" / "ZipUtility"
    sdk = sevenzpp_dir(module_dir)
    plan = LinkConfigurationBuilder().build(TargetPlatform.WIN64, sdk)

    assert plan.static_libraries == [
        sdk / "Lib" / "Win64" / "atls.lib",
        sdk / "Lib" / "Win64" / "7zpp_u.lib",
    ]
    assert plan.runtime_dependencies[0].source == sdk / "dll" / "Win64" / "7z.dll"
    assert plan.runtime_dependencies[0].destination == "$(BinaryOutputDir)/7z.dll"


def test_missing_install_reports_without_raising(tmp_path: Path) -> None:
    root = ToolchainLocator(tmp_path / "missing", tmp_path / "fallback").locate()
    atl = SDKPathResolver().resolve(root)

    assert root.source == "fallback"
    assert not atl.ok
    assert atl.value == ""
