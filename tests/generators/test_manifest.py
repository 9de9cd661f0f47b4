# SPDX-License-Identifier: MIT
"""Tests for modrules.generators.manifest."""

import json
from pathlib import Path

import pytest

from modrules.configure.config import ToolchainInfo
from modrules.core.errors import GenerateError
from modrules.core.platform import TargetInfo, TargetPlatform
from modrules.core.result import FailureReason, Resolution
from modrules.generators import Generator, ManifestGenerator
from modrules.modules.catalog import configure_project
from modrules.toolchains.msvc import ToolchainRoot


def make_project(root: Path, platform: TargetPlatform = TargetPlatform.WIN64):
    toolchain = ToolchainInfo(
        root=ToolchainRoot.unresolved(),
        atl=Resolution.failure(FailureReason.MISSING_TOOLCHAIN_ROOT, "no VS"),
    )
    return configure_project(root, TargetInfo(platform), toolchain)


class TestManifestGenerator:
    def test_is_generator(self):
        gen = ManifestGenerator()
        assert gen.name == "manifest"
        assert isinstance(gen, Generator)
        assert repr(gen) == "ManifestGenerator('manifest')"

    def test_creates_manifest(self, tmp_path):
        output_dir = tmp_path / "build" / "nested"

        output_file = ManifestGenerator().generate(make_project(tmp_path), output_dir)

        assert output_file == output_dir / "build_manifest.json"
        assert output_file.read_text().endswith("\n")

    def test_manifest_content(self, tmp_path):
        output_file = ManifestGenerator().generate(
            make_project(tmp_path), tmp_path / "build"
        )

        data = json.loads(output_file.read_text())
        assert data["project"] == "ProjectOlympusAlpha"
        assert data["target"]["platform"] == "Win64"
        assert data["toolchain"]["root"]["source"] == "unresolved"
        assert data["toolchain"]["atl"]["status"] == "missing-toolchain-root"
        assert [m["name"] for m in data["modules"]][0] == "ZipUtility"
        assert data["skipped"] == {}

    def test_skipped_modules_listed(self, tmp_path):
        project = make_project(tmp_path, TargetPlatform.MAC)
        output_file = ManifestGenerator().generate(project, tmp_path)

        data = json.loads(output_file.read_text())
        assert set(data["skipped"]) == {"ZipUtility", "UnrealBucket"}
        assert len(data["modules"]) == 3

    def test_unwritable_output(self, tmp_path):
        output_dir = tmp_path / "build"
        (output_dir / "build_manifest.json").mkdir(parents=True)

        with pytest.raises(GenerateError):
            ManifestGenerator().generate(make_project(tmp_path), output_dir)
