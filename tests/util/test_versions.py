# SPDX-License-Identifier: MIT
"""Tests for modrules.util.versions."""

from pathlib import Path

import pytest

from modrules.core.errors import ConfigureError
from modrules.util.versions import VersionPolicy, select_version, version_key


def paths(*names: str) -> list[Path]:
    return [Path("MSVC") / name for name in names]


class TestVersionPolicy:
    def test_from_name(self):
        assert VersionPolicy.from_name("last") is VersionPolicy.LAST_LISTED
        assert VersionPolicy.from_name(" NEWEST ") is VersionPolicy.NEWEST

    def test_invalid_name(self):
        with pytest.raises(ConfigureError, match="invalid version policy"):
            VersionPolicy.from_name("highest")


class TestSelectVersion:
    def test_last_listed(self):
        entries = paths("1.0", "2.0", "1.5")
        assert select_version(entries, VersionPolicy.LAST_LISTED).name == "1.5"

    def test_newest(self):
        entries = paths("1.0", "2.0", "1.5")
        assert select_version(entries, VersionPolicy.NEWEST).name == "2.0"

    def test_newest_msvc_toolsets(self):
        entries = paths("14.29.30133", "14.16.27023", "14.38.33130")
        assert select_version(entries, VersionPolicy.NEWEST).name == "14.38.33130"

    def test_newest_is_numeric_not_lexical(self):
        entries = paths("14.9", "14.10")
        assert select_version(entries, VersionPolicy.NEWEST).name == "14.10"

    def test_unparseable_names_rank_below_versions(self):
        entries = paths("zzz-preview", "14.16", "backup")
        assert select_version(entries, VersionPolicy.NEWEST).name == "14.16"

    def test_unparseable_names_compare_lexically(self):
        entries = paths("alpha", "gamma", "beta")
        assert select_version(entries, VersionPolicy.NEWEST).name == "gamma"

    def test_single_entry(self):
        entries = paths("14.16")
        assert select_version(entries, VersionPolicy.LAST_LISTED).name == "14.16"

    @pytest.mark.parametrize("policy", list(VersionPolicy))
    def test_empty_raises(self, policy):
        with pytest.raises(ValueError):
            select_version([], policy)


class TestVersionKey:
    def test_version_ranks_above_text(self):
        assert version_key("1.0") > version_key("release")
