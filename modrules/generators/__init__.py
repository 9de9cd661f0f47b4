# SPDX-License-Identifier: MIT
"""Output generators for configured projects."""

from __future__ import annotations

from modrules.generators.generator import BaseGenerator, Generator
from modrules.generators.manifest import ManifestGenerator

__all__ = ["BaseGenerator", "Generator", "ManifestGenerator"]
