# SPDX-License-Identifier: MIT
"""build_manifest.json generator.

Writes the outcome of a configuration pass as JSON: the target, the
toolchain diagnostics, every registered module's rules and the modules
that were skipped.

Format:
    {
        "project": "MyGame",
        "target": {"platform": "Win64", ...},
        "toolchain": {"root": {...}, "atl": {"path": ..., "status": "ok"}},
        "targets": [...],
        "modules": [{"name": "ZipUtility", ...}, ...],
        "skipped": {"ZipUtility": "not supported on Linux"}
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from modrules.core.errors import GenerateError
from modrules.generators.generator import BaseGenerator

if TYPE_CHECKING:
    from modrules.modules.catalog import ProjectRules

logger = logging.getLogger(__name__)


class ManifestGenerator(BaseGenerator):
    """Generator for build_manifest.json.

    Example:
        generator = ManifestGenerator()
        generator.generate(project, Path("build"))
        # Creates build/build_manifest.json
    """

    FILENAME = "build_manifest.json"

    def __init__(self) -> None:
        super().__init__("manifest")

    def _generate_impl(self, project: ProjectRules, output_dir: Path) -> Path:
        output_file = output_dir / self.FILENAME
        try:
            with open(output_file, "w") as f:
                json.dump(project.to_dict(), f, indent=2)
                f.write("\n")
        except OSError as e:
            raise GenerateError(f"cannot write {output_file}: {e}") from e

        logger.info(
            "Wrote %s (%d modules, %d skipped)",
            output_file,
            len(project.modules),
            len(project.skipped),
        )
        return output_file
