# SPDX-License-Identifier: MIT
"""Generator protocol for build configuration output.

Generators take a configured ProjectRules and write files the build
orchestrator (or a person) can consume.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from modrules.modules.catalog import ProjectRules


@runtime_checkable
class Generator(Protocol):
    """Protocol for output generators."""

    @property
    def name(self) -> str:
        """Generator name (e.g., 'manifest')."""
        ...

    def generate(self, project: ProjectRules, output_dir: Path) -> Path:
        """Write output for a project and return the written file."""
        ...


class BaseGenerator:
    """Base class for generators with common functionality."""

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def generate(self, project: ProjectRules, output_dir: Path) -> Path:
        """Create output_dir and delegate to _generate_impl."""
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        return self._generate_impl(project, output_dir)

    def _generate_impl(self, project: ProjectRules, output_dir: Path) -> Path:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._name!r})"
