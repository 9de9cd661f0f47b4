# SPDX-License-Identifier: MIT
"""Configure context for modrules.

The Configure class holds the settings that steer toolchain discovery
and runs the discovery itself. Settings come from, highest first:

1. Variables given on the command line (``KEY=value``)
2. Environment variables
3. The JSON config file (``modrules_config.json``)
4. Built-in defaults
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from modrules.core.errors import ConfigureError
from modrules.core.result import Resolution
from modrules.toolchains.msvc import (
    DEFAULT_FALLBACK_DIR,
    DEFAULT_PRIMARY_DIR,
    SDKPathResolver,
    ToolchainLocator,
    ToolchainRoot,
)
from modrules.util.versions import VersionPolicy

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "modrules_config.json"

# Setting key -> environment variable
ENV_VARS: dict[str, str] = {
    "toolchain.primary_dir": "MODRULES_VS_PRIMARY_DIR",
    "toolchain.fallback_dir": "MODRULES_VS_FALLBACK_DIR",
    "toolchain.version_policy": "MODRULES_VERSION_POLICY",
}

DEFAULTS: dict[str, str] = {
    "toolchain.primary_dir": DEFAULT_PRIMARY_DIR,
    "toolchain.fallback_dir": DEFAULT_FALLBACK_DIR,
    "toolchain.version_policy": VersionPolicy.LAST_LISTED.value,
}


@dataclass(frozen=True)
class ToolchainSettings:
    """Effective toolchain discovery settings.

    Attributes:
        primary_dir: Default Visual Studio install location.
        fallback_dir: Location used when the primary one is missing.
        version_policy: How to pick among installed MSVC toolsets.
    """

    primary_dir: Path
    fallback_dir: Path
    version_policy: VersionPolicy


@dataclass(frozen=True)
class ToolchainInfo:
    """Result of toolchain discovery for one configuration pass."""

    root: ToolchainRoot
    atl: Resolution

    def to_dict(self) -> dict[str, Any]:
        return {"root": self.root.to_dict(), "atl": self.atl.to_dict()}


class Configure:
    """Context for the configure phase.

    Example:
        config = Configure(config_file="modrules_config.json")
        config.set("toolchain.fallback_dir", r"D:\\VS\\2022")
        config.save()

        info = config.find_toolchain()
        if not info.atl.ok:
            print(info.atl.detail)

    Attributes:
        config_file: Path of the JSON settings file.
        variables: Command-line overrides.
    """

    def __init__(
        self,
        *,
        config_file: Path | str = DEFAULT_CONFIG_FILE,
        variables: dict[str, str] | None = None,
    ) -> None:
        self.config_file = Path(config_file)
        self.variables = dict(variables or {})
        self._settings: dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        """Load settings from the config file if it exists."""
        if not self.config_file.exists():
            return
        try:
            with open(self.config_file) as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable config %s: %s", self.config_file, e)
            return
        if isinstance(data, dict):
            self._settings = data
        else:
            logger.warning("Ignoring config %s: not a JSON object", self.config_file)

    def save(self, path: Path | None = None) -> None:
        """Write the settings to the config file.

        Args:
            path: Optional path override for the config file.
        """
        config_path = path or self.config_file
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            json.dump(self._settings, f, indent=2, default=str)
            f.write("\n")

    def set(self, key: str, value: Any) -> None:
        self._settings[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting, honouring command-line and environment overrides.

        Args:
            key: Setting key, e.g. "toolchain.fallback_dir".
            default: Returned when no source defines the key. Falls back
                to the built-in default for known keys.
        """
        if key in self.variables:
            return self.variables[key]
        env_var = ENV_VARS.get(key)
        if env_var is not None:
            if env_var in self.variables:
                return self.variables[env_var]
            env_value = os.environ.get(env_var)
            if env_value:
                return env_value
        if key in self._settings:
            return self._settings[key]
        if default is None:
            return DEFAULTS.get(key)
        return default

    def get_str(self, key: str) -> str:
        """Get a setting that must be a non-empty string.

        Raises:
            ConfigureError: If the value is of another type or empty.
        """
        value = self.get(key)
        if not isinstance(value, str) or not value:
            raise ConfigureError(
                f"invalid value for {key}: expected a non-empty string, got {value!r}"
            )
        return value

    def toolchain_settings(self) -> ToolchainSettings:
        """Collect the toolchain discovery settings.

        Raises:
            ConfigureError: If a setting is not a non-empty string or the
                version policy is not recognised.
        """
        return ToolchainSettings(
            primary_dir=Path(self.get_str("toolchain.primary_dir")),
            fallback_dir=Path(self.get_str("toolchain.fallback_dir")),
            version_policy=VersionPolicy.from_name(
                self.get_str("toolchain.version_policy")
            ),
        )

    def find_toolchain(self) -> ToolchainInfo:
        """Locate Visual Studio and resolve its ATL directory.

        Not cached: every call rescans the filesystem.
        """
        settings = self.toolchain_settings()
        root = ToolchainLocator(settings.primary_dir, settings.fallback_dir).locate()
        atl = SDKPathResolver(settings.version_policy).resolve(root)
        return ToolchainInfo(root=root, atl=atl)

    def __repr__(self) -> str:
        return f"Configure(config_file={self.config_file})"


def load_config(path: Path | str = DEFAULT_CONFIG_FILE) -> dict[str, Any]:
    """Load a saved configuration.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data: dict[str, Any] = json.load(f)
        return data
