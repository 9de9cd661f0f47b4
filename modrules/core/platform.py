# SPDX-License-Identifier: MIT
"""Target platforms, target types and engine versions.

These are the values the build orchestrator hands to module rules
when it runs a configuration pass.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from modrules.core.errors import ConfigureError, UnknownPlatformError


class TargetPlatform(Enum):
    """Platforms a target can be built for."""

    WIN64 = "Win64"
    WIN32 = "Win32"
    LINUX = "Linux"
    LINUX_ARM64 = "LinuxArm64"
    MAC = "Mac"
    IOS = "IOS"
    ANDROID = "Android"

    @classmethod
    def from_name(cls, name: str) -> TargetPlatform:
        """Look up a platform by name, ignoring case.

        Raises:
            UnknownPlatformError: If no platform has that name.
        """
        wanted = name.strip().lower()
        for platform in cls:
            if platform.value.lower() == wanted:
                return platform
        raise UnknownPlatformError(name)

    @property
    def is_windows(self) -> bool:
        return self in (TargetPlatform.WIN64, TargetPlatform.WIN32)

    def __str__(self) -> str:
        return self.value


class TargetType(Enum):
    GAME = "Game"
    EDITOR = "Editor"
    CLIENT = "Client"
    SERVER = "Server"
    PROGRAM = "Program"

    def __str__(self) -> str:
        return self.value


_VERSION_RE = re.compile(r"^\s*(\d+)\.(\d+)(?:\.\d+)*\s*$")


@dataclass(frozen=True, order=True)
class EngineVersion:
    """Engine major/minor version.

    Used to gate dependencies that only exist from a given engine
    release onwards (the UE_X_Y_OR_LATER conditions).

    Example:
        version = EngineVersion.parse("5.3")
        version.at_least(4, 26)  # True
    """

    major: int
    minor: int

    @classmethod
    def parse(cls, text: str) -> EngineVersion:
        """Parse a "major.minor[.patch]" string.

        Raises:
            ConfigureError: If the string is not a version.
        """
        match = _VERSION_RE.match(text)
        if match is None:
            raise ConfigureError(f"invalid engine version: {text!r}")
        return cls(int(match.group(1)), int(match.group(2)))

    def at_least(self, major: int, minor: int = 0) -> bool:
        return (self.major, self.minor) >= (major, minor)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


DEFAULT_ENGINE_VERSION = EngineVersion(5, 3)


@dataclass(frozen=True)
class TargetInfo:
    """Context for one configuration pass.

    Attributes:
        platform: Platform being built for.
        configuration: Build configuration name (Development, Shipping...).
        engine_version: Engine release the project builds against.
        target_type: Kind of target being built.
    """

    platform: TargetPlatform
    configuration: str = "Development"
    engine_version: EngineVersion = DEFAULT_ENGINE_VERSION
    target_type: TargetType = TargetType.GAME

    def to_dict(self) -> dict[str, str]:
        return {
            "platform": str(self.platform),
            "configuration": self.configuration,
            "engine_version": str(self.engine_version),
            "target_type": str(self.target_type),
        }
