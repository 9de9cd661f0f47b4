# SPDX-License-Identifier: MIT
"""Custom exceptions for modrules.

All modrules exceptions inherit from ModrulesError. Filesystem problems
met while resolving toolchain paths are not raised; they are reported
through a Resolution instead (see modrules.core.result).
"""

from __future__ import annotations


class ModrulesError(Exception):
    """Base class for all modrules exceptions.

    Attributes:
        message: The error message.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigureError(ModrulesError):
    """Error during the configure phase.

    Raised when a setting has an invalid value, such as an unknown
    version selection policy or a malformed engine version.
    """


class UnknownPlatformError(ModrulesError):
    """Target platform name is not recognised.

    Attributes:
        name: The platform name that was given.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown target platform: {name}")


class GenerateError(ModrulesError):
    """Error during manifest generation."""
