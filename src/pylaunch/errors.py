# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Error hierarchy raised while resolving and launching interpreters."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Literal

from .constants import EXECUTABLE_PREFIX, ExitCode

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from .versions import RequestedVersion

ComponentFailure = Literal["empty", "invalid digit", "overflow"]


class LauncherError(Exception):
    """Base class for launcher failures that map onto an exit status."""

    exit_code: ExitCode = ExitCode.USAGE


class VersionError(LauncherError):
    """Raised when a version string is malformed."""


class ParseVersionComponentError(VersionError):
    """Raised when one component of a version is not an unsigned integer.

    Args:
        value: Substring that failed to parse.
        reason: Category of the numeric failure.
    """

    def __init__(self, value: str, reason: ComponentFailure) -> None:
        super().__init__(f"Error parsing {value!r} as an integer: {reason}")
        self.value = value
        self.reason: ComponentFailure = reason


class DotMissingError(VersionError):
    """Raised when an exact version lacks the ``.`` separator."""

    def __init__(self) -> None:
        super().__init__("'.' missing from the version")


class PathShapeError(LauncherError):
    """Raised when a filesystem path cannot describe an interpreter."""


class FileNameMissingError(PathShapeError):
    """Raised when a path has no final component."""

    def __init__(self) -> None:
        super().__init__("Path object lacks a file name")


class FileNameDecodeError(PathShapeError):
    """Raised when a file name cannot be interpreted as UTF-8 text."""

    exit_code = ExitCode.SOFTWARE

    def __init__(self) -> None:
        super().__init__("Failed to convert file name to text")


class PathFileNameError(PathShapeError):
    """Raised when a file name is not of the form ``pythonX.Y``."""

    exit_code = ExitCode.SOFTWARE

    def __init__(self) -> None:
        super().__init__(f"File name not of the format `{EXECUTABLE_PREFIX}X.Y`")


class NoExecutableFoundError(LauncherError):
    """Raised when no interpreter satisfies the requested version."""

    def __init__(self, requested: RequestedVersion) -> None:
        super().__init__(f"No executable found for {requested}")
        self.requested = requested


class IllegalArgumentError(LauncherError):
    """Raised when a flag that must stand alone is combined with others."""

    def __init__(self, launcher_path: Path, flag: str) -> None:
        super().__init__(
            f"The `{flag}` flag must be specified on its own; see `{launcher_path} --help` for details"
        )
        self.launcher_path = launcher_path
        self.flag = flag


__all__ = [
    "ComponentFailure",
    "DotMissingError",
    "FileNameDecodeError",
    "FileNameMissingError",
    "IllegalArgumentError",
    "LauncherError",
    "NoExecutableFoundError",
    "ParseVersionComponentError",
    "PathFileNameError",
    "PathShapeError",
    "VersionError",
]
