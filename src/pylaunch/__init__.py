# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate and launch installed Python interpreters by version."""

from __future__ import annotations

from importlib import metadata

try:
    __version__ = metadata.version("pylaunch")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"

from .errors import LauncherError, NoExecutableFoundError
from .index import all_executables, build_index
from .selection import find_executable, select_executable
from .versions import (
    AnyVersion,
    Exact,
    ExactVersion,
    MajorOnly,
    RequestedVersion,
    parse_requested_version,
    parse_version_flag,
)

__all__ = [
    "AnyVersion",
    "Exact",
    "ExactVersion",
    "LauncherError",
    "MajorOnly",
    "NoExecutableFoundError",
    "RequestedVersion",
    "__version__",
    "all_executables",
    "build_index",
    "find_executable",
    "parse_requested_version",
    "parse_version_flag",
    "select_executable",
]
