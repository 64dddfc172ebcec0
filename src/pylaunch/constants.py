# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Launcher-wide constants."""

from __future__ import annotations

from enum import IntEnum
from typing import Final

PROG_NAME: Final[str] = "py"
EXECUTABLE_PREFIX: Final[str] = "python"
# Shortest acceptable executable name, e.g. ``python3.0``.
MIN_EXECUTABLE_NAME: Final[str] = f"{EXECUTABLE_PREFIX}3.0"
VERSION_SEPARATOR: Final[str] = "."
FLAG_MARKER: Final[str] = "-"
COMPONENT_MAX: Final[int] = 2**16 - 1

PATH_ENV: Final[str] = "PATH"
DEFAULT_VERSION_ENV: Final[str] = "PY_PYTHON"
DEBUG_ENV: Final[str] = "PYLAUNCH_DEBUG"

HELP_FLAGS: Final[tuple[str, ...]] = ("-h", "--help")
LIST_FLAG: Final[str] = "--list"


class ExitCode(IntEnum):
    """Process exit statuses following ``sysexits.h``."""

    OK = 0
    USAGE = 64
    SOFTWARE = 70
    OSERR = 71


__all__ = [
    "COMPONENT_MAX",
    "DEBUG_ENV",
    "DEFAULT_VERSION_ENV",
    "EXECUTABLE_PREFIX",
    "ExitCode",
    "FLAG_MARKER",
    "HELP_FLAGS",
    "LIST_FLAG",
    "MIN_EXECUTABLE_NAME",
    "PATH_ENV",
    "PROG_NAME",
    "VERSION_SEPARATOR",
]
