# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate launcher command-line arguments into an action."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

from ..config import LauncherSettings
from ..constants import HELP_FLAGS, LIST_FLAG, PROG_NAME
from ..errors import IllegalArgumentError, NoExecutableFoundError
from ..index import CandidateIndex, all_executables
from ..selection import find_executable
from ..versions import AnyVersion, RequestedVersion, parse_version_flag
from .render import help_message

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Help:
    """Print launcher usage, then the chosen interpreter's own help."""

    message: str
    executable: Path


@dataclass(frozen=True, slots=True)
class ListExecutables:
    """Print every discovered interpreter."""

    index: CandidateIndex


@dataclass(frozen=True, slots=True)
class Execute:
    """Run ``executable`` with the remaining arguments."""

    launcher_path: Path
    executable: Path
    args: tuple[str, ...]


Action: TypeAlias = Help | ListExecutables | Execute


def _resolve_executable(requested: RequestedVersion, settings: LauncherSettings) -> Path:
    """Return the executable for ``requested`` after applying environment defaults.

    Raises:
        NoExecutableFoundError: If no interpreter satisfies the request.
    """

    resolved = settings.resolve_requested(requested)
    executable = find_executable(resolved, settings.search_path)
    if executable is None:
        raise NoExecutableFoundError(resolved)
    return executable


def parse_action(argv: Sequence[str], settings: LauncherSettings) -> Action:
    """Classify ``argv`` into the action the launcher should perform.

    ``-h``/``--help`` and ``--list`` are only recognised as the first argument
    and must stand alone. A ``-X`` or ``-X.Y`` first argument selects the
    version and is consumed; every other argument is forwarded untouched.

    Args:
        argv: Full argument vector including the launcher path.
        settings: Environment snapshot used for discovery and defaults.

    Returns:
        Action: Action to perform.

    Raises:
        IllegalArgumentError: If a standalone flag is combined with others.
        NoExecutableFoundError: If no interpreter satisfies the request.
    """

    launcher_path = Path(argv[0]) if argv else Path(PROG_NAME)
    args = list(argv[1:])

    if args and (args[0] in HELP_FLAGS or args[0] == LIST_FLAG):
        flag = args[0]
        if len(args) > 1:
            raise IllegalArgumentError(launcher_path, flag)
        if flag == LIST_FLAG:
            return ListExecutables(all_executables(settings.search_path))
        executable = _resolve_executable(AnyVersion(), settings)
        return Help(help_message(launcher_path), executable)

    requested: RequestedVersion = AnyVersion()
    if args:
        flag_version = parse_version_flag(args[0])
        if flag_version is not None:
            LOGGER.debug("Version flag %s requests %s", args[0], flag_version)
            requested = flag_version
            args = args[1:]

    executable = _resolve_executable(requested, settings)
    return Execute(launcher_path, executable, tuple(args))


__all__ = ["Action", "Execute", "Help", "ListExecutables", "parse_action"]
