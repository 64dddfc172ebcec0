# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build the mapping of discovered interpreter versions to executables."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TypeAlias

from .discovery import iter_directory_entries, split_search_path
from .errors import PathShapeError, VersionError
from .versions import ExactVersion

LOGGER = logging.getLogger(__name__)

CandidateIndex: TypeAlias = Mapping[ExactVersion, Path]


def build_index(paths: Iterable[Path]) -> dict[ExactVersion, Path]:
    """Map each discovered version onto the first executable providing it.

    Paths whose names do not carry a version are ignored.

    Args:
        paths: Candidate files in search-path order.

    Returns:
        dict[ExactVersion, Path]: One executable per distinct version.
    """

    executables: dict[ExactVersion, Path] = {}
    for path in paths:
        try:
            version = ExactVersion.from_path(path)
        except (PathShapeError, VersionError):
            continue
        if version in executables:
            LOGGER.debug("Ignoring %s; Python %s already provided by %s", path, version, executables[version])
            continue
        executables[version] = path
    LOGGER.debug("Found executables: %s", [str(path) for path in executables.values()])
    return executables


def all_executables(search_path: str | None) -> dict[ExactVersion, Path]:
    """Return every ``pythonX.Y`` executable reachable through ``search_path``.

    Args:
        search_path: Raw ``PATH``-style value to scan.

    Returns:
        dict[ExactVersion, Path]: Candidate index for the search path.
    """

    directories = split_search_path(search_path)
    LOGGER.debug("PATH: %s", [str(directory) for directory in directories])
    return build_index(iter_directory_entries(directories))


__all__ = ["CandidateIndex", "all_executables", "build_index"]
