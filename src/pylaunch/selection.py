# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Choose the executable that best satisfies a requested version."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import assert_never

from .index import CandidateIndex, all_executables
from .versions import AnyVersion, Exact, ExactVersion, MajorOnly, RequestedVersion

LOGGER = logging.getLogger(__name__)


def select_executable(requested: RequestedVersion, index: CandidateIndex) -> Path | None:
    """Return the executable in ``index`` that best satisfies ``requested``.

    Broad requests resolve to the newest compatible version while an exact
    request is a plain lookup.

    Args:
        requested: Version constraint supplied by the caller.
        index: Mapping of discovered versions to executables.

    Returns:
        Path | None: Chosen executable, or ``None`` when nothing matches.
    """

    match requested:
        case AnyVersion() | MajorOnly():
            matching = [version for version in index if version.supports(requested)]
            if not matching:
                return None
            return index[max(matching)]
        case Exact(major=major, minor=minor):
            return index.get(ExactVersion(major, minor))
        case _:
            assert_never(requested)


def find_executable(requested: RequestedVersion, search_path: str | None) -> Path | None:
    """Scan ``search_path`` and return the executable chosen for ``requested``.

    Args:
        requested: Version constraint supplied by the caller.
        search_path: Raw ``PATH``-style value to scan.

    Returns:
        Path | None: Chosen executable, or ``None`` when nothing matches.
    """

    chosen = select_executable(requested, all_executables(search_path))
    LOGGER.debug("Selected %s for %s", chosen, requested)
    return chosen


__all__ = ["find_executable", "select_executable"]
