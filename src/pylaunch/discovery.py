# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Enumerate candidate files from search-path directories."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

LOGGER = logging.getLogger(__name__)


def split_search_path(value: str | None) -> list[Path]:
    """Split a ``PATH``-style value into directories in declared order.

    Empty segments are dropped rather than treated as the current directory.

    Args:
        value: Raw search-path value; ``None`` when the variable is unset.

    Returns:
        list[Path]: Directories to scan, earliest first.
    """

    if not value:
        return []
    return [Path(segment) for segment in value.split(os.pathsep) if segment]


def _iter_directory(directory: Path) -> Iterator[Path]:
    """Yield regular files directly inside ``directory``.

    Unreadable directories and entries whose metadata cannot be read are
    skipped.
    """

    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                try:
                    is_file = entry.is_file()
                except OSError:
                    continue
                if is_file:
                    yield Path(entry.path)
    except OSError as exc:
        LOGGER.debug("Skipping unreadable directory %s: %s", directory, exc)


def iter_directory_entries(directories: Iterable[Path]) -> Iterator[Path]:
    """Lazily yield the regular files found in each of ``directories``.

    Args:
        directories: Directories in search-path order.

    Returns:
        Iterator[Path]: File paths, grouped by directory in the given order.
    """

    for directory in directories:
        yield from _iter_directory(directory)


__all__ = ["iter_directory_entries", "split_search_path"]
