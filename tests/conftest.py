# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

import pytest

MakeInterpreters = Callable[[Path, Iterable[str]], list[Path]]


@pytest.fixture
def make_interpreters() -> MakeInterpreters:
    """Return a factory creating executable stub files inside a directory."""

    def _make(directory: Path, names: Iterable[str]) -> list[Path]:
        directory.mkdir(parents=True, exist_ok=True)
        created: list[Path] = []
        for name in names:
            path = directory / name
            path.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
            path.chmod(0o755)
            created.append(path)
        return created

    return _make


@pytest.fixture
def search_path() -> Callable[..., str]:
    """Return a helper joining directories into a ``PATH``-style value."""

    def _join(*directories: Path) -> str:
        return os.pathsep.join(str(directory) for directory in directories)

    return _join


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Restore the ``pylaunch`` logger after tests that enable debug output."""

    logger = logging.getLogger("pylaunch")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    if hasattr(logger, "_pylaunch_debug_configured"):
        delattr(logger, "_pylaunch_debug_configured")
