# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for choosing an executable from the candidate index."""

from __future__ import annotations

from pathlib import Path

import pytest

from pylaunch.selection import find_executable, select_executable
from pylaunch.versions import AnyVersion, Exact, ExactVersion, MajorOnly

PY36 = Path("/python3.6")
PY37 = Path("/python3.7")
INDEX = {ExactVersion(3, 6): PY36, ExactVersion(3, 7): PY37}


@pytest.mark.parametrize(
    ("requested", "expected"),
    [
        (AnyVersion(), PY37),
        (MajorOnly(42), None),
        (MajorOnly(3), PY37),
        (Exact(3, 8), None),
        (Exact(3, 6), PY36),
    ],
)
def test_select_executable(requested, expected: Path | None) -> None:
    assert select_executable(requested, INDEX) == expected


@pytest.mark.parametrize("requested", [AnyVersion(), MajorOnly(3), Exact(3, 6)])
def test_select_executable_empty_index(requested) -> None:
    assert select_executable(requested, {}) is None


def test_select_executable_prefers_numeric_minor() -> None:
    index = {
        ExactVersion(3, 9): Path("/python3.9"),
        ExactVersion(3, 10): Path("/python3.10"),
        ExactVersion(2, 7): Path("/python2.7"),
    }

    assert select_executable(AnyVersion(), index) == Path("/python3.10")
    assert select_executable(MajorOnly(2), index) == Path("/python2.7")


def test_select_executable_any_prefers_newest_major() -> None:
    index = {ExactVersion(2, 99): Path("/python2.99"), ExactVersion(3, 0): Path("/python3.0")}

    assert select_executable(AnyVersion(), index) == Path("/python3.0")


def test_find_executable_scans_search_path(tmp_path: Path, make_interpreters, search_path) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    make_interpreters(first, ["python3.8"])
    make_interpreters(second, ["python3.8", "python3.11"])
    value = search_path(first, second)

    assert find_executable(AnyVersion(), value) == second / "python3.11"
    assert find_executable(Exact(3, 8), value) == first / "python3.8"
    assert find_executable(MajorOnly(2), value) is None
    assert find_executable(AnyVersion(), None) is None
