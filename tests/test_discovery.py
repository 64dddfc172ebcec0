# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for search-path enumeration."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from pylaunch.discovery import iter_directory_entries, split_search_path


@pytest.mark.parametrize("value", [None, ""])
def test_split_search_path_unset_or_empty(value: str | None) -> None:
    assert split_search_path(value) == []


def test_split_search_path_preserves_order_and_drops_empty_segments() -> None:
    value = os.pathsep.join(["/usr/local/bin", "", "/usr/bin", "/bin", ""])

    assert split_search_path(value) == [Path("/usr/local/bin"), Path("/usr/bin"), Path("/bin")]


def test_iter_directory_entries_walks_directories_in_order(tmp_path: Path, make_interpreters) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    make_interpreters(first, ["python3.6"])
    make_interpreters(second, ["python3.7", "python3.8"])

    entries = list(iter_directory_entries([first, second]))

    assert entries[0] == first / "python3.6"
    assert sorted(entries[1:]) == [second / "python3.7", second / "python3.8"]


def test_iter_directory_entries_skips_missing_directories(tmp_path: Path, make_interpreters) -> None:
    present = tmp_path / "present"
    make_interpreters(present, ["python3.11"])

    entries = list(iter_directory_entries([tmp_path / "missing", present, tmp_path / "also-missing"]))

    assert entries == [present / "python3.11"]


def test_iter_directory_entries_skips_files_listed_as_directories(tmp_path: Path, make_interpreters) -> None:
    (not_a_dir,) = make_interpreters(tmp_path, ["python3.9"])

    assert list(iter_directory_entries([not_a_dir])) == []


def test_iter_directory_entries_yields_only_regular_files(tmp_path: Path, make_interpreters) -> None:
    bin_dir = tmp_path / "bin"
    (target,) = make_interpreters(bin_dir, ["python3.12"])
    (bin_dir / "python3.4").mkdir()
    (bin_dir / "python3").symlink_to(target)
    (bin_dir / "python3.1").symlink_to(bin_dir / "does-not-exist")

    entries = sorted(iter_directory_entries([bin_dir]))

    assert entries == [bin_dir / "python3", bin_dir / "python3.12"]


@pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="requires POSIX permissions as non-root")
def test_iter_directory_entries_skips_unreadable_directories(tmp_path: Path, make_interpreters) -> None:
    locked = tmp_path / "locked"
    make_interpreters(locked, ["python3.10"])
    open_dir = tmp_path / "open"
    make_interpreters(open_dir, ["python3.11"])
    locked.chmod(0o000)
    try:
        entries = list(iter_directory_entries([locked, open_dir]))
    finally:
        locked.chmod(0o755)

    assert entries == [open_dir / "python3.11"]

