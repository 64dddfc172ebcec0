# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render launcher help text and the interpreter listing."""

from __future__ import annotations

import os
from pathlib import Path

from rich import box
from rich.table import Table
from rich.text import Text

from .. import __version__
from ..constants import DEBUG_ENV, DEFAULT_VERSION_ENV, HELP_FLAGS, LIST_FLAG
from ..index import CandidateIndex

_HELP_TEMPLATE = """\
Python Launcher {version}
usage: {launcher} [launcher-args] [python-args] [script [script-args]]

Launcher arguments:
{help_flags}: This output; must be specified on its own.
{list_flag}: List all known interpreters; must be specified on its own.
-[X]: Launch the latest Python X version (e.g. `-3` for the latest Python 3).
      See ENVIRONMENT VARIABLES below for how to pick the default version
      for a major version.
-[X.Y]: Launch the specified Python version (e.g. `-3.6` for Python 3.6).

Any other arguments are passed to the interpreter unchanged.

ENVIRONMENT VARIABLES:
{default_env}: The version to use when none is requested (e.g. `3` or `3.10`).
{default_env}{{X}}: The version to use when only major version X is requested
             (e.g. `{default_env}3=3.10`).
{debug_env}: Set to any value to log the interpreter search to stderr.
"""


def help_message(launcher_path: Path) -> str:
    """Return the usage text for the launcher invoked as ``launcher_path``."""

    return _HELP_TEMPLATE.format(
        version=__version__,
        launcher=os.fspath(launcher_path),
        help_flags="/".join(HELP_FLAGS),
        list_flag=LIST_FLAG,
        default_env=DEFAULT_VERSION_ENV,
        debug_env=DEBUG_ENV,
    )


def list_table(index: CandidateIndex) -> Table:
    """Build a table of discovered interpreters, newest first.

    Args:
        index: Mapping of discovered versions to executables.

    Returns:
        Table: Rich table with ``Version`` and ``Path`` columns.
    """

    table = Table(box=box.SIMPLE, show_edge=False)
    table.add_column("Version", justify="right", style="bold")
    table.add_column("Path", overflow="fold")
    for version in sorted(index, reverse=True):
        table.add_row(str(version), Text(os.fspath(index[version])))
    return table


__all__ = ["help_message", "list_table"]
