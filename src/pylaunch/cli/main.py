# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Entry point for the ``py`` console script."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence
from typing import assert_never

from rich.console import Console
from rich.text import Text

from .. import launch
from ..config import LauncherSettings
from ..console import configure_logging, fail, get_console
from ..constants import ExitCode
from ..errors import LauncherError, NoExecutableFoundError
from ..versions import AnyVersion
from .actions import Execute, Help, ListExecutables, parse_action
from .render import list_table


def main(
    argv: Sequence[str] | None = None,
    env: Mapping[str, str] | None = None,
    *,
    console: Console | None = None,
    error_console: Console | None = None,
) -> int:
    """Run the launcher and return an exit status.

    A successful launch replaces the current process, so this only returns
    after listing interpreters or on failure.

    Args:
        argv: Argument vector including the launcher path; defaults to
            :data:`sys.argv`.
        env: Environment mapping; defaults to :data:`os.environ`.
        console: Console receiving regular output.
        error_console: Console receiving error messages.

    Returns:
        int: Exit status for the process.
    """

    settings = LauncherSettings.from_environ(os.environ if env is None else env)
    configure_logging(debug=settings.debug)
    out = console or get_console(stderr=False)

    try:
        action = parse_action(sys.argv if argv is None else argv, settings)
        match action:
            case Help(message=message, executable=executable):
                out.print(Text(message), end="")
                launch.replace_process(executable, ["--help"])
            case ListExecutables(index=index):
                if not index:
                    raise NoExecutableFoundError(AnyVersion())
                out.print(list_table(index))
            case Execute(executable=executable, args=args):
                launch.replace_process(executable, args)
            case _:
                assert_never(action)
    except LauncherError as exc:
        fail(str(exc), console=error_console)
        return int(exc.exit_code)
    except OSError as exc:
        fail(f"Failed to execute {exc.filename or 'interpreter'}: {exc.strerror or exc}", console=error_console)
        return int(ExitCode.OSERR)
    return int(ExitCode.OK)


def run() -> None:
    """Console-script wrapper exiting with :func:`main`'s status."""

    sys.exit(main())


__all__ = ["main", "run"]
