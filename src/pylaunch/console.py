# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing console output and debug logging configuration."""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import Literal, TextIO

from rich.console import Console
from rich.text import Text

PACKAGE_LOGGER: Literal["pylaunch"] = "pylaunch"
_CONFIGURED_MARKER = "_pylaunch_debug_configured"


def detect_tty(stream: TextIO | None = None) -> bool:
    """Return ``True`` when ``stream`` (stdout by default) is a terminal."""

    target = sys.stdout if stream is None else stream
    try:
        return target.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=2)
def get_console(*, stderr: bool) -> Console:
    """Return a cached Rich console bound to stdout or stderr.

    Colour is only enabled when the underlying stream is a terminal.

    Args:
        stderr: ``True`` to write to standard error.

    Returns:
        Console: Console configured for the chosen stream.
    """

    tty = detect_tty(sys.stderr if stderr else sys.stdout)
    return Console(
        stderr=stderr,
        color_system="auto" if tty else None,
        no_color=not tty,
        highlight=False,
        soft_wrap=True,
    )


def _print_line(msg: str, *, style: str, console: Console | None) -> None:
    target = console or get_console(stderr=True)
    text = Text(msg)
    if not target.no_color:
        text.stylize(style)
    target.print(text)


def fail(msg: str, *, console: Console | None = None) -> None:
    """Emit an error message, to stderr unless ``console`` is given."""

    _print_line(msg, style="bold red", console=console)


def configure_logging(*, debug: bool) -> None:
    """Stream ``pylaunch`` debug records to stderr when ``debug`` is set.

    Repeated calls leave the handler installed by the first call in place.

    Args:
        debug: Whether debug logging was requested through the environment.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    if not debug or getattr(logger, _CONFIGURED_MARKER, False):
        return
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s %(name)s] %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    setattr(logger, _CONFIGURED_MARKER, True)


__all__ = ["configure_logging", "detect_tty", "fail", "get_console"]
