# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Replace the current process with the selected interpreter."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

LOGGER = logging.getLogger(__name__)


def replace_process(executable: Path, args: Sequence[str]) -> None:
    """Execute ``executable`` with ``args`` in place of the current process.

    ``argv[0]`` is set to the executable path. On success this never returns.

    Args:
        executable: Interpreter to run.
        args: Arguments forwarded after ``argv[0]``.

    Raises:
        OSError: If the operating system refuses to execute ``executable``.
    """

    argv = [os.fspath(executable), *args]
    LOGGER.debug("Executing %s", argv)
    sys.stdout.flush()
    sys.stderr.flush()
    os.execv(executable, argv)


__all__ = ["replace_process"]
