# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Launcher settings captured from an explicit environment mapping."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from .constants import DEBUG_ENV, DEFAULT_VERSION_ENV, PATH_ENV
from .errors import VersionError
from .versions import RequestedVersion, parse_requested_version

LOGGER = logging.getLogger(__name__)

_VERSION_DEFAULT_PATTERN: Final[re.Pattern[str]] = re.compile(rf"{DEFAULT_VERSION_ENV}[0-9]*")


class LauncherSettings(BaseModel):
    """Snapshot of the environment consulted by the launcher."""

    model_config = ConfigDict(frozen=True)

    search_path: str | None = None
    version_defaults: dict[str, str] = Field(default_factory=dict)
    debug: bool = False

    @classmethod
    def from_environ(cls, env: Mapping[str, str]) -> LauncherSettings:
        """Build settings from ``env``.

        Args:
            env: Environment mapping, typically :data:`os.environ`.

        Returns:
            LauncherSettings: Settings holding ``PATH``, the ``PY_PYTHON*``
            defaults and the debug toggle.
        """

        defaults = {
            name: value for name, value in env.items() if _VERSION_DEFAULT_PATTERN.fullmatch(name)
        }
        return cls(
            search_path=env.get(PATH_ENV),
            version_defaults=defaults,
            debug=bool(env.get(DEBUG_ENV)),
        )

    def resolve_requested(self, requested: RequestedVersion) -> RequestedVersion:
        """Apply the environment default configured for ``requested``.

        ``PY_PYTHON`` refines an unconstrained request and ``PY_PYTHON<X>``
        refines a major-only request. The value is used as-is, so
        ``PY_PYTHON3=2.7`` is honoured. Blank or malformed values leave
        ``requested`` unchanged.

        Args:
            requested: Version parsed from the command line.

        Returns:
            RequestedVersion: Version to search for.
        """

        env_var = requested.env_var()
        if env_var is None:
            return requested
        value = self.version_defaults.get(env_var, "")
        if not value:
            return requested
        try:
            resolved = parse_requested_version(value)
        except VersionError as exc:
            LOGGER.warning("Ignoring %s=%r: %s", env_var, value, exc)
            return requested
        LOGGER.debug("%s=%s resolves %s to %s", env_var, value, requested, resolved)
        return resolved


__all__ = ["LauncherSettings"]
