# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Version models describing requested and discovered interpreters.

A :data:`RequestedVersion` captures what the user asked for and ranges from
:class:`AnyVersion` to an :class:`Exact` ``major.minor`` pair. An
:class:`ExactVersion` is the concrete version embedded in a discovered
``pythonX.Y`` executable name.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import PurePath
from typing import TypeAlias, assert_never

from .constants import (
    COMPONENT_MAX,
    DEFAULT_VERSION_ENV,
    EXECUTABLE_PREFIX,
    FLAG_MARKER,
    MIN_EXECUTABLE_NAME,
    VERSION_SEPARATOR,
)
from .errors import (
    DotMissingError,
    FileNameDecodeError,
    FileNameMissingError,
    ParseVersionComponentError,
    PathFileNameError,
)

_Pathish = str | bytes | os.PathLike[str] | os.PathLike[bytes]
_ASCII_DIGITS = frozenset("0123456789")


@dataclass(frozen=True, slots=True)
class AnyVersion:
    """Any interpreter version is acceptable."""

    def env_var(self) -> str | None:
        """Return the environment variable holding the default version."""

        return DEFAULT_VERSION_ENV

    def __str__(self) -> str:
        return "Python"


@dataclass(frozen=True, slots=True)
class MajorOnly:
    """Any interpreter sharing ``major`` is acceptable (e.g. ``3.x``)."""

    major: int

    def env_var(self) -> str | None:
        """Return the environment variable scoped to this major version."""

        return f"{DEFAULT_VERSION_ENV}{self.major}"

    def __str__(self) -> str:
        return f"Python {self.major}"


@dataclass(frozen=True, slots=True)
class Exact:
    """Only the interpreter matching ``major.minor`` is acceptable."""

    major: int
    minor: int

    def env_var(self) -> str | None:
        """Exact requests have no default to consult."""

        return None

    def __str__(self) -> str:
        return f"Python {self.major}.{self.minor}"


RequestedVersion: TypeAlias = AnyVersion | MajorOnly | Exact


def _parse_component(text: str) -> int:
    """Parse ``text`` as an unsigned version component.

    Args:
        text: Substring expected to contain only ASCII digits.

    Returns:
        int: Parsed component value.

    Raises:
        ParseVersionComponentError: If ``text`` is empty, holds anything other
            than ASCII digits, or exceeds :data:`COMPONENT_MAX`.
    """

    if not text:
        raise ParseVersionComponentError(text, "empty") from ValueError(
            "cannot parse integer from empty string"
        )
    if not _ASCII_DIGITS.issuperset(text):
        raise ParseVersionComponentError(text, "invalid digit") from ValueError(
            f"invalid digit found in {text!r}"
        )
    value = int(text)
    if value > COMPONENT_MAX:
        raise ParseVersionComponentError(text, "overflow") from ValueError(
            f"{value} exceeds the maximum component value {COMPONENT_MAX}"
        )
    return value


@dataclass(frozen=True, order=True, slots=True)
class ExactVersion:
    """Concrete ``major.minor`` version ordered by major, then minor."""

    major: int
    minor: int

    @classmethod
    def parse(cls, text: str) -> ExactVersion:
        """Parse a dotted ``major.minor`` string.

        Only the first ``.`` splits the components, so a micro version such as
        ``3.6.5`` fails while parsing the minor component.

        Args:
            text: Version string such as ``"3.10"``.

        Returns:
            ExactVersion: Parsed version.

        Raises:
            DotMissingError: If ``text`` has no ``.``.
            ParseVersionComponentError: If either component is not numeric.
        """

        major_text, separator, minor_text = text.partition(VERSION_SEPARATOR)
        if not separator:
            raise DotMissingError()
        major = _parse_component(major_text)
        minor = _parse_component(minor_text)
        return cls(major, minor)

    @classmethod
    def from_path(cls, path: _Pathish) -> ExactVersion:
        """Extract the version embedded in a ``pythonX.Y`` file path.

        Args:
            path: Filesystem path whose final component names the executable.

        Returns:
            ExactVersion: Version parsed from the file name.

        Raises:
            FileNameMissingError: If ``path`` has no final component.
            FileNameDecodeError: If the final component is not valid UTF-8.
            PathFileNameError: If the name does not look like ``pythonX.Y``.
            DotMissingError: If the suffix lacks a ``.``.
            ParseVersionComponentError: If the suffix is not numeric.
        """

        name = PurePath(os.fsdecode(os.fspath(path))).name
        if name in ("", ".."):
            raise FileNameMissingError()
        try:
            name.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise FileNameDecodeError() from exc
        if len(name) < len(MIN_EXECUTABLE_NAME) or not name.startswith(EXECUTABLE_PREFIX):
            raise PathFileNameError()
        return cls.parse(name[len(EXECUTABLE_PREFIX) :])

    def supports(self, requested: RequestedVersion) -> bool:
        """Return whether this version satisfies ``requested``."""

        match requested:
            case AnyVersion():
                return True
            case MajorOnly(major=major):
                return self.major == major
            case Exact(major=major, minor=minor):
                return self.major == major and self.minor == minor
            case _:
                assert_never(requested)

    def to_requested(self) -> Exact:
        """Return the :class:`Exact` request matching this version."""

        return Exact(self.major, self.minor)

    def __str__(self) -> str:
        return f"{self.major}{VERSION_SEPARATOR}{self.minor}"


def parse_requested_version(text: str) -> RequestedVersion:
    """Parse a version constraint such as ``""``, ``"3"`` or ``"3.10"``.

    Args:
        text: Constraint supplied on the command line or in the environment.

    Returns:
        RequestedVersion: Parsed constraint.

    Raises:
        ParseVersionComponentError: If a component is not numeric.
    """

    if not text:
        return AnyVersion()
    if VERSION_SEPARATOR in text:
        return ExactVersion.parse(text).to_requested()
    return MajorOnly(_parse_component(text))


def parse_version_flag(arg: str) -> RequestedVersion | None:
    """Return the version requested by a ``-X`` or ``-X.Y`` flag.

    Anything that is not a well-formed version flag yields ``None`` so the
    argument can be forwarded to the interpreter untouched.

    Args:
        arg: Command-line argument to inspect.

    Returns:
        RequestedVersion | None: Requested version, or ``None`` when ``arg``
        is not a version flag.
    """

    if not arg.startswith(FLAG_MARKER):
        return None
    remainder = arg[len(FLAG_MARKER) :]
    if not remainder:
        return None
    try:
        return parse_requested_version(remainder)
    except (ParseVersionComponentError, DotMissingError):
        return None


__all__ = [
    "AnyVersion",
    "Exact",
    "ExactVersion",
    "MajorOnly",
    "RequestedVersion",
    "parse_requested_version",
    "parse_version_flag",
]
