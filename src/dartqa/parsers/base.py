# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared parser infrastructure and helper utilities."""

from __future__ import annotations

import re
from typing import Final

_LINE_BREAK_RE: Final[re.Pattern[str]] = re.compile(r"\r?\n")


class ParseError(ValueError):
    """Raised when tool output cannot be interpreted."""


class MalformedLineError(ParseError):
    """Raised when a delimited output line does not match the expected grammar."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason


def split_output_lines(output: str) -> list[str]:
    """Split tool output into lines after trimming the surrounding whitespace.

    Args:
        output: Raw text captured from a tool.

    Returns:
        list[str]: Lines split on either ``\\n`` or ``\\r\\n``. Empty output yields ``[""]``.
    """

    return _LINE_BREAK_RE.split(output.strip())


def strip_directory_prefix(path: str, directory: str) -> str:
    """Return ``path`` relative to ``directory`` when it lives underneath it.

    Args:
        path: Absolute path reported by a tool.
        directory: Directory whose prefix should be removed.

    Returns:
        str: ``path`` without the ``directory`` prefix and the separator that
        follows it, or ``path`` unchanged when it is outside ``directory``.
    """

    prefix = directory.rstrip("/\\")
    if not prefix or not path.startswith(prefix):
        return path
    remainder = path[len(prefix) :]
    if remainder and remainder[0] not in "/\\":
        # sibling directory sharing a name prefix, e.g. /work/app vs /work/app2
        return path
    return remainder.lstrip("/\\")


__all__ = [
    "MalformedLineError",
    "ParseError",
    "split_output_lines",
    "strip_directory_prefix",
]
