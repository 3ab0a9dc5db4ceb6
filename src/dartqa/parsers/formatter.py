# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parser for ``dart format --output=none`` output."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Final

from ..core.models import RunResult, StyleFinding
from .base import split_output_lines

DART_SUFFIX: Final[str] = ".dart"
CHANGED_PREFIX: Final[str] = "Changed "
FORMAT_DOCS_URL: Final[str] = "https://dart.dev/guides/language/effective-dart/style#formatting"
FORMAT_MESSAGE: Final[str] = f"Invalid format. For more details, see {FORMAT_DOCS_URL}"


def build_format_args(line_length: int | None = None, *, target: str = ".") -> list[str]:
    """Return the ``dart`` arguments for a check-only format run.

    Args:
        line_length: Optional maximum line length forwarded to the formatter.
        target: Path handed to the formatter, relative to its working directory.

    Returns:
        list[str]: Arguments following the ``dart`` executable.
    """

    args = ["format", "--output=none"]
    if line_length is not None:
        args.extend(["--line-length", str(line_length)])
    args.append(target)
    return args


def iter_style_findings(output: str) -> Iterator[StyleFinding]:
    """Yield one :class:`StyleFinding` per file the formatter reported as changed.

    Only lines ending in ``.dart`` are considered; summary lines such as
    ``Formatted 12 files (1 changed)`` are ignored.
    """

    for line in split_output_lines(output):
        if not line.endswith(DART_SUFFIX):
            continue
        yield StyleFinding(file_path=line.removeprefix(CHANGED_PREFIX))


def count_style_findings(findings: tuple[StyleFinding, ...]) -> RunResult:
    """Fold formatter findings into a :class:`RunResult`."""

    result = RunResult()
    for finding in findings:
        result = result.add_style_finding(finding)
    return result


__all__ = [
    "CHANGED_PREFIX",
    "DART_SUFFIX",
    "FORMAT_DOCS_URL",
    "FORMAT_MESSAGE",
    "build_format_args",
    "count_style_findings",
    "iter_style_findings",
]
