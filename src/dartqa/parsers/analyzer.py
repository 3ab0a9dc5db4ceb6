# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parser for ``dart analyze --format machine`` output.

Each data line carries eight pipe-delimited fields::

    SEVERITY|CATEGORY|RULE|/abs/path/file.dart|LINE|COLUMN|LENGTH|MESSAGE

The analyzer escapes literal ``|`` and ``\\`` characters inside a field with a
backslash. Lines without a delimiter are banners or progress text and are
ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from os import PathLike
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..core.models import Finding, RunResult, fold_findings
from ..core.severity import severity_from_label
from .base import MalformedLineError, split_output_lines, strip_directory_prefix

LOGGER = logging.getLogger(__name__)

FIELD_DELIMITER: Final[str] = "|"
ESCAPE_CHAR: Final[str] = "\\"
MACHINE_FIELD_COUNT: Final[int] = 8

_SEVERITY_INDEX: Final[int] = 0
_RULE_INDEX: Final[int] = 2
_PATH_INDEX: Final[int] = 3
_LINE_INDEX: Final[int] = 4
_COLUMN_INDEX: Final[int] = 5
_LENGTH_INDEX: Final[int] = 6
_MESSAGE_INDEX: Final[int] = 7


class AnalysisReport(BaseModel):
    """Findings parsed from one analyzer run together with their counts."""

    model_config = ConfigDict(frozen=True)

    findings: tuple[Finding, ...] = Field(default_factory=tuple)
    result: RunResult = Field(default_factory=RunResult)

    @property
    def counts(self) -> tuple[int, int, int]:
        """Return ``(errors, warnings, infos)``."""
        return self.result.error_count, self.result.warning_count, self.result.info_count


def split_machine_fields(line: str) -> list[str]:
    """Split a machine-format line on unescaped delimiters.

    Only ``\\|`` and ``\\\\`` are treated as escapes; any other backslash is
    kept as-is.

    Args:
        line: Raw analyzer output line.

    Returns:
        list[str]: Unescaped field values in order.
    """

    fields: list[str] = []
    current: list[str] = []
    index = 0
    while index < len(line):
        char = line[index]
        following = line[index + 1] if index + 1 < len(line) else ""
        if char == ESCAPE_CHAR and following in {FIELD_DELIMITER, ESCAPE_CHAR}:
            current.append(following)
            index += 2
            continue
        if char == FIELD_DELIMITER:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        index += 1
    fields.append("".join(current))
    return fields


def _parse_int(value: str, *, name: str, line: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise MalformedLineError(line, f"{name} '{value}' is not an integer") from exc


def parse_machine_line(line: str, working_directory: str | PathLike[str]) -> Finding:
    """Parse one delimited analyzer line into a :class:`Finding`.

    Args:
        line: Analyzer output line containing the field delimiter.
        working_directory: Directory stripped from the reported absolute path.

    Returns:
        Finding: Typed finding with a workspace-relative file path.

    Raises:
        MalformedLineError: If the line has fewer than eight fields or carries
            an invalid line, column or length value.
    """

    fields = split_machine_fields(line)
    if len(fields) < MACHINE_FIELD_COUNT:
        raise MalformedLineError(line, f"expected {MACHINE_FIELD_COUNT} fields, found {len(fields)}")

    # Surplus fields come from unescaped delimiters inside the message.
    message = FIELD_DELIMITER.join(fields[_MESSAGE_INDEX:])
    length_field = fields[_LENGTH_INDEX].strip()
    try:
        return Finding(
            severity=severity_from_label(fields[_SEVERITY_INDEX]),
            rule_id=fields[_RULE_INDEX],
            file_path=strip_directory_prefix(fields[_PATH_INDEX], str(working_directory)),
            line=_parse_int(fields[_LINE_INDEX], name="line", line=line),
            column=_parse_int(fields[_COLUMN_INDEX], name="column", line=line),
            length=_parse_int(length_field, name="length", line=line) if length_field else 0,
            message=message,
        )
    except ValidationError as exc:
        raise MalformedLineError(line, "field out of range") from exc


def iter_findings(output: str, working_directory: str | PathLike[str]) -> Iterator[Finding]:
    """Yield findings from analyzer output in input order.

    Malformed data lines are logged and skipped.

    Args:
        output: Combined stdout/stderr text captured from the analyzer.
        working_directory: Directory stripped from reported file paths.

    Yields:
        Finding: One finding per well-formed data line.
    """

    for line in split_output_lines(output):
        if FIELD_DELIMITER not in line:
            continue
        try:
            yield parse_machine_line(line, working_directory)
        except MalformedLineError as exc:
            LOGGER.warning("skipping malformed analyzer line: %s", exc)


def parse_analyzer_output(output: str, working_directory: str | PathLike[str]) -> AnalysisReport:
    """Parse analyzer output into an :class:`AnalysisReport`."""

    findings = tuple(iter_findings(output, working_directory))
    return AnalysisReport(findings=findings, result=fold_findings(findings))


__all__ = [
    "FIELD_DELIMITER",
    "MACHINE_FIELD_COUNT",
    "AnalysisReport",
    "iter_findings",
    "parse_analyzer_output",
    "parse_machine_line",
    "split_machine_fields",
]
