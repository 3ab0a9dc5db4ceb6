# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parsers turning analyzer and formatter output into findings."""

from __future__ import annotations

from .analyzer import (
    AnalysisReport,
    iter_findings,
    parse_analyzer_output,
    parse_machine_line,
    split_machine_fields,
)
from .base import MalformedLineError, ParseError, split_output_lines, strip_directory_prefix
from .formatter import build_format_args, count_style_findings, iter_style_findings

__all__ = [
    "AnalysisReport",
    "MalformedLineError",
    "ParseError",
    "build_format_args",
    "count_style_findings",
    "iter_findings",
    "iter_style_findings",
    "parse_analyzer_output",
    "parse_machine_line",
    "split_machine_fields",
    "split_output_lines",
    "strip_directory_prefix",
]
