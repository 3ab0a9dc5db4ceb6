# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for core models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from dartqa.core.models import Annotation, Finding, RunResult, ToolResult, fold_findings
from dartqa.core.severity import Severity, severity_from_label, severity_to_channel


def _finding(severity: Severity, **overrides: object) -> Finding:
    values: dict[str, object] = {
        "severity": severity,
        "rule_id": "avoid_print",
        "file_path": "lib/main.dart",
        "line": 3,
        "column": 5,
        "message": "Avoid print.",
    }
    values.update(overrides)
    return Finding(**values)


def test_finding_is_immutable() -> None:
    finding = _finding(Severity.INFO)
    with pytest.raises(ValidationError):
        finding.line = 10


def test_fold_findings_counts_each_severity() -> None:
    findings = [_finding(Severity.ERROR), _finding(Severity.INFO), _finding(Severity.INFO)]
    result = fold_findings(findings)
    assert (result.error_count, result.warning_count, result.info_count) == (1, 0, 2)
    assert result.issue_count == 3


def test_merge_adds_counts() -> None:
    merged = RunResult(error_count=1, warning_count=2).merge(RunResult(info_count=3, style_warning_count=4))
    assert merged == RunResult(error_count=1, warning_count=2, info_count=3, style_warning_count=4)
    assert merged.issue_count == 10


def test_annotation_for_finding_spans_highlight() -> None:
    annotation = Annotation.for_finding(_finding(Severity.WARNING, length=4), title="Code Analysis Output")
    assert annotation.start_line == annotation.end_line == 3
    assert annotation.start_column == 5
    assert annotation.end_column == 8


def test_zero_length_highlight_ends_on_start_column() -> None:
    assert _finding(Severity.WARNING, length=0).end_column == 5


def test_tool_result_output_concatenates_streams() -> None:
    result = ToolResult(command="dart", stdout="out\n", stderr="err\n", exit_code=3)
    assert result.output == "out\nerr\n"


@pytest.mark.parametrize(
    ("severity", "channel"),
    [(Severity.ERROR, "error"), (Severity.WARNING, "warning"), (Severity.INFO, "notice")],
)
def test_severity_channels(severity: Severity, channel: str) -> None:
    assert severity_to_channel(severity) == channel


def test_unknown_labels_map_to_info() -> None:
    assert severity_from_label("LINT") is Severity.INFO
