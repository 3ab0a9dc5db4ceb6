# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the ``dart analyze --format machine`` parser."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from dartqa.core.severity import Severity
from dartqa.parsers import (
    MalformedLineError,
    iter_findings,
    parse_analyzer_output,
    parse_machine_line,
    split_machine_fields,
    split_output_lines,
    strip_directory_prefix,
)


def test_parse_machine_line_builds_relative_finding(workdir: Path, machine_line) -> None:
    finding = parse_machine_line(machine_line(workdir), workdir)

    assert finding.severity is Severity.WARNING
    assert finding.rule_id == "DEAD_NULL_AWARE_EXPRESSION"
    assert finding.file_path == "lib/main.dart"
    assert finding.line == 204
    assert finding.column == 150
    assert finding.length == 2
    assert finding.message == "The left operand can't be null, so the right operand is never executed."


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("ERROR", Severity.ERROR),
        ("WARNING", Severity.WARNING),
        ("INFO", Severity.INFO),
        ("HINT", Severity.INFO),
        ("error", Severity.INFO),
    ],
)
def test_severity_label_mapping(workdir: Path, machine_line, label: str, expected: Severity) -> None:
    finding = parse_machine_line(machine_line(workdir, severity=label), workdir)
    assert finding.severity is expected


def test_lint_rule_uses_lints_catalog(workdir: Path, machine_line) -> None:
    finding = parse_machine_line(machine_line(workdir, rule="avoid_print", message="Avoid print."), workdir)

    assert finding.documentation_url == "https://dart-lang.github.io/linter/lints/avoid_print.html"
    assert finding.display_message == (
        "Avoid print. For more details, see https://dart-lang.github.io/linter/lints/avoid_print.html"
    )


def test_diagnostic_code_uses_lowercased_diagnostics_anchor(workdir: Path, machine_line) -> None:
    finding = parse_machine_line(machine_line(workdir, rule="UNDEFINED_IDENTIFIER"), workdir)
    assert finding.documentation_url == "https://dart.dev/tools/diagnostic-messages#undefined_identifier"


def test_mixed_case_rule_counts_as_diagnostic(workdir: Path, machine_line) -> None:
    finding = parse_machine_line(machine_line(workdir, rule="dead_Code"), workdir)
    assert finding.documentation_url == "https://dart.dev/tools/diagnostic-messages#dead_code"


def test_too_few_fields_raise_malformed_line(workdir: Path) -> None:
    with pytest.raises(MalformedLineError, match="expected 8 fields"):
        parse_machine_line(f"ERROR|SYNTAX|RULE|{workdir}/lib/a.dart|1", workdir)


@pytest.mark.parametrize(("line", "column"), [("x", "1"), ("1", "y"), ("0", "1"), ("1", "0")])
def test_invalid_positions_raise_malformed_line(workdir: Path, machine_line, line: str, column: str) -> None:
    with pytest.raises(MalformedLineError):
        parse_machine_line(machine_line(workdir, line=line, column=column), workdir)


def test_escaped_delimiters_stay_in_message(workdir: Path, machine_line) -> None:
    raw = machine_line(workdir, message=r"Use a\|b instead of a \\ b.")
    finding = parse_machine_line(raw, workdir)
    assert finding.message == r"Use a|b instead of a \ b."


def test_unescaped_pipes_in_message_are_rejoined(workdir: Path, machine_line) -> None:
    finding = parse_machine_line(machine_line(workdir, message="left|right"), workdir)
    assert finding.message == "left|right"


def test_split_machine_fields_keeps_other_backslashes() -> None:
    assert split_machine_fields(r"a\nb|c\|d|e\\") == [r"a\nb", "c|d", "e\\"]


def test_iter_findings_skips_banners_and_malformed_lines(
    workdir: Path,
    machine_line,
    caplog: pytest.LogCaptureFixture,
) -> None:
    output = "\n".join(
        [
            "Analyzing code...",
            machine_line(workdir, severity="ERROR", rule="MISSING_IDENTIFIER"),
            "ERROR|broken",
            machine_line(workdir, severity="INFO", rule="prefer_const_constructors"),
            "2 issues found.",
        ],
    )

    with caplog.at_level(logging.WARNING, logger="dartqa.parsers.analyzer"):
        findings = list(iter_findings(output, workdir))

    assert [finding.severity for finding in findings] == [Severity.ERROR, Severity.INFO]
    assert "skipping malformed analyzer line" in caplog.text


def test_parse_analyzer_output_counts_by_severity(workdir: Path, machine_line) -> None:
    lines = [
        machine_line(workdir, severity="ERROR"),
        machine_line(workdir, severity="WARNING"),
        machine_line(workdir, severity="WARNING"),
        machine_line(workdir, severity="INFO"),
    ]
    report = parse_analyzer_output("\r\n".join(lines) + "\r\n", workdir)

    assert report.counts == (1, 2, 1)
    assert sum(report.counts) == len(lines)
    assert [finding.severity for finding in report.findings] == [
        Severity.ERROR,
        Severity.WARNING,
        Severity.WARNING,
        Severity.INFO,
    ]


def test_output_without_delimiters_yields_nothing(workdir: Path) -> None:
    report = parse_analyzer_output("Analyzing code...\nNo issues found!\n", workdir)
    assert report.findings == ()
    assert report.counts == (0, 0, 0)


def test_file_paths_never_keep_working_directory_prefix(workdir: Path, machine_line) -> None:
    nested = ["lib/a.dart", "lib/src/deep/b.dart", "test/c_test.dart", "bin/main.dart"]
    output = "\n".join(machine_line(workdir, relative=relative) for relative in nested)

    paths = [finding.file_path for finding in iter_findings(output, workdir)]

    assert paths == nested
    assert all(str(workdir) not in path for path in paths)


def test_strip_directory_prefix_leaves_outside_paths_untouched() -> None:
    assert strip_directory_prefix("/work/app2/lib/a.dart", "/work/app") == "/work/app2/lib/a.dart"
    assert strip_directory_prefix("/other/lib/a.dart", "/work/app") == "/other/lib/a.dart"
    assert strip_directory_prefix("/work/app/lib/a.dart", "/work/app/") == "lib/a.dart"


def test_split_output_lines_trims_and_handles_crlf() -> None:
    assert split_output_lines("a\r\nb\nc\n\n  ") == ["a", "b", "c"]
