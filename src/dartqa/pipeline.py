# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Sequential analyze → format → decide pipeline."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict

from .config import ActionConfig
from .core.models import Annotation, Decision, RunResult, ToolResult
from .core.runtime.process import ToolRunner, format_command_line, run_tool
from .core.severity import severity_to_channel
from .decision import decide
from .parsers.analyzer import parse_analyzer_output
from .parsers.formatter import FORMAT_MESSAGE, build_format_args, count_style_findings, iter_style_findings
from .reporting.annotations import AnnotationSink
from .reporting.summary import write_step_summary

LOGGER = logging.getLogger(__name__)

ANALYSIS_TITLE: Final[str] = "Code Analysis Output"
FORMAT_TITLE: Final[str] = "Code Format Output"
ANALYZE_ARGS: Final[tuple[str, ...]] = ("analyze", "--format", "machine", ".")


class ActionOutcome(BaseModel):
    """Counts and verdict produced by :func:`run_action`."""

    model_config = ConfigDict(frozen=True)

    result: RunResult
    decision: Decision


def _invoke(
    runner: ToolRunner,
    sink: AnnotationSink,
    command: str,
    args: Sequence[str],
    cwd: Path,
) -> ToolResult:
    """Run a tool inside a log group, echoing the command line and its output."""

    command_line = format_command_line(command, args)
    sink.start_group(command_line)
    try:
        sink.log(f"[command]{command_line}")
        tool = runner(command, list(args), cwd)
        if tool.output.strip():
            sink.log(tool.output.rstrip())
    finally:
        sink.end_group()
    return tool


def run_analysis(
    working_directory: Path,
    *,
    runner: ToolRunner,
    sink: AnnotationSink,
    sdk: str = "dart",
) -> RunResult:
    """Run the analyzer and annotate every finding.

    Args:
        working_directory: Project directory the analyzer runs in.
        runner: Tool runner used to launch the analyzer.
        sink: Destination for annotations.
        sdk: Dart executable.

    Returns:
        RunResult: Error, warning and info counts; the style count stays zero.
    """

    tool = _invoke(runner, sink, sdk, ANALYZE_ARGS, working_directory)
    report = parse_analyzer_output(tool.output, working_directory)
    for finding in report.findings:
        sink.annotate(
            severity_to_channel(finding.severity),
            finding.display_message,
            Annotation.for_finding(finding, title=ANALYSIS_TITLE),
        )
    return report.result


def run_format(
    working_directory: Path,
    *,
    runner: ToolRunner,
    sink: AnnotationSink,
    line_length: int | None = None,
    sdk: str = "dart",
) -> RunResult:
    """Run the formatter in check-only mode and annotate each unformatted file.

    Returns:
        RunResult: Result carrying only the style warning count.
    """

    tool = _invoke(runner, sink, sdk, build_format_args(line_length), working_directory)
    findings = tuple(iter_style_findings(tool.output))
    for finding in findings:
        sink.annotate("warning", FORMAT_MESSAGE, Annotation(title=FORMAT_TITLE, file=finding.file_path))
    return count_style_findings(findings)


def run_action(
    config: ActionConfig,
    *,
    sink: AnnotationSink,
    runner: ToolRunner = run_tool,
) -> ActionOutcome:
    """Run both stages, apply the fail policy and report the verdict once.

    Exceptions from either stage propagate to the caller unchanged.

    Args:
        config: Resolved action configuration.
        sink: Destination for annotations and the final status.
        runner: Tool runner; defaults to :func:`run_tool`.

    Returns:
        ActionOutcome: Aggregated counts and the decision.
    """

    working_directory = config.ensure_working_directory()
    analysis = run_analysis(working_directory, runner=runner, sink=sink, sdk=config.sdk)
    formatting = run_format(
        working_directory,
        runner=runner,
        sink=sink,
        line_length=config.line_length,
        sdk=config.sdk,
    )
    result = analysis.merge(formatting)
    decision = decide(result, config.policy)
    LOGGER.debug(
        "errors=%s warnings=%s infos=%s style=%s failed=%s",
        result.error_count,
        result.warning_count,
        result.info_count,
        result.style_warning_count,
        decision.failed,
    )

    try:
        write_step_summary(result, decision, config.step_summary)
    except OSError as exc:
        LOGGER.warning("unable to write job summary to %s: %s", config.step_summary, exc)

    if decision.failed:
        sink.set_failed(decision.message)
    else:
        sink.log(decision.message)
    return ActionOutcome(result=result, decision=decision)


__all__ = [
    "ANALYSIS_TITLE",
    "FORMAT_TITLE",
    "ActionOutcome",
    "run_action",
    "run_analysis",
    "run_format",
]
