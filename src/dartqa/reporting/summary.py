# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render the Markdown job summary for a run."""

from __future__ import annotations

from pathlib import Path

from ..core.models import Decision, RunResult


def render_step_summary(result: RunResult, decision: Decision) -> str:
    """Render a Markdown section describing ``result`` and ``decision``."""

    verdict = "❌ Failed" if decision.failed else "✅ Passed"
    rows = [
        ("Analyzer errors", result.error_count),
        ("Analyzer warnings", result.warning_count),
        ("Analyzer infos", result.info_count),
        ("Unformatted files", result.style_warning_count),
    ]
    lines = [
        "## Dart code quality",
        "",
        f"**{verdict}**: {decision.message}",
        "",
        "| Check | Count |",
        "| --- | ---: |",
    ]
    lines.extend(f"| {label} | {count} |" for label, count in rows)
    lines.append("")
    return "\n".join(lines) + "\n"


def write_step_summary(result: RunResult, decision: Decision, path: Path | None) -> bool:
    """Append the job summary to ``path`` when a summary file is configured.

    Args:
        result: Aggregated counts for the run.
        decision: Final verdict.
        path: Summary file exposed by the runner, or ``None``.

    Returns:
        bool: ``True`` when the summary was written.
    """

    if path is None:
        return False
    with path.open("a", encoding="utf-8") as handle:
        handle.write(render_step_summary(result, decision))
    return True


__all__ = ["render_step_summary", "write_step_summary"]
