# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pass/fail policy applied to the aggregated run counts."""

from __future__ import annotations

from .core.models import Decision, FailPolicy, RunResult


def summary_message(issue_count: int) -> str:
    """Return ``"<N> issue found."`` or ``"<N> issues found."``."""

    noun = "issue" if issue_count == 1 else "issues"
    return f"{issue_count} {noun} found."


def decide(result: RunResult, policy: FailPolicy) -> Decision:
    """Decide whether the run fails.

    Errors always fail the run. Enabling either ``fail_on_infos`` or
    ``fail_on_warnings`` fails the run on any issue at all, formatter warnings
    included; the flags do not select individual severities.

    Args:
        result: Aggregated counts from the analysis and format stages.
        policy: Configured fail switches.

    Returns:
        Decision: Verdict and the summary message shown to the user.
    """

    issue_count = result.issue_count
    strict = policy.fail_on_infos or policy.fail_on_warnings
    failed = result.error_count > 0 or (strict and issue_count > 0)
    return Decision(failed=failed, message=summary_message(issue_count))


__all__ = ["decide", "summary_message"]
