# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reporting helpers for workflow annotations and job summaries."""

from __future__ import annotations

from .annotations import (
    AnnotationSink,
    GithubActionsReporter,
    escape_data,
    escape_property,
    format_workflow_command,
)
from .summary import render_step_summary, write_step_summary

__all__ = [
    "AnnotationSink",
    "GithubActionsReporter",
    "escape_data",
    "escape_property",
    "format_workflow_command",
    "render_step_summary",
    "write_step_summary",
]
