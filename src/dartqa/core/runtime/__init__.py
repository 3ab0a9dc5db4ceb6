# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime helpers for invoking external tools."""

from __future__ import annotations

from .process import ToolRunner, format_command_line, run_tool

__all__ = ["ToolRunner", "format_command_line", "run_tool"]
