# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared logging helpers."""

from __future__ import annotations

from .public import configure_logging, detect_tty, info

__all__ = [
    "configure_logging",
    "detect_tty",
    "info",
]
