# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels reported by the Dart analyzer."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


_ANALYZER_LABELS: Final[dict[str, Severity]] = {
    "ERROR": Severity.ERROR,
    "WARNING": Severity.WARNING,
}

_SEVERITY_TO_CHANNEL: Final[dict[Severity, str]] = {
    Severity.ERROR: "error",
    Severity.WARNING: "warning",
    Severity.INFO: "notice",
}


def severity_from_label(label: str) -> Severity:
    """Map an analyzer severity label onto :class:`Severity`.

    Args:
        label: First field of a machine-format analyzer line.

    Returns:
        Severity: ``ERROR`` and ``WARNING`` map directly; any other label is ``INFO``.
    """

    return _ANALYZER_LABELS.get(label, Severity.INFO)


def severity_to_channel(severity: Severity) -> str:
    """Return the workflow annotation channel used for ``severity``."""

    return _SEVERITY_TO_CHANNEL[severity]
