# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Emit GitHub Actions workflow commands for findings and run status."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Final, Protocol

import typer

from ..core.models import Annotation

COMMAND_MARKER: Final[str] = "::"

# Property order used by the Actions toolkit when rendering annotations.
_ANNOTATION_PROPERTIES: Final[tuple[tuple[str, str], ...]] = (
    ("title", "title"),
    ("file", "file"),
    ("start_line", "line"),
    ("end_line", "endLine"),
    ("start_column", "col"),
    ("end_column", "endColumn"),
)


class AnnotationSink(Protocol):
    """Destination for annotations and run status produced by the pipeline."""

    def annotate(self, channel: str, message: str, annotation: Annotation | None = None) -> None:
        """Record an annotation on ``channel`` (``error``, ``warning`` or ``notice``)."""
        ...

    def set_failed(self, message: str) -> None:
        """Mark the run as failed with ``message``."""
        ...

    def log(self, message: str) -> None:
        """Write a plain log line."""
        ...

    def start_group(self, title: str) -> None:
        """Open a collapsible log group."""
        ...

    def end_group(self) -> None:
        """Close the current log group."""
        ...


def escape_data(value: str) -> str:
    """Escape a workflow command message."""

    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    """Escape a workflow command property value."""

    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_workflow_command(
    name: str,
    message: str,
    properties: Mapping[str, object] | None = None,
) -> str:
    """Render a ``::name key=value,...::message`` workflow command.

    Args:
        name: Command name such as ``error`` or ``group``.
        message: Command payload.
        properties: Optional properties; ``None`` and empty values are omitted.

    Returns:
        str: Single-line workflow command.
    """

    rendered = [
        f"{key}={escape_property(str(value))}"
        for key, value in (properties or {}).items()
        if value is not None and str(value) != ""
    ]
    head = f"{COMMAND_MARKER}{name}"
    if rendered:
        head = f"{head} {','.join(rendered)}"
    return f"{head}{COMMAND_MARKER}{escape_data(message)}"


def annotation_properties(annotation: Annotation | None) -> dict[str, object]:
    """Map an :class:`Annotation` onto workflow command property names."""

    if annotation is None:
        return {}
    return {wire: getattr(annotation, field) for field, wire in _ANNOTATION_PROPERTIES}


class GithubActionsReporter:
    """Write workflow commands to stdout for the Actions runner to pick up."""

    def __init__(self, write: Callable[[str], None] = typer.echo) -> None:
        self._write = write
        self.failed = False

    def annotate(self, channel: str, message: str, annotation: Annotation | None = None) -> None:
        self._write(format_workflow_command(channel, message, annotation_properties(annotation)))

    def set_failed(self, message: str) -> None:
        self.failed = True
        self._write(format_workflow_command("error", message))

    def log(self, message: str) -> None:
        self._write(message)

    def start_group(self, title: str) -> None:
        self._write(format_workflow_command("group", title))

    def end_group(self) -> None:
        self._write(format_workflow_command("endgroup", ""))


__all__ = [
    "AnnotationSink",
    "GithubActionsReporter",
    "annotation_properties",
    "escape_data",
    "escape_property",
    "format_workflow_command",
]
