# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from dartqa.core.models import Annotation, ToolResult


@dataclass
class RecordingSink:
    """Annotation sink that keeps every call for later assertions."""

    annotations: list[tuple[str, str, Annotation | None]] = field(default_factory=list)
    logs: list[str] = field(default_factory=list)
    failures: list[str] = field(default_factory=list)
    groups: list[str] = field(default_factory=list)
    open_groups: int = 0

    def annotate(self, channel: str, message: str, annotation: Annotation | None = None) -> None:
        self.annotations.append((channel, message, annotation))

    def set_failed(self, message: str) -> None:
        self.failures.append(message)

    def log(self, message: str) -> None:
        self.logs.append(message)

    def start_group(self, title: str) -> None:
        self.groups.append(title)
        self.open_groups += 1

    def end_group(self) -> None:
        self.open_groups -= 1

    def channels(self) -> list[str]:
        return [channel for channel, _, _ in self.annotations]


@dataclass
class FakeRunner:
    """Tool runner returning canned output keyed by the first argument."""

    outputs: dict[str, str] = field(default_factory=dict)
    exit_codes: dict[str, int] = field(default_factory=dict)
    calls: list[tuple[str, tuple[str, ...], Path]] = field(default_factory=list)

    def __call__(self, command: str, args: Sequence[str], cwd: Path) -> ToolResult:
        self.calls.append((command, tuple(args), cwd))
        subcommand = args[0] if args else ""
        return ToolResult(
            command=command,
            args=tuple(args),
            stdout=self.outputs.get(subcommand, ""),
            exit_code=self.exit_codes.get(subcommand, 0),
        )


@pytest.fixture
def sink() -> RecordingSink:
    """Return a fresh recording sink."""
    return RecordingSink()


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Return an existing project directory used as the working directory."""
    project = tmp_path / "code"
    project.mkdir()
    return project


def _machine_line(
    workdir: Path | str,
    *,
    severity: str = "WARNING",
    category: str = "STATIC_WARNING",
    rule: str = "DEAD_NULL_AWARE_EXPRESSION",
    relative: str = "lib/main.dart",
    line: int | str = 204,
    column: int | str = 150,
    length: int | str = 2,
    message: str = "The left operand can't be null, so the right operand is never executed.",
) -> str:
    """Render one ``dart analyze --format machine`` line."""
    path = f"{workdir}/{relative}"
    return f"{severity}|{category}|{rule}|{path}|{line}|{column}|{length}|{message}"


@pytest.fixture
def machine_line() -> Callable[..., str]:
    """Return a factory rendering analyzer machine-format lines."""
    return _machine_line


@pytest.fixture
def fake_runner_factory() -> Callable[..., FakeRunner]:
    """Return a factory building :class:`FakeRunner` instances from canned output."""

    def _build(
        *,
        analyze: str = "",
        format: str = "",  # noqa: A002 - mirrors the dart subcommand name
        exit_codes: dict[str, int] | None = None,
    ) -> FakeRunner:
        return FakeRunner(outputs={"analyze": analyze, "format": format}, exit_codes=dict(exit_codes or {}))

    return _build
