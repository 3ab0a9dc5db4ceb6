# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import logging
import shlex
import shutil

# Bandit: subprocess usage is intentional; arguments are passed as a list and
# ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from ..models import ToolResult

LOGGER = logging.getLogger(__name__)


class ToolRunner(Protocol):
    """Callable contract used by the pipeline to launch external tools."""

    def __call__(self, command: str, args: Sequence[str], cwd: Path) -> ToolResult:
        """Run ``command`` with ``args`` inside ``cwd`` and capture its output."""
        ...


def _resolve_executable(command: str) -> str:
    """Return an absolute path for ``command``.

    Raises:
        FileNotFoundError: When ``command`` cannot be located on ``PATH``.
    """

    if Path(command).is_absolute():
        return command
    resolved = shutil.which(command)
    if resolved is None:
        msg = (
            f"Unable to locate executable file: {command}. Please verify the file path exists "
            "or the file can be found within a directory specified by the PATH environment variable."
        )
        raise FileNotFoundError(msg)
    return resolved


def format_command_line(command: str, args: Sequence[str]) -> str:
    """Render ``command`` and ``args`` as a shell-style string for logs."""

    return shlex.join([command, *args])


def run_tool(command: str, args: Sequence[str], cwd: Path) -> ToolResult:
    """Execute an external tool and capture its output without checking the exit code.

    The analyzer and formatter both exit non-zero when they report issues, so
    the return code is recorded but never raised.

    Args:
        command: Executable name or absolute path.
        args: Arguments passed to the executable.
        cwd: Working directory for the child process.

    Returns:
        ToolResult: Captured stdout, stderr and exit code.

    Raises:
        FileNotFoundError: When the executable cannot be found.
        OSError: When the process cannot be started.
    """

    executable = _resolve_executable(command)
    LOGGER.debug("running command=%s cwd=%s", format_command_line(command, args), cwd)
    completed = subprocess.run(  # nosec B603
        [executable, *args],
        cwd=str(cwd),
        check=False,
        capture_output=True,
        text=True,
    )
    LOGGER.debug("command=%s exit_code=%s", command, completed.returncode)
    return ToolResult(
        command=command,
        args=tuple(args),
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
        exit_code=completed.returncode,
    )


__all__ = ["ToolRunner", "format_command_line", "run_tool"]
