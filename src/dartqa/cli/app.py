# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point for the Dart code-quality action."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .. import __version__
from ..config import ActionConfig
from ..core.logging import configure_logging, info
from ..core.runtime.process import run_tool
from ..pipeline import run_action
from ..reporting.annotations import GithubActionsReporter

app = typer.Typer(
    name="dartqa",
    help="Run dart analyze and dart format, annotate findings, and fail the build on policy violations.",
    add_completion=False,
    no_args_is_help=True,
)


def _version_callback(value: bool | None) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = None,
) -> None:
    """Dart code-quality action."""


@app.command("run")
def run_command(
    working_directory: Annotated[
        Path | None,
        typer.Option(
            "--working-directory",
            "-C",
            help="Project directory, relative to GITHUB_WORKSPACE (input: working-directory).",
        ),
    ] = None,
    fail_on_infos: Annotated[
        bool | None,
        typer.Option("--fail-on-infos/--no-fail-on-infos", help="Fail on any issue (input: fail-on-infos)."),
    ] = None,
    fail_on_warnings: Annotated[
        bool | None,
        typer.Option(
            "--fail-on-warnings/--no-fail-on-warnings",
            help="Fail on any issue (input: fail-on-warnings).",
        ),
    ] = None,
    line_length: Annotated[
        int | None,
        typer.Option("--line-length", min=1, help="Formatter line length (input: line-length)."),
    ] = None,
    sdk: Annotated[
        str | None,
        typer.Option("--sdk", help="Dart executable to invoke (input: sdk)."),
    ] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Enable debug logging.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in console output.")] = False,
) -> None:
    """Analyze and format-check the project, then report the verdict.

    Every failure, including a missing executable or invalid input, is
    reported through the runner's failure channel with exit status 1.
    """

    configure_logging(debug=debug)
    reporter = GithubActionsReporter()
    try:
        config = ActionConfig.from_environ(
            overrides={
                "working_directory": working_directory,
                "fail_on_infos": fail_on_infos,
                "fail_on_warnings": fail_on_warnings,
                "line_length": line_length,
                "sdk": sdk,
            },
        )
        if debug:
            info(f"Working directory: {config.working_directory}", use_emoji=not no_emoji)
        run_action(config, sink=reporter, runner=run_tool)
    except Exception as exc:  # noqa: BLE001 - single top-level failure handler
        reporter.set_failed(str(exc) or exc.__class__.__name__)
        raise typer.Exit(code=1) from exc

    if reporter.failed:
        raise typer.Exit(code=1)


__all__ = ["app"]
