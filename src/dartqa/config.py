# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the action runtime."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .core.models import FailPolicy

INPUT_WORKING_DIRECTORY: Final[str] = "working-directory"
INPUT_FAIL_ON_INFOS: Final[str] = "fail-on-infos"
INPUT_FAIL_ON_WARNINGS: Final[str] = "fail-on-warnings"
INPUT_LINE_LENGTH: Final[str] = "line-length"
INPUT_SDK: Final[str] = "sdk"

WORKSPACE_ENV: Final[str] = "GITHUB_WORKSPACE"
STEP_SUMMARY_ENV: Final[str] = "GITHUB_STEP_SUMMARY"
DEFAULT_SDK: Final[str] = "dart"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


def input_env_name(name: str) -> str:
    """Return the environment variable the Actions runner uses for input ``name``."""

    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(environ: Mapping[str, str], name: str) -> str:
    """Return the trimmed value of action input ``name`` or an empty string."""

    return environ.get(input_env_name(name), "").strip()


def parse_bool_input(value: str) -> bool:
    """Return ``True`` only for the literal string ``"true"``."""

    return value == "true"


class ActionConfig(BaseModel):
    """Resolved settings for a single action run."""

    model_config = ConfigDict(frozen=True)

    working_directory: Path
    policy: FailPolicy = Field(default_factory=FailPolicy)
    line_length: int | None = Field(default=None, gt=0)
    sdk: str = DEFAULT_SDK
    step_summary: Path | None = None

    @field_validator("sdk")
    @classmethod
    def _require_sdk(cls, value: str) -> str:
        """Reject blank executable names."""
        if not value.strip():
            raise ValueError("sdk executable must not be empty")
        return value.strip()

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        overrides: Mapping[str, object] | None = None,
    ) -> ActionConfig:
        """Build configuration from action inputs and optional CLI overrides.

        Args:
            environ: Environment mapping; defaults to :data:`os.environ`.
            overrides: Values taking precedence over the environment, keyed by
                field name. ``None`` values are ignored.

        Returns:
            ActionConfig: Validated configuration.

        Raises:
            ConfigError: If an input cannot be converted or validated.
        """

        env = os.environ if environ is None else environ
        provided = {key: value for key, value in (overrides or {}).items() if value is not None}

        workspace = Path(env.get(WORKSPACE_ENV) or Path.cwd())
        raw_directory = provided.get("working_directory", get_input(env, INPUT_WORKING_DIRECTORY) or ".")
        working_directory = (workspace / Path(str(raw_directory))).resolve()

        policy = FailPolicy(
            fail_on_infos=bool(
                provided.get("fail_on_infos", parse_bool_input(get_input(env, INPUT_FAIL_ON_INFOS))),
            ),
            fail_on_warnings=bool(
                provided.get("fail_on_warnings", parse_bool_input(get_input(env, INPUT_FAIL_ON_WARNINGS))),
            ),
        )

        raw_line_length = provided.get("line_length", get_input(env, INPUT_LINE_LENGTH) or None)
        summary = env.get(STEP_SUMMARY_ENV) or None

        try:
            return cls(
                working_directory=working_directory,
                policy=policy,
                line_length=raw_line_length,
                sdk=provided.get("sdk", get_input(env, INPUT_SDK) or DEFAULT_SDK),
                step_summary=Path(summary) if summary else None,
            )
        except ValidationError as exc:
            raise ConfigError(_describe_validation_error(exc)) from exc

    def ensure_working_directory(self) -> Path:
        """Return the working directory after checking it exists.

        Raises:
            ConfigError: If the directory is missing.
        """

        if not self.working_directory.is_dir():
            raise ConfigError(f"working directory '{self.working_directory}' does not exist")
        return self.working_directory


def _describe_validation_error(exc: ValidationError) -> str:
    """Condense a pydantic validation error into a one-line message."""

    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or "config"
        parts.append(f"{location}: {error['msg']}")
    return "invalid configuration: " + "; ".join(parts)


__all__ = [
    "ActionConfig",
    "ConfigError",
    "get_input",
    "input_env_name",
    "parse_bool_input",
]
