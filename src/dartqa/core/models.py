# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the dartqa package."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from .severity import Severity

LINTS_CATALOG_URL: Final[str] = "https://dart-lang.github.io/linter/lints/{rule}.html"
DIAGNOSTICS_CATALOG_URL: Final[str] = "https://dart.dev/tools/diagnostic-messages#{rule}"


def rule_documentation_url(rule_id: str) -> str:
    """Return the documentation URL for an analyzer rule identifier.

    Lint rules are spelled in lower case (``avoid_print``) while compiler
    diagnostics use upper case codes (``DEAD_CODE``); the casing is the only
    discriminator between the two catalogs.

    Args:
        rule_id: Rule identifier reported by the analyzer.

    Returns:
        str: URL of the lints catalog entry or the diagnostics catalog anchor.
    """

    lowered = rule_id.lower()
    if rule_id == lowered:
        return LINTS_CATALOG_URL.format(rule=rule_id)
    return DIAGNOSTICS_CATALOG_URL.format(rule=lowered)


class Finding(BaseModel):
    """Normalized analyzer diagnostic."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    rule_id: str
    file_path: str
    line: int = Field(ge=1)
    column: int = Field(ge=1)
    message: str
    length: int = Field(default=0, ge=0)

    @property
    def documentation_url(self) -> str:
        """Return the catalog URL explaining :attr:`rule_id`."""
        return rule_documentation_url(self.rule_id)

    @property
    def display_message(self) -> str:
        """Return the annotation text shown to users."""
        return f"{self.message} For more details, see {self.documentation_url}"

    @property
    def end_column(self) -> int:
        """Return the last column covered by the highlighted span."""
        return self.column + max(self.length - 1, 0)


class StyleFinding(BaseModel):
    """File reported by the formatter as not matching the canonical layout."""

    model_config = ConfigDict(frozen=True)

    file_path: str


class RunResult(BaseModel):
    """Aggregate counts for one action run."""

    model_config = ConfigDict(frozen=True)

    error_count: int = Field(default=0, ge=0)
    warning_count: int = Field(default=0, ge=0)
    info_count: int = Field(default=0, ge=0)
    style_warning_count: int = Field(default=0, ge=0)

    @property
    def issue_count(self) -> int:
        """Return the total number of issues across both stages."""
        return self.error_count + self.warning_count + self.info_count + self.style_warning_count

    def add_finding(self, finding: Finding) -> RunResult:
        """Return a copy of the result with ``finding`` counted."""
        field = {
            Severity.ERROR: "error_count",
            Severity.WARNING: "warning_count",
            Severity.INFO: "info_count",
        }[finding.severity]
        return self.model_copy(update={field: getattr(self, field) + 1})

    def add_style_finding(self, finding: StyleFinding) -> RunResult:
        """Return a copy of the result with a formatter warning counted."""
        del finding
        return self.model_copy(update={"style_warning_count": self.style_warning_count + 1})

    def merge(self, other: RunResult) -> RunResult:
        """Return the element-wise sum of two results."""
        return RunResult(
            error_count=self.error_count + other.error_count,
            warning_count=self.warning_count + other.warning_count,
            info_count=self.info_count + other.info_count,
            style_warning_count=self.style_warning_count + other.style_warning_count,
        )


def fold_findings(findings: Iterable[Finding], initial: RunResult | None = None) -> RunResult:
    """Fold analyzer findings into a :class:`RunResult`.

    Args:
        findings: Findings to count.
        initial: Optional starting result; defaults to an empty result.

    Returns:
        RunResult: Result with one severity counter incremented per finding.
    """

    result = initial if initial is not None else RunResult()
    for finding in findings:
        result = result.add_finding(finding)
    return result


class FailPolicy(BaseModel):
    """Switches controlling which issues fail the build."""

    model_config = ConfigDict(frozen=True)

    fail_on_infos: bool = False
    fail_on_warnings: bool = False


class Annotation(BaseModel):
    """Location metadata attached to a workflow annotation."""

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    file: str | None = None
    start_line: int | None = None
    end_line: int | None = None
    start_column: int | None = None
    end_column: int | None = None

    @classmethod
    def for_finding(cls, finding: Finding, *, title: str) -> Annotation:
        """Build the single-line annotation covering ``finding``."""
        return cls(
            title=title,
            file=finding.file_path,
            start_line=finding.line,
            end_line=finding.line,
            start_column=finding.column,
            end_column=finding.end_column,
        )


class ToolResult(BaseModel):
    """Captured output of one external tool invocation."""

    model_config = ConfigDict(frozen=True)

    command: str
    args: tuple[str, ...] = Field(default_factory=tuple)
    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0

    @property
    def output(self) -> str:
        """Return stdout followed by stderr as one text block."""
        return self.stdout + self.stderr


class Decision(BaseModel):
    """Final verdict for the run."""

    model_config = ConfigDict(frozen=True)

    failed: bool
    message: str


__all__ = [
    "DIAGNOSTICS_CATALOG_URL",
    "LINTS_CATALOG_URL",
    "Annotation",
    "Decision",
    "FailPolicy",
    "Finding",
    "RunResult",
    "StyleFinding",
    "ToolResult",
    "fold_findings",
    "rule_documentation_url",
]
