"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_convention_linter.checking.violation_models import CheckReport, Severity
from schema_convention_linter.report_writing.report_models import RunMetadata


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one lint run."""

    input_paths: tuple[str, ...]
    config_path: str | None = None
    report_path: str | None = None
    fail_on: Severity | None = Severity.ERROR
    parallelism: int | None = None


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed lint run."""

    report: CheckReport
    run_metadata: RunMetadata
    report_path: Path | None
    failed: bool
