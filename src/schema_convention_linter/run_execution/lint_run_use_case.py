"""Lint run use-case service."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from schema_convention_linter.checking import check_schema_objects
from schema_convention_linter.configuration import (
    ConfigError,
    LintConfiguration,
    load_configuration,
)
from schema_convention_linter.report_writing import RunMetadata, write_report_workbook
from schema_convention_linter.schema_ingestion import InputError, SchemaObject, read_schema_objects

from .run_contracts import RunOutcome, RunRequest

logger = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a lint run cannot be completed."""


def execute_lint_run(request: RunRequest) -> RunOutcome:
    """Load configuration and descriptors, check every object and return the run outcome."""
    if not request.input_paths:
        raise RunExecutionError("At least one schema descriptor file is required.")

    run_start = datetime.now(UTC)
    configuration = _load_configuration(request.config_path)
    schema_objects = _read_all_inputs(request.input_paths)
    parallelism = request.parallelism or configuration.parallelism

    report = check_schema_objects(
        schema_objects,
        configuration.rule_table,
        parallelism=parallelism,
    )
    run_metadata = RunMetadata(
        run_start=run_start,
        input_paths=tuple(Path(path).resolve() for path in request.input_paths),
        config_path=configuration.path.resolve() if configuration.path else None,
    )

    report_path = None
    if request.report_path:
        try:
            report_path = write_report_workbook(report, request.report_path, run_metadata)
        except OSError as exc:
            raise RunExecutionError(f"Failed to write report workbook: {exc}") from exc
        logger.info("Report workbook written to %s", report_path)

    return RunOutcome(
        report=report,
        run_metadata=run_metadata,
        report_path=report_path,
        failed=report.has_findings_at(request.fail_on),
    )


def _load_configuration(config_path: str | None) -> LintConfiguration:
    try:
        return load_configuration(config_path)
    except (ConfigError, OSError) as exc:
        raise RunExecutionError(str(exc)) from exc


def _read_all_inputs(input_paths: tuple[str, ...]) -> list[SchemaObject]:
    schema_objects: list[SchemaObject] = []
    for input_path in input_paths:
        try:
            schema_objects.extend(read_schema_objects(input_path))
        except (InputError, OSError) as exc:
            raise RunExecutionError(str(exc)) from exc
    return schema_objects
