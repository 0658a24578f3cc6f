"""Console report rendering service."""

from __future__ import annotations

import json
from typing import Any

from schema_convention_linter.checking.violation_models import (
    CheckReport,
    ObjectCheckResult,
    Violation,
)

from .report_models import ReportFormat, RunMetadata


def render_report(
    report: CheckReport, report_format: ReportFormat, run_metadata: RunMetadata | None = None
) -> str:
    """Render a check report in the requested console format."""
    if report_format == ReportFormat.JSON:
        return render_json_report(report, run_metadata)
    return render_text_report(report)


def render_text_report(report: CheckReport) -> str:
    """Render one line per violation or failed object, followed by a summary line."""
    lines: list[str] = []
    for result in report.results:
        if result.input_error is not None:
            lines.append(f"INPUT    {_object_label(result)} {result.input_error}")
            continue
        lines.extend(_format_violation_line(violation) for violation in result.violations)
    lines.append(_summary_line(report))
    return "\n".join(lines)


def render_json_report(report: CheckReport, run_metadata: RunMetadata | None = None) -> str:
    """Render the report as a JSON document."""
    summary: dict[str, Any] = summarize_report(report)
    if run_metadata is not None:
        summary["run_start"] = run_metadata.run_start.isoformat()
        summary["inputs"] = [str(path) for path in run_metadata.input_paths]
        summary["config_path"] = (
            str(run_metadata.config_path) if run_metadata.config_path else None
        )
    document = {
        "summary": summary,
        "results": [_result_to_dict(result) for result in report.results],
    }
    return json.dumps(document, ensure_ascii=False, indent=2)


def summarize_report(report: CheckReport) -> dict[str, int]:
    """Return the report counters."""
    return {
        "objects": len(report.results),
        "errors": report.error_count,
        "advisories": report.advisory_count,
        "failed_objects": report.failed_count,
    }


def _format_violation_line(violation: Violation) -> str:
    severity = violation.severity.value.upper()
    return (
        f"{severity:<8} {violation.location} [{violation.rule_violated.value}] "
        f"{violation.message}"
    )


def _summary_line(report: CheckReport) -> str:
    counts = summarize_report(report)
    return (
        f"{counts['objects']} objects checked: {counts['errors']} errors, "
        f"{counts['advisories']} advisories, {counts['failed_objects']} failed"
    )


def _object_label(result: ObjectCheckResult) -> str:
    return result.schema_object.name or "<unnamed>"


def _result_to_dict(result: ObjectCheckResult) -> dict[str, Any]:
    return {
        "object": result.schema_object.name,
        "kind": result.schema_object.kind_label or None,
        "input_error": result.input_error,
        "violations": [_violation_to_dict(violation) for violation in result.violations],
    }


def _violation_to_dict(violation: Violation) -> dict[str, Any]:
    return {
        "object": violation.object_name,
        "field": violation.field_name,
        "rule": violation.rule_violated.value,
        "severity": violation.severity.value,
        "message": violation.message,
    }
