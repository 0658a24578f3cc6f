"""Report workbook writer service."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from schema_convention_linter.checking.violation_models import CheckReport, Severity

from .report_models import RunMetadata

VIOLATIONS_SHEET_NAME = "Violations"
RUN_INFO_SHEET_NAME = "RunInfo"

VIOLATION_COLUMNS: tuple[str, ...] = ("Object", "Kind", "Field", "Rule", "Severity", "Message")

_COLUMN_WIDTHS: tuple[int, ...] = (30, 20, 30, 22, 12, 90)


def write_report_workbook(
    report: CheckReport,
    output_path: Path | str,
    run_metadata: RunMetadata,
) -> Path:
    """Write the Violations and RunInfo sheets and return the resolved output path."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = VIOLATIONS_SHEET_NAME

    _write_header(sheet, VIOLATION_COLUMNS)
    _write_violation_rows(sheet, report)
    _write_run_info_sheet(workbook, report, run_metadata)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _write_header(sheet, columns: Sequence[str]) -> None:
    for column_index, name in enumerate(columns, start=1):
        sheet.cell(row=1, column=column_index, value=name).style = "Headline 3"
        width = _COLUMN_WIDTHS[column_index - 1] if column_index <= len(_COLUMN_WIDTHS) else 20
        sheet.column_dimensions[get_column_letter(column_index)].width = width
    sheet.freeze_panes = "A2"


def _write_violation_rows(sheet, report: CheckReport) -> None:
    row_number = 2
    for result in report.results:
        kind = result.schema_object.kind_label
        if result.input_error is not None:
            _write_row(
                sheet,
                row_number,
                (result.schema_object.name, kind, None, "input-error", "error", result.input_error),
            )
            row_number += 1
            continue
        for violation in result.violations:
            _write_row(
                sheet,
                row_number,
                (
                    violation.object_name,
                    kind,
                    violation.field_name,
                    violation.rule_violated.value,
                    violation.severity.value,
                    violation.message,
                ),
            )
            if violation.severity == Severity.ERROR:
                sheet.cell(row=row_number, column=5).font = Font(bold=True, color="C00000")
            row_number += 1


def _write_row(sheet, row_number: int, values: Sequence[object]) -> None:
    for column_index, value in enumerate(values, start=1):
        sheet.cell(row=row_number, column=column_index, value=value)


def _write_run_info_sheet(workbook, report: CheckReport, run_metadata: RunMetadata) -> None:
    sheet = workbook.create_sheet(RUN_INFO_SHEET_NAME)
    entries = (
        ("run_start", run_metadata.run_start.isoformat()),
        ("inputs", "\n".join(str(path) for path in run_metadata.input_paths)),
        ("config_path", str(run_metadata.config_path) if run_metadata.config_path else ""),
        ("objects", len(report.results)),
        ("errors", report.error_count),
        ("advisories", report.advisory_count),
        ("failed_objects", report.failed_count),
    )
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key)
        sheet.cell(row=row, column=2, value=value)
