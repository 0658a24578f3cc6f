"""Report writing exports."""

from .console_report import (
    render_json_report,
    render_report,
    render_text_report,
    summarize_report,
)
from .report_models import ReportFormat, RunMetadata
from .report_workbook_writer import (
    RUN_INFO_SHEET_NAME,
    VIOLATION_COLUMNS,
    VIOLATIONS_SHEET_NAME,
    write_report_workbook,
)

__all__ = [
    "ReportFormat",
    "RunMetadata",
    "render_json_report",
    "render_report",
    "render_text_report",
    "summarize_report",
    "RUN_INFO_SHEET_NAME",
    "VIOLATION_COLUMNS",
    "VIOLATIONS_SHEET_NAME",
    "write_report_workbook",
]
