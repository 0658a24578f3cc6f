"""Descriptor workbook template generation service."""

from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from schema_convention_linter.rule_table.rule_models import RuleTable

from .constants import DESCRIPTOR_COLUMNS, DESCRIPTOR_SHEET_NAME, RULES_COLUMNS, RULES_SHEET_NAME


def generate_template_workbook(rule_table: RuleTable, output_path: Path | str) -> Path:
    """Create a blank descriptor workbook plus a sheet listing the active rules."""
    output = Path(output_path)
    if output.exists():
        raise FileExistsError(f"Descriptor template already exists: {output.resolve()}")

    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = DESCRIPTOR_SHEET_NAME

    _write_header_row(sheet, DESCRIPTOR_COLUMNS)
    sheet.freeze_panes = "A2"

    _write_rules_sheet(workbook, rule_table)

    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _write_header_row(sheet, columns: tuple[str, ...]) -> None:
    for column_index, name in enumerate(columns, start=1):
        cell = sheet.cell(row=1, column=column_index, value=name)
        cell.style = "Headline 3"
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(len(name) + 10, 40)
        )


def _write_rules_sheet(workbook: Workbook, rule_table: RuleTable) -> None:
    sheet = workbook.create_sheet(RULES_SHEET_NAME)
    _write_header_row(sheet, RULES_COLUMNS)
    rows: list[tuple[str, str, str, str, str]] = [
        ("prefix", rule.object_kind.value, rule.prefix_label, "", rule.description)
        for rule in rule_table.naming_rules.values()
    ]
    rows.extend(
        (
            "suffix",
            "field",
            rule.suffix,
            ", ".join(rule.expected_type_labels),
            rule.description,
        )
        for rule in rule_table.suffix_rules
    )
    rows.extend(
        ("exempt", "field", name, "", "Self-documenting field; suffix rules do not apply.")
        for name in sorted(rule_table.exempt_fields)
    )
    for row_index, values in enumerate(rows, start=2):
        for column_index, value in enumerate(values, start=1):
            sheet.cell(row=row_index, column=column_index, value=value)
    sheet.column_dimensions[get_column_letter(len(RULES_COLUMNS))].width = 70
