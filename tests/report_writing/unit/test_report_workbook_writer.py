"""Report workbook writer tests."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from openpyxl import load_workbook
from schema_convention_linter.checking import check_schema_objects
from schema_convention_linter.report_writing import (
    RUN_INFO_SHEET_NAME,
    VIOLATION_COLUMNS,
    VIOLATIONS_SHEET_NAME,
    RunMetadata,
    write_report_workbook,
)
from schema_convention_linter.rule_table import ObjectKind, build_default_rule_table
from schema_convention_linter.schema_ingestion import Field, SchemaObject


def _run_metadata(tmp_path: Path) -> RunMetadata:
    return RunMetadata(
        run_start=datetime(2024, 5, 1, 12, 0, tzinfo=UTC),
        input_paths=(tmp_path / "schema.yaml", tmp_path / "more.yaml"),
        config_path=tmp_path / "schema-conventions.yaml",
    )


def test_writes_violation_rows_and_run_info(tmp_path: Path) -> None:
    report = check_schema_objects(
        [
            SchemaObject(
                name="user_table",
                kind=ObjectKind.TABLE,
                fields=(Field(name="total", declared_type="numeric"),),
            ),
            SchemaObject(name="seq_orders", kind=None, declared_kind="sequence"),
        ],
        build_default_rule_table(),
    )
    output_path = tmp_path / "reports" / "lint.xlsx"

    written_path = write_report_workbook(report, output_path, _run_metadata(tmp_path))

    assert written_path == output_path.resolve()
    workbook = load_workbook(output_path)
    assert workbook.sheetnames == [VIOLATIONS_SHEET_NAME, RUN_INFO_SHEET_NAME]

    sheet = workbook[VIOLATIONS_SHEET_NAME]
    rows = list(sheet.iter_rows(values_only=True))
    assert rows[0] == VIOLATION_COLUMNS
    assert rows[1][:5] == ("user_table", "table", None, "object-prefix", "error")
    assert rows[2][:5] == ("user_table", "table", "total", "field-suffix-missing", "advisory")
    assert rows[3][:5] == ("seq_orders", "sequence", None, "input-error", "error")
    assert "unknown kind 'sequence'" in rows[3][5]
    assert len(rows) == 4
    assert sheet["E2"].font.bold is True
    assert not sheet["E3"].font.bold

    run_info = {
        row[0]: row[1]
        for row in workbook[RUN_INFO_SHEET_NAME].iter_rows(values_only=True)
    }
    assert run_info["run_start"] == "2024-05-01T12:00:00+00:00"
    assert run_info["inputs"].splitlines() == [
        str(tmp_path / "schema.yaml"),
        str(tmp_path / "more.yaml"),
    ]
    assert run_info["config_path"] == str(tmp_path / "schema-conventions.yaml")
    assert run_info["objects"] == 2
    assert run_info["errors"] == 1
    assert run_info["advisories"] == 1
    assert run_info["failed_objects"] == 1


def test_clean_report_writes_header_only(tmp_path: Path) -> None:
    report = check_schema_objects(
        [SchemaObject(name="tb_orders", kind=ObjectKind.TABLE)], build_default_rule_table()
    )
    output_path = tmp_path / "lint.xlsx"

    write_report_workbook(report, output_path, _run_metadata(tmp_path))

    sheet = load_workbook(output_path)[VIOLATIONS_SHEET_NAME]
    assert sheet.max_row == 1
    assert sheet.freeze_panes == "A2"
