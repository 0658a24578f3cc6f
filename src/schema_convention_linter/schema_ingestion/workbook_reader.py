"""Descriptor workbook ingestion service."""

from __future__ import annotations

import logging
import zipfile
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.worksheet import Worksheet

from schema_convention_linter.rule_table.rule_models import ObjectKind
from schema_convention_linter.template_generation.constants import (
    DESCRIPTOR_COLUMNS,
    DESCRIPTOR_SHEET_NAME,
)

from .schema_object_models import Field, InputError, SchemaObject

logger = logging.getLogger(__name__)


@dataclass
class _ObjectRows:
    """Mutable collector for the rows describing one schema object."""

    name: str
    declared_kind: str | None
    comment: str | None
    fields: list[Field]
    first_row: int


def read_descriptor_workbook(workbook_path: Path | str) -> tuple[SchemaObject, ...]:
    """Read the descriptor workbook and return schema objects in first-appearance order."""
    path = Path(workbook_path)
    if not path.exists():
        raise InputError(f"Descriptor workbook not found: {path}")

    try:
        workbook = load_workbook(path, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile) as exc:
        raise InputError(f"Failed to open descriptor workbook {path}: {exc}") from exc
    sheet = (
        workbook[DESCRIPTOR_SHEET_NAME]
        if DESCRIPTOR_SHEET_NAME in workbook.sheetnames
        else workbook.active
    )
    if sheet is None:
        raise InputError("Descriptor workbook has no active sheet.")
    assert isinstance(sheet, Worksheet)

    header_values = [
        sheet.cell(row=1, column=index + 1).value for index in range(len(DESCRIPTOR_COLUMNS))
    ]
    if header_values != list(DESCRIPTOR_COLUMNS):
        raise InputError(
            "Descriptor workbook columns must be: " + ", ".join(DESCRIPTOR_COLUMNS) + "."
        )

    header_map = {name: idx + 1 for idx, name in enumerate(DESCRIPTOR_COLUMNS)}
    collected = _collect_rows(sheet, header_map)
    objects = tuple(
        SchemaObject(
            name=rows.name,
            kind=ObjectKind.from_label(rows.declared_kind),
            fields=tuple(rows.fields),
            comment=rows.comment,
            declared_kind=rows.declared_kind,
        )
        for rows in collected
    )
    logger.debug("Read %d schema objects from workbook %s", len(objects), path)
    return objects


def _collect_rows(sheet, header_map: Mapping[str, int]) -> list[_ObjectRows]:
    by_name: dict[str, _ObjectRows] = {}
    for row_idx in range(2, sheet.max_row + 1):
        row_data = {
            name: _optional_string(sheet.cell(row=row_idx, column=col_index).value)
            for name, col_index in header_map.items()
        }
        if all(value is None for value in row_data.values()):
            continue
        object_name = row_data["Object"]
        if object_name is None:
            raise InputError(f"Row {row_idx}: column 'Object' is required.")

        rows = by_name.get(object_name)
        if rows is None:
            rows = _ObjectRows(
                name=object_name,
                declared_kind=row_data["Kind"],
                comment=row_data["ObjectComment"],
                fields=[],
                first_row=row_idx,
            )
            by_name[object_name] = rows
        else:
            _merge_object_attributes(rows, row_data, row_idx)

        field_name = row_data["Field"]
        if field_name is None:
            if row_data["DeclaredType"] or row_data["FieldComment"]:
                raise InputError(
                    f"Row {row_idx}: column 'Field' is required when a type or comment is set."
                )
            continue
        rows.fields.append(
            Field(
                name=field_name,
                declared_type=row_data["DeclaredType"],
                comment=row_data["FieldComment"],
            )
        )
    return sorted(by_name.values(), key=lambda rows: rows.first_row)


def _merge_object_attributes(
    rows: _ObjectRows, row_data: Mapping[str, str | None], row_idx: int
) -> None:
    kind = row_data["Kind"]
    if kind is not None:
        if rows.declared_kind is None:
            rows.declared_kind = kind
        elif rows.declared_kind != kind:
            raise InputError(
                f"Row {row_idx}: object '{rows.name}' declared as '{kind}' but row "
                f"{rows.first_row} declares '{rows.declared_kind}'."
            )
    comment = row_data["ObjectComment"]
    if comment is not None and rows.comment is None:
        rows.comment = comment


def _optional_string(value: object) -> str | None:
    if value is None:
        return None
    stripped = str(value).strip()
    return stripped or None
