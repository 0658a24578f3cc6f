"""Shared descriptor workbook constants."""

from __future__ import annotations

DESCRIPTOR_SHEET_NAME = "SchemaObjects"
RULES_SHEET_NAME = "Rules"

DESCRIPTOR_COLUMNS: tuple[str, ...] = (
    "Object",
    "Kind",
    "ObjectComment",
    "Field",
    "DeclaredType",
    "FieldComment",
)
RULES_COLUMNS: tuple[str, ...] = ("Category", "Applies To", "Token", "Expected Types", "Rationale")
