"""Schema object ingestion exports."""

from .descriptor_reader import (
    parse_descriptor_entries,
    read_descriptor_document,
    read_schema_objects,
)
from .schema_object_models import Field, InputError, SchemaObject
from .workbook_reader import read_descriptor_workbook

__all__ = [
    "Field",
    "InputError",
    "SchemaObject",
    "parse_descriptor_entries",
    "read_descriptor_document",
    "read_descriptor_workbook",
    "read_schema_objects",
]
