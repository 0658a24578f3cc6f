"""Schema object descriptor document reader."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from schema_convention_linter.rule_table.rule_models import ObjectKind

from .schema_object_models import Field, InputError, SchemaObject
from .workbook_reader import read_descriptor_workbook

logger = logging.getLogger(__name__)

WORKBOOK_SUFFIXES = frozenset({".xlsx", ".xlsm"})


def read_schema_objects(input_path: Path | str) -> tuple[SchemaObject, ...]:
    """Read schema object descriptors from a YAML/JSON document or an xlsx workbook."""
    path = Path(input_path)
    if path.suffix.lower() in WORKBOOK_SUFFIXES:
        return read_descriptor_workbook(path)
    return read_descriptor_document(path)


def read_descriptor_document(document_path: Path | str) -> tuple[SchemaObject, ...]:
    """Read a YAML or JSON descriptor document."""
    path = Path(document_path)
    if not path.exists():
        raise InputError(f"Schema descriptor file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InputError(f"Schema descriptor file {path} is not valid UTF-8: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise InputError(f"Failed to parse schema descriptor file {path}: {exc}") from exc

    objects = parse_descriptor_entries(parsed, source=str(path))
    logger.debug("Read %d schema objects from %s", len(objects), path)
    return objects


def parse_descriptor_entries(parsed: Any, *, source: str = "<input>") -> tuple[SchemaObject, ...]:
    """Convert a parsed descriptor document into schema objects.

    The document root is either a mapping with an ``objects`` list or the list itself.
    Entries with an unknown or missing kind are kept with ``kind=None`` so that only
    their own check fails.
    """
    if parsed is None:
        return ()
    if isinstance(parsed, Mapping):
        entries = parsed.get("objects")
        if entries is None:
            raise InputError(f"{source}: descriptor document requires an 'objects' list.")
    else:
        entries = parsed
    if isinstance(entries, str | bytes) or not isinstance(entries, Sequence):
        raise InputError(f"{source}: 'objects' must be a list of schema object entries.")

    return tuple(
        _build_schema_object(entry, index=index, source=source)
        for index, entry in enumerate(entries, start=1)
    )


def _build_schema_object(entry: Any, *, index: int, source: str) -> SchemaObject:
    if not isinstance(entry, Mapping):
        raise InputError(f"{source}: object entry #{index} must be a mapping.")
    name = _optional_text(entry.get("name")) or ""
    declared_kind = _optional_text(entry.get("kind"))
    fields = _parse_fields(entry.get("fields"), owner=name or f"#{index}", source=source)
    return SchemaObject(
        name=name,
        kind=ObjectKind.from_label(declared_kind),
        fields=fields,
        comment=_optional_text(entry.get("comment")),
        declared_kind=declared_kind,
    )


def _parse_fields(value: Any, *, owner: str, source: str) -> tuple[Field, ...]:
    if value is None:
        return ()
    if isinstance(value, Mapping):
        # Shorthand: {column_name: declared_type}
        return tuple(
            Field(name=str(name).strip(), declared_type=_optional_text(declared_type))
            for name, declared_type in value.items()
        )
    if isinstance(value, str | bytes) or not isinstance(value, Sequence):
        raise InputError(f"{source}: fields of '{owner}' must be a list or a mapping.")

    fields: list[Field] = []
    for position, item in enumerate(value, start=1):
        if isinstance(item, str):
            fields.append(Field(name=item.strip()))
            continue
        if not isinstance(item, Mapping):
            raise InputError(f"{source}: field #{position} of '{owner}' must be a mapping.")
        declared_type = item.get("type", item.get("declared_type"))
        fields.append(
            Field(
                name=_optional_text(item.get("name")) or "",
                declared_type=_optional_text(declared_type),
                comment=_optional_text(item.get("comment")),
            )
        )
    return tuple(fields)


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    stripped = str(value).strip()
    return stripped or None
