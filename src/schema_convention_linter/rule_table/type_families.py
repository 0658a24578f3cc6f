"""Declared SQL type classification."""

from __future__ import annotations

import re
from collections.abc import Mapping

from .rule_models import TypeFamily

_TYPE_ARGUMENTS = re.compile(r"\([^)]*\)")
_ARRAY_SUFFIX = re.compile(r"(\s*\[\s*\d*\s*\])+$")
_WHITESPACE = re.compile(r"\s+")

_FAMILY_BY_TYPE_NAME: Mapping[str, TypeFamily] = {
    "timestamptz": TypeFamily.TIMESTAMP_TZ,
    "timestamp with time zone": TypeFamily.TIMESTAMP_TZ,
    "timestamp": TypeFamily.TIMESTAMP,
    "timestamp without time zone": TypeFamily.TIMESTAMP,
    "datetime": TypeFamily.TIMESTAMP,
    "date": TypeFamily.DATE,
    "time": TypeFamily.TIME,
    "timetz": TypeFamily.TIME,
    "time with time zone": TypeFamily.TIME,
    "time without time zone": TypeFamily.TIME,
    "interval": TypeFamily.TIME,
    "numeric": TypeFamily.DECIMAL,
    "decimal": TypeFamily.DECIMAL,
    "money": TypeFamily.DECIMAL,
    "real": TypeFamily.DECIMAL,
    "float": TypeFamily.DECIMAL,
    "float4": TypeFamily.DECIMAL,
    "float8": TypeFamily.DECIMAL,
    "double precision": TypeFamily.DECIMAL,
    "smallint": TypeFamily.INTEGER,
    "integer": TypeFamily.INTEGER,
    "int": TypeFamily.INTEGER,
    "int2": TypeFamily.INTEGER,
    "int4": TypeFamily.INTEGER,
    "int8": TypeFamily.INTEGER,
    "bigint": TypeFamily.INTEGER,
    "smallserial": TypeFamily.INTEGER,
    "serial": TypeFamily.INTEGER,
    "serial4": TypeFamily.INTEGER,
    "bigserial": TypeFamily.INTEGER,
    "serial8": TypeFamily.INTEGER,
    "boolean": TypeFamily.BOOLEAN,
    "bool": TypeFamily.BOOLEAN,
    "text": TypeFamily.TEXT,
    "varchar": TypeFamily.TEXT,
    "character varying": TypeFamily.TEXT,
    "char": TypeFamily.TEXT,
    "character": TypeFamily.TEXT,
    "bpchar": TypeFamily.TEXT,
    "citext": TypeFamily.TEXT,
    "string": TypeFamily.TEXT,
    "json": TypeFamily.JSON,
    "jsonb": TypeFamily.JSON,
    "uuid": TypeFamily.UUID,
    "bytea": TypeFamily.BINARY,
    "blob": TypeFamily.BINARY,
}


def classify_declared_type(declared_type: str | None) -> TypeFamily:
    """Map a declared SQL type to its type family.

    Length and precision arguments, array brackets and letter case are ignored, so
    ``NUMERIC(12, 2)`` and ``numeric[]`` both classify as decimal. Unrecognised
    types classify as ``TypeFamily.UNKNOWN``.
    """
    if declared_type is None:
        return TypeFamily.UNKNOWN
    normalized = declared_type.strip().lower()
    normalized = _TYPE_ARGUMENTS.sub("", normalized)
    normalized = _ARRAY_SUFFIX.sub("", normalized)
    normalized = _WHITESPACE.sub(" ", normalized).strip()
    if normalized.startswith("pg_catalog."):
        normalized = normalized.removeprefix("pg_catalog.")
    return _FAMILY_BY_TYPE_NAME.get(normalized, TypeFamily.UNKNOWN)


def parse_type_family(label: object) -> TypeFamily | None:
    """Resolve a configured type family label; None when it is not a known family."""
    if isinstance(label, TypeFamily):
        return label
    if not isinstance(label, str):
        return None
    try:
        return TypeFamily(label.strip().lower())
    except ValueError:
        return None
