"""Schema object descriptor entities."""

from __future__ import annotations

from dataclasses import dataclass

from schema_convention_linter.rule_table.rule_models import ObjectKind


class InputError(Exception):
    """Raised when a schema object descriptor is malformed."""


@dataclass(frozen=True)
class Field:
    """One column (or parameter) of a schema object."""

    name: str
    declared_type: str | None = None
    comment: str | None = None


@dataclass(frozen=True)
class SchemaObject:
    """One table, view, function or other schema object to check."""

    name: str
    kind: ObjectKind | None
    fields: tuple[Field, ...] = ()
    comment: str | None = None
    declared_kind: str | None = None

    @property
    def kind_label(self) -> str:
        """Return the resolved kind value, falling back to the raw declared label."""
        if self.kind is not None:
            return self.kind.value
        return self.declared_kind or ""
