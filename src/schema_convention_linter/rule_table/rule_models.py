"""Rule table domain entities."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum


class ObjectKind(str, Enum):
    """Kinds of schema objects that carry a naming rule."""

    TABLE = "table"
    VIEW = "view"
    MATERIALIZED_VIEW = "materialized_view"
    FUNCTION = "function"
    TRIGGER = "trigger"
    INDEX = "index"
    FOREIGN_KEY = "foreign_key"
    PRIMARY_KEY = "primary_key"
    UNIQUE_CONSTRAINT = "unique_constraint"
    ENUM = "enum"
    POLICY = "policy"

    @classmethod
    def from_label(cls, label: object) -> ObjectKind | None:
        """Resolve a free-form kind label, returning None when it is not recognised."""
        if isinstance(label, ObjectKind):
            return label
        if not isinstance(label, str):
            return None
        normalized = re.sub(r"[\s\-]+", "_", label.strip().lower())
        if not normalized:
            return None
        normalized = _KIND_ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError:
            return None


_KIND_ALIASES: Mapping[str, str] = {
    "mv": "materialized_view",
    "matview": "materialized_view",
    "fk": "foreign_key",
    "pk": "primary_key",
    "uq": "unique_constraint",
    "unique": "unique_constraint",
    "type": "enum",
    "rls_policy": "policy",
}


class TypeFamily(str, Enum):
    """Coarse semantic classes of declared column types."""

    TIMESTAMP_TZ = "timestamp_tz"
    TIMESTAMP = "timestamp"
    DATE = "date"
    TIME = "time"
    DECIMAL = "decimal"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    TEXT = "text"
    JSON = "json"
    UUID = "uuid"
    BINARY = "binary"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class NamingRule:
    """Prefix (and optional suffix) requirement for one object kind."""

    object_kind: ObjectKind
    prefix_pattern: re.Pattern[str]
    suffix_pattern: re.Pattern[str] | None
    description: str
    prefix_label: str
    suffix_label: str | None = None

    def matches_prefix(self, name: str) -> bool:
        return self.prefix_pattern.match(name) is not None

    def matches_suffix(self, name: str) -> bool:
        if self.suffix_pattern is None:
            return True
        return self.suffix_pattern.search(name) is not None


@dataclass(frozen=True)
class SuffixRule:
    """Field-name suffix and the type families it implies."""

    suffix: str
    expected_types: frozenset[TypeFamily]
    description: str

    def matches(self, field_name: str) -> bool:
        return field_name.endswith(self.suffix) and len(field_name) > len(self.suffix)

    @property
    def expected_type_labels(self) -> tuple[str, ...]:
        return tuple(sorted(family.value for family in self.expected_types))


@dataclass(frozen=True)
class RuleTable:  # pylint: disable=too-many-instance-attributes
    """Immutable registry of naming rules, built once and passed to the checker."""

    naming_rules: Mapping[ObjectKind, NamingRule]
    suffix_rules: tuple[SuffixRule, ...]
    exempt_fields: frozenset[str]
    require_comments: bool = False
    max_identifier_length: int = 63
    disabled_rules: frozenset[str] = field(default_factory=frozenset)

    def prefix_rule_for(self, kind: ObjectKind) -> NamingRule | None:
        """Return the naming rule for an object kind, or None when no rule applies."""
        return self.naming_rules.get(kind)

    def suffix_rule_for(self, field_name: str) -> SuffixRule | None:
        """Return the longest suffix rule ending the field name, if any."""
        matches = [rule for rule in self.suffix_rules if rule.matches(field_name)]
        if not matches:
            return None
        return max(matches, key=lambda rule: len(rule.suffix))

    def suffix_for_type(self, family: TypeFamily) -> SuffixRule | None:
        """Return the preferred suffix for a type family, in rule definition order.

        Suffixes dedicated to the family win over suffixes shared with other families.
        """
        if family == TypeFamily.UNKNOWN:
            return None
        for rule in self.suffix_rules:
            if rule.expected_types == {family}:
                return rule
        for rule in self.suffix_rules:
            if family in rule.expected_types:
                return rule
        return None

    def is_exempt(self, field_name: str) -> bool:
        return field_name in self.exempt_fields

    def is_enabled(self, rule_id: str) -> bool:
        return rule_id not in self.disabled_rules
