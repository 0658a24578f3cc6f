"""Schema object convention checking service."""

from __future__ import annotations

import logging
import re

from schema_convention_linter.rule_table.rule_models import (
    ObjectKind,
    RuleTable,
    SuffixRule,
    TypeFamily,
)
from schema_convention_linter.rule_table.type_families import classify_declared_type
from schema_convention_linter.schema_ingestion.schema_object_models import (
    Field,
    InputError,
    SchemaObject,
)

from .violation_models import RuleId, Severity, Violation

logger = logging.getLogger(__name__)

SNAKE_CASE_PATTERN = re.compile(r"^[a-z][a-z0-9_]*$")

DOCUMENTED_KINDS: frozenset[ObjectKind] = frozenset(
    {
        ObjectKind.TABLE,
        ObjectKind.VIEW,
        ObjectKind.MATERIALIZED_VIEW,
        ObjectKind.FUNCTION,
    }
)


def check_schema_object(
    schema_object: SchemaObject, rule_table: RuleTable
) -> tuple[Violation, ...]:
    """Check one schema object against the rule table.

    Violations are returned in rule evaluation order: object-level rules first, then
    each field in declared order.

    Raises:
      InputError: If the object has no name, no recognised kind, or an unnamed field.
    """
    kind = _validate_schema_object(schema_object)
    violations: list[Violation] = []
    violations.extend(_check_object_name(schema_object, kind, rule_table))
    for field in schema_object.fields:
        violations.extend(_check_field(schema_object, kind, field, rule_table))

    checked = tuple(
        violation
        for violation in violations
        if rule_table.is_enabled(violation.rule_violated.value)
    )
    logger.debug("Checked %s %s: %d violations", kind.value, schema_object.name, len(checked))
    return checked


def _validate_schema_object(schema_object: SchemaObject) -> ObjectKind:
    if not schema_object.name or not schema_object.name.strip():
        raise InputError("Schema object is missing a name.")
    if schema_object.kind is None:
        if schema_object.declared_kind:
            raise InputError(
                f"Schema object '{schema_object.name}' has unknown kind "
                f"'{schema_object.declared_kind}'."
            )
        raise InputError(f"Schema object '{schema_object.name}' is missing a kind.")
    for position, field in enumerate(schema_object.fields, start=1):
        if not field.name or not field.name.strip():
            raise InputError(
                f"Schema object '{schema_object.name}' has an unnamed field at position "
                f"{position}."
            )
    return schema_object.kind


def _check_object_name(
    schema_object: SchemaObject, kind: ObjectKind, rule_table: RuleTable
) -> list[Violation]:
    name = schema_object.name
    violations: list[Violation] = []
    naming_rule = rule_table.prefix_rule_for(kind)
    if naming_rule is not None:
        if not naming_rule.matches_prefix(name):
            violations.append(
                _object_violation(
                    name,
                    RuleId.OBJECT_PREFIX,
                    f"{_kind_title(kind)} name '{name}' must start with "
                    f"'{naming_rule.prefix_label}'.",
                )
            )
        if not naming_rule.matches_suffix(name):
            violations.append(
                _object_violation(
                    name,
                    RuleId.OBJECT_SUFFIX,
                    f"{_kind_title(kind)} name '{name}' must end with "
                    f"'{naming_rule.suffix_label}'.",
                )
            )

    violations.extend(_check_identifier(name, None, rule_table))

    if (
        rule_table.require_comments
        and kind in DOCUMENTED_KINDS
        and not (schema_object.comment and schema_object.comment.strip())
    ):
        violations.append(
            _object_violation(
                name,
                RuleId.OBJECT_COMMENT,
                f"{_kind_title(kind)} '{name}' has no comment; document it with COMMENT ON.",
                severity=Severity.ADVISORY,
            )
        )
    return violations


def _check_field(
    schema_object: SchemaObject, kind: ObjectKind, field: Field, rule_table: RuleTable
) -> list[Violation]:
    violations = _check_identifier(schema_object.name, field.name, rule_table)

    if not rule_table.is_exempt(field.name):
        suffix_rule = rule_table.suffix_rule_for(field.name)
        if suffix_rule is None:
            violations.append(_missing_suffix_violation(schema_object.name, field, rule_table))
        else:
            mismatch = _suffix_type_mismatch(schema_object.name, field, suffix_rule)
            if mismatch is not None:
                violations.append(mismatch)

    if (
        rule_table.require_comments
        and kind in DOCUMENTED_KINDS
        and not rule_table.is_exempt(field.name)
        and not (field.comment and field.comment.strip())
    ):
        violations.append(
            Violation(
                object_name=schema_object.name,
                field_name=field.name,
                rule_violated=RuleId.FIELD_COMMENT,
                message=f"Field '{field.name}' has no comment.",
                severity=Severity.ADVISORY,
            )
        )
    return violations


def _check_identifier(
    object_name: str, field_name: str | None, rule_table: RuleTable
) -> list[Violation]:
    identifier = field_name if field_name is not None else object_name
    label = "Field" if field_name is not None else "Name"
    violations: list[Violation] = []
    if not SNAKE_CASE_PATTERN.fullmatch(identifier):
        violations.append(
            Violation(
                object_name=object_name,
                field_name=field_name,
                rule_violated=RuleId.SNAKE_CASE,
                message=f"{label} '{identifier}' must be lowercase snake_case.",
            )
        )
    if len(identifier) > rule_table.max_identifier_length:
        violations.append(
            Violation(
                object_name=object_name,
                field_name=field_name,
                rule_violated=RuleId.IDENTIFIER_LENGTH,
                message=(
                    f"{label} '{identifier}' is {len(identifier)} characters long; "
                    f"the limit is {rule_table.max_identifier_length}."
                ),
            )
        )
    return violations


def _suffix_type_mismatch(
    object_name: str, field: Field, suffix_rule: SuffixRule
) -> Violation | None:
    if field.declared_type is None:
        return None
    family = classify_declared_type(field.declared_type)
    if family == TypeFamily.UNKNOWN or family in suffix_rule.expected_types:
        return None
    expected = " or ".join(suffix_rule.expected_type_labels)
    return Violation(
        object_name=object_name,
        field_name=field.name,
        rule_violated=RuleId.FIELD_SUFFIX_TYPE,
        message=(
            f"Suffix '{suffix_rule.suffix}' implies a {expected} type but "
            f"'{field.name}' is declared as {field.declared_type}."
        ),
    )


def _missing_suffix_violation(object_name: str, field: Field, rule_table: RuleTable) -> Violation:
    family = classify_declared_type(field.declared_type)
    suggestion = rule_table.suffix_for_type(family)
    if suggestion is not None:
        hint = f"consider a suffix such as '{suggestion.suffix}' ({family.value})."
    elif family == TypeFamily.UNKNOWN:
        hint = "consider a suffix that names its semantic type."
    else:
        hint = f"no suffix is registered for {family.value} columns."
    return Violation(
        object_name=object_name,
        field_name=field.name,
        rule_violated=RuleId.FIELD_SUFFIX_MISSING,
        message=f"Field '{field.name}' carries no type suffix; {hint}",
        severity=Severity.ADVISORY,
    )


def _object_violation(
    object_name: str,
    rule_id: RuleId,
    message: str,
    *,
    severity: Severity = Severity.ERROR,
) -> Violation:
    return Violation(
        object_name=object_name,
        field_name=None,
        rule_violated=rule_id,
        message=message,
        severity=severity,
    )


def _kind_title(kind: ObjectKind) -> str:
    return kind.value.replace("_", " ").capitalize()
