"""Schema object checker tests."""

from __future__ import annotations

import pytest
from schema_convention_linter.checking.object_checker import check_schema_object
from schema_convention_linter.checking.violation_models import RuleId, Severity
from schema_convention_linter.configuration import build_configuration
from schema_convention_linter.rule_table import (
    DEFAULT_EXEMPT_FIELDS,
    DEFAULT_PREFIXES,
    ObjectKind,
    build_default_rule_table,
)
from schema_convention_linter.schema_ingestion.schema_object_models import (
    Field,
    InputError,
    SchemaObject,
)

RULE_TABLE = build_default_rule_table()

_SUFFIX_RULE_IDS = {RuleId.FIELD_SUFFIX_TYPE, RuleId.FIELD_SUFFIX_MISSING}


def _table(*fields: Field, name: str = "tb_orders") -> SchemaObject:
    return SchemaObject(name=name, kind=ObjectKind.TABLE, fields=fields)


def test_compliant_table_has_no_violations() -> None:
    schema_object = SchemaObject(name="tb_users", kind=ObjectKind.TABLE)

    assert check_schema_object(schema_object, RULE_TABLE) == ()


def test_table_without_prefix_reports_missing_tb_prefix() -> None:
    violations = check_schema_object(
        SchemaObject(name="user_table", kind=ObjectKind.TABLE), RULE_TABLE
    )

    assert len(violations) == 1
    assert violations[0].rule_violated == RuleId.OBJECT_PREFIX
    assert violations[0].severity == Severity.ERROR
    assert "tb_" in violations[0].message
    assert violations[0].field_name is None


@pytest.mark.parametrize(("kind", "prefix", "_description"), DEFAULT_PREFIXES)
def test_every_prefixed_kind_reports_exactly_one_prefix_violation(
    kind: ObjectKind, prefix: str, _description: str
) -> None:
    compliant = check_schema_object(SchemaObject(name=f"{prefix}sample", kind=kind), RULE_TABLE)
    missing = check_schema_object(SchemaObject(name="sample_object", kind=kind), RULE_TABLE)

    assert compliant == ()
    prefix_violations = [item for item in missing if item.rule_violated == RuleId.OBJECT_PREFIX]
    assert len(prefix_violations) == 1
    assert prefix in prefix_violations[0].message


def test_prefix_match_is_case_sensitive() -> None:
    violations = check_schema_object(
        SchemaObject(name="TB_Users", kind=ObjectKind.TABLE), RULE_TABLE
    )

    assert [item.rule_violated for item in violations] == [RuleId.OBJECT_PREFIX, RuleId.SNAKE_CASE]


def test_field_without_suffix_yields_one_advisory_suggesting_amt() -> None:
    violations = check_schema_object(
        _table(Field(name="total", declared_type="decimal")), RULE_TABLE
    )

    assert len(violations) == 1
    advisory = violations[0]
    assert advisory.rule_violated == RuleId.FIELD_SUFFIX_MISSING
    assert advisory.severity == Severity.ADVISORY
    assert advisory.field_name == "total"
    assert "_amt" in advisory.message


def test_amt_suffix_on_text_column_is_a_type_mismatch() -> None:
    violations = check_schema_object(
        _table(Field(name="total_amt", declared_type="text")), RULE_TABLE
    )

    assert len(violations) == 1
    mismatch = violations[0]
    assert mismatch.rule_violated == RuleId.FIELD_SUFFIX_TYPE
    assert mismatch.severity == Severity.ERROR
    assert "_amt" in mismatch.message
    assert "decimal" in mismatch.message
    assert "text" in mismatch.message


@pytest.mark.parametrize("field_name", sorted(DEFAULT_EXEMPT_FIELDS))
@pytest.mark.parametrize("declared_type", ["text", "numeric(12,2)", "boolean", "jsonb", None])
def test_exempt_fields_never_yield_suffix_violations(
    field_name: str, declared_type: str | None
) -> None:
    violations = check_schema_object(
        _table(Field(name=field_name, declared_type=declared_type)), RULE_TABLE
    )

    assert not [item for item in violations if item.rule_violated in _SUFFIX_RULE_IDS]


@pytest.mark.parametrize(
    ("field_name", "declared_type"),
    [
        ("customer_id", "bigint"),
        ("customer_id", "uuid"),
        ("placed_ts", "timestamp with time zone"),
        ("placed_ts", "TIMESTAMPTZ"),
        ("delivery_dt", "date"),
        ("total_amt", "numeric(12, 2)"),
        ("discount_pct", "numeric"),
        ("item_qty", "integer"),
        ("gift_flg", "boolean"),
        ("status_cd", "varchar(16)"),
        ("payload_json", "jsonb"),
        ("tags_txt", "text[]"),
    ],
)
def test_suffix_with_matching_type_is_compliant(field_name: str, declared_type: str) -> None:
    assert check_schema_object(_table(Field(field_name, declared_type)), RULE_TABLE) == ()


def test_timestamp_without_time_zone_does_not_satisfy_ts_suffix() -> None:
    violations = check_schema_object(
        _table(Field(name="placed_ts", declared_type="timestamp")), RULE_TABLE
    )

    assert [item.rule_violated for item in violations] == [RuleId.FIELD_SUFFIX_TYPE]
    assert "timestamp_tz" in violations[0].message


def test_longest_suffix_wins() -> None:
    violations = check_schema_object(
        _table(Field(name="public_uuid", declared_type="uuid")), RULE_TABLE
    )

    assert violations == ()


def test_field_without_declared_type_is_not_type_checked() -> None:
    violations = check_schema_object(_table(Field(name="total_amt")), RULE_TABLE)

    assert violations == ()


def test_unknown_type_without_suffix_still_gets_advisory() -> None:
    violations = check_schema_object(
        _table(Field(name="location", declared_type="geometry(Point, 4326)")), RULE_TABLE
    )

    assert len(violations) == 1
    assert violations[0].rule_violated == RuleId.FIELD_SUFFIX_MISSING
    assert violations[0].severity == Severity.ADVISORY


def test_suffixed_field_with_unclassified_type_is_not_a_mismatch() -> None:
    violations = check_schema_object(
        _table(
            Field(name="status_cd", declared_type="enum_order_status"),
            Field(name="area_txt", declared_type="geometry(Point, 4326)"),
            Field(name="email_txt", declared_type="public.email_domain"),
        ),
        RULE_TABLE,
    )

    assert violations == ()


def test_violations_follow_evaluation_order() -> None:
    schema_object = SchemaObject(
        name="Orders",
        kind=ObjectKind.TABLE,
        fields=(
            Field(name="total", declared_type="numeric"),
            Field(name="Status_Cd", declared_type="text"),
            Field(name="paid_amt", declared_type="text"),
        ),
    )

    violations = check_schema_object(schema_object, RULE_TABLE)

    assert [(item.field_name, item.rule_violated) for item in violations] == [
        (None, RuleId.OBJECT_PREFIX),
        (None, RuleId.SNAKE_CASE),
        ("total", RuleId.FIELD_SUFFIX_MISSING),
        ("Status_Cd", RuleId.SNAKE_CASE),
        ("Status_Cd", RuleId.FIELD_SUFFIX_MISSING),
        ("paid_amt", RuleId.FIELD_SUFFIX_TYPE),
    ]


def test_identifier_length_limit() -> None:
    long_name = "tb_" + "x" * 61

    violations = check_schema_object(
        SchemaObject(name=long_name, kind=ObjectKind.TABLE), RULE_TABLE
    )

    assert [item.rule_violated for item in violations] == [RuleId.IDENTIFIER_LENGTH]
    assert "64 characters" in violations[0].message


def test_checking_twice_is_deterministic() -> None:
    schema_object = _table(
        Field(name="total", declared_type="decimal"),
        Field(name="total_amt", declared_type="text"),
        Field(name="created_at", declared_type="timestamptz"),
        name="order_table",
    )

    assert check_schema_object(schema_object, RULE_TABLE) == check_schema_object(
        schema_object, RULE_TABLE
    )


def test_checker_does_not_mutate_inputs() -> None:
    schema_object = _table(Field(name="total", declared_type="decimal"), name="orders")
    naming_rules_before = dict(RULE_TABLE.naming_rules)

    check_schema_object(schema_object, RULE_TABLE)

    assert schema_object == _table(Field(name="total", declared_type="decimal"), name="orders")
    assert dict(RULE_TABLE.naming_rules) == naming_rules_before


def test_missing_kind_raises_input_error() -> None:
    with pytest.raises(InputError, match="missing a kind"):
        check_schema_object(SchemaObject(name="tb_users", kind=None), RULE_TABLE)


def test_unknown_kind_raises_input_error_naming_the_label() -> None:
    schema_object = SchemaObject(name="seq_orders", kind=None, declared_kind="sequence")

    with pytest.raises(InputError, match="unknown kind 'sequence'"):
        check_schema_object(schema_object, RULE_TABLE)


@pytest.mark.parametrize("name", ["", "   "])
def test_blank_name_raises_input_error(name: str) -> None:
    with pytest.raises(InputError, match="missing a name"):
        check_schema_object(SchemaObject(name=name, kind=ObjectKind.VIEW), RULE_TABLE)


def test_unnamed_field_raises_input_error_without_partial_output() -> None:
    schema_object = _table(Field(name="total_amt", declared_type="text"), Field(name=""))

    with pytest.raises(InputError, match="unnamed field at position 2"):
        check_schema_object(schema_object, RULE_TABLE)


def test_comment_rules_apply_only_when_enabled() -> None:
    rule_table = build_configuration({"require_comments": True}, path=None).rule_table
    undocumented = _table(Field(name="total_amt", declared_type="numeric"), Field(name="id"))
    documented = SchemaObject(
        name="tb_orders",
        kind=ObjectKind.TABLE,
        fields=(Field(name="total_amt", declared_type="numeric", comment="Gross total."),),
        comment="Customer orders.",
    )
    index = SchemaObject(name="idx_tb_orders_total_amt", kind=ObjectKind.INDEX)

    violations = check_schema_object(undocumented, rule_table)

    assert [(item.field_name, item.rule_violated) for item in violations] == [
        (None, RuleId.OBJECT_COMMENT),
        ("total_amt", RuleId.FIELD_COMMENT),
    ]
    assert all(item.severity == Severity.ADVISORY for item in violations)
    assert check_schema_object(documented, rule_table) == ()
    assert check_schema_object(index, rule_table) == ()
    assert check_schema_object(undocumented, RULE_TABLE) == ()


def test_disabled_rules_are_skipped() -> None:
    rule_table = build_configuration(
        {"disabled_rules": ["field-suffix-missing", "snake-case"]}, path=None
    ).rule_table

    violations = check_schema_object(
        _table(Field(name="Total", declared_type="numeric"), name="Orders"), rule_table
    )

    assert [item.rule_violated for item in violations] == [RuleId.OBJECT_PREFIX]


def test_configured_object_suffix_is_enforced() -> None:
    rule_table = build_configuration(
        {"prefixes": {"trigger": {"prefix": "tr_", "suffix": "_trg"}}}, path=None
    ).rule_table

    violations = check_schema_object(
        SchemaObject(name="tr_tb_orders_set_updated_at", kind=ObjectKind.TRIGGER), rule_table
    )

    assert [item.rule_violated for item in violations] == [RuleId.OBJECT_SUFFIX]
    assert "_trg" in violations[0].message
