"""Default rule table tests."""

from __future__ import annotations

import pytest
from schema_convention_linter.rule_table import (
    DEFAULT_EXEMPT_FIELDS,
    DEFAULT_MAX_IDENTIFIER_LENGTH,
    DEFAULT_PREFIXES,
    DEFAULT_SUFFIXES,
    ObjectKind,
    TypeFamily,
    build_default_rule_table,
)


def test_every_object_kind_has_a_prefix_rule() -> None:
    rule_table = build_default_rule_table()

    assert set(rule_table.naming_rules) == set(ObjectKind)
    assert len(DEFAULT_PREFIXES) == len(ObjectKind)


@pytest.mark.parametrize(
    ("kind", "compliant", "non_compliant"),
    [
        (ObjectKind.TABLE, "tb_orders", "orders"),
        (ObjectKind.VIEW, "vw_active_orders", "tb_active_orders"),
        (ObjectKind.MATERIALIZED_VIEW, "mv_daily_revenue", "vw_daily_revenue"),
        (ObjectKind.FUNCTION, "fn_calculate_total", "calculate_total"),
        (ObjectKind.TRIGGER, "tr_tb_orders_set_updated_at", "trg_orders"),
        (ObjectKind.INDEX, "idx_tb_orders_customer_id", "ix_orders"),
        (ObjectKind.FOREIGN_KEY, "fk_tb_orders_customer", "orders_customer_fkey"),
        (ObjectKind.PRIMARY_KEY, "pk_tb_orders", "orders_pkey"),
        (ObjectKind.UNIQUE_CONSTRAINT, "uq_tb_users_email", "users_email_key"),
        (ObjectKind.ENUM, "enum_order_status", "order_status"),
        (ObjectKind.POLICY, "pol_tb_orders_owner", "orders_owner"),
    ],
)
def test_default_prefixes(kind: ObjectKind, compliant: str, non_compliant: str) -> None:
    rule = build_default_rule_table().prefix_rule_for(kind)

    assert rule is not None
    assert rule.matches_prefix(compliant)
    assert not rule.matches_prefix(non_compliant)
    assert rule.matches_suffix(compliant)


def test_default_exempt_fields() -> None:
    rule_table = build_default_rule_table()

    assert DEFAULT_EXEMPT_FIELDS == {
        "id",
        "name",
        "email",
        "created_at",
        "updated_at",
        "deleted_at",
        "created_by",
        "updated_by",
        "deleted_by",
    }
    assert rule_table.is_exempt("created_at")
    assert not rule_table.is_exempt("created_dt")


def test_default_table_settings() -> None:
    rule_table = build_default_rule_table()

    assert rule_table.max_identifier_length == DEFAULT_MAX_IDENTIFIER_LENGTH == 63
    assert rule_table.require_comments is False
    assert rule_table.disabled_rules == frozenset()
    assert [rule.suffix for rule in rule_table.suffix_rules] == [
        suffix for suffix, _types, _description in DEFAULT_SUFFIXES
    ]


@pytest.mark.parametrize(
    ("field_name", "expected_suffix"),
    [
        ("customer_id", "_id"),
        ("public_uuid", "_uuid"),
        ("placed_ts", "_ts"),
        ("total_amt", "_amt"),
        ("status_cd", "_cd"),
        ("invoice_num", "_num"),
        ("total", None),
        ("_amt", None),
        ("amount", None),
        ("total_AMT", None),
    ],
)
def test_suffix_rule_lookup(field_name: str, expected_suffix: str | None) -> None:
    rule = build_default_rule_table().suffix_rule_for(field_name)

    assert (rule.suffix if rule else None) == expected_suffix


@pytest.mark.parametrize(
    ("family", "expected_suffix"),
    [
        (TypeFamily.DECIMAL, "_amt"),
        (TypeFamily.INTEGER, "_qty"),
        (TypeFamily.UUID, "_uuid"),
        (TypeFamily.TIMESTAMP_TZ, "_ts"),
        (TypeFamily.DATE, "_dt"),
        (TypeFamily.BOOLEAN, "_flg"),
        (TypeFamily.TEXT, "_txt"),
        (TypeFamily.JSON, "_json"),
        (TypeFamily.BINARY, "_hash"),
        (TypeFamily.TIMESTAMP, None),
        (TypeFamily.UNKNOWN, None),
    ],
)
def test_suffix_suggested_for_type_family(
    family: TypeFamily, expected_suffix: str | None
) -> None:
    rule = build_default_rule_table().suffix_for_type(family)

    assert (rule.suffix if rule else None) == expected_suffix


def test_rule_table_is_read_only() -> None:
    rule_table = build_default_rule_table()

    with pytest.raises(TypeError):
        rule_table.naming_rules[ObjectKind.TABLE] = None  # type: ignore[index]
