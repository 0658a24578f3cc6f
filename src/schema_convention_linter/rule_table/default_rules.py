"""Canonical naming conventions for the database schema."""

from __future__ import annotations

from .rule_builder import assemble_rule_table, build_suffix_rule, compile_naming_rule
from .rule_models import ObjectKind, RuleTable

DEFAULT_MAX_IDENTIFIER_LENGTH = 63

DEFAULT_PREFIXES: tuple[tuple[ObjectKind, str, str], ...] = (
    (ObjectKind.TABLE, "tb_", "Tables are prefixed with tb_ to set them apart from views."),
    (ObjectKind.VIEW, "vw_", "Views are prefixed with vw_, including soft-delete views."),
    (
        ObjectKind.MATERIALIZED_VIEW,
        "mv_",
        "Materialized views are prefixed with mv_ so refresh jobs can find them.",
    ),
    (ObjectKind.FUNCTION, "fn_", "Functions are prefixed with fn_."),
    (
        ObjectKind.TRIGGER,
        "tr_",
        "Triggers are prefixed with tr_, e.g. tr_tb_orders_set_updated_at.",
    ),
    (ObjectKind.INDEX, "idx_", "Indexes are prefixed with idx_ followed by table and columns."),
    (ObjectKind.FOREIGN_KEY, "fk_", "Foreign keys are prefixed with fk_."),
    (ObjectKind.PRIMARY_KEY, "pk_", "Primary keys are prefixed with pk_."),
    (ObjectKind.UNIQUE_CONSTRAINT, "uq_", "Unique constraints are prefixed with uq_."),
    (ObjectKind.ENUM, "enum_", "Enum types are prefixed with enum_."),
    (ObjectKind.POLICY, "pol_", "Row-level security policies are prefixed with pol_."),
)

# Definition order decides which suffix is suggested for a type family.
DEFAULT_SUFFIXES: tuple[tuple[str, tuple[str, ...], str], ...] = (
    ("_id", ("integer", "uuid"), "Identifier or reference to another row."),
    ("_uuid", ("uuid",), "Externally visible UUID."),
    ("_ts", ("timestamp_tz",), "Point in time, stored as timestamp with time zone."),
    ("_dt", ("date",), "Calendar date without a time component."),
    ("_tm", ("time",), "Time of day or duration."),
    ("_amt", ("decimal",), "Monetary amount, stored as numeric."),
    ("_pct", ("decimal",), "Percentage, stored as numeric."),
    ("_rate", ("decimal",), "Rate or ratio, stored as numeric."),
    ("_qty", ("integer",), "Quantity of items."),
    ("_cnt", ("integer",), "Count of occurrences."),
    ("_num", ("integer", "text"), "Business number such as an invoice number."),
    ("_flg", ("boolean",), "Boolean flag."),
    ("_txt", ("text",), "Free-form text."),
    ("_cd", ("text",), "Short code from a fixed vocabulary."),
    ("_nm", ("text",), "Display name."),
    ("_desc", ("text",), "Longer description."),
    ("_url", ("text",), "URL or URI."),
    ("_json", ("json",), "Structured document, stored as jsonb."),
    ("_hash", ("text", "binary"), "Digest or password hash."),
)

DEFAULT_EXEMPT_FIELDS: frozenset[str] = frozenset(
    {
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
)


def build_default_rule_table() -> RuleTable:
    """Build the canonical rule table."""
    return assemble_rule_table(
        naming_rules=[
            compile_naming_rule(kind, prefix, description=description)
            for kind, prefix, description in DEFAULT_PREFIXES
        ],
        suffix_rules=[
            build_suffix_rule(suffix, types, description=description)
            for suffix, types, description in DEFAULT_SUFFIXES
        ],
        exempt_fields=DEFAULT_EXEMPT_FIELDS,
        max_identifier_length=DEFAULT_MAX_IDENTIFIER_LENGTH,
    )
