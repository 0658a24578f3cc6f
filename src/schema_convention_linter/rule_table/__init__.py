"""Rule table exports."""

from .default_rules import (
    DEFAULT_EXEMPT_FIELDS,
    DEFAULT_MAX_IDENTIFIER_LENGTH,
    DEFAULT_PREFIXES,
    DEFAULT_SUFFIXES,
    build_default_rule_table,
)
from .rule_builder import (
    RuleDefinitionError,
    assemble_rule_table,
    build_suffix_rule,
    compile_naming_rule,
)
from .rule_models import NamingRule, ObjectKind, RuleTable, SuffixRule, TypeFamily
from .type_families import classify_declared_type, parse_type_family

__all__ = [
    "NamingRule",
    "ObjectKind",
    "RuleTable",
    "SuffixRule",
    "TypeFamily",
    "RuleDefinitionError",
    "assemble_rule_table",
    "build_suffix_rule",
    "compile_naming_rule",
    "classify_declared_type",
    "parse_type_family",
    "DEFAULT_EXEMPT_FIELDS",
    "DEFAULT_MAX_IDENTIFIER_LENGTH",
    "DEFAULT_PREFIXES",
    "DEFAULT_SUFFIXES",
    "build_default_rule_table",
]
