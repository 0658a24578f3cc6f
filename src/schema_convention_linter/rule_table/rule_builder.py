"""Rule compilation and rule table assembly."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from .rule_models import NamingRule, ObjectKind, RuleTable, SuffixRule, TypeFamily
from .type_families import parse_type_family

logger = logging.getLogger(__name__)

_SUFFIX_TOKEN = re.compile(r"^_[a-z0-9]+(?:_[a-z0-9]+)*$")


class RuleDefinitionError(Exception):
    """Raised when a naming or suffix rule definition is malformed."""


def compile_naming_rule(
    kind: object,
    prefix: str,
    *,
    description: str,
    suffix: str | None = None,
    is_pattern: bool = False,
) -> NamingRule:
    """Compile one object-kind naming rule.

    Args:
      kind: Object kind or kind label the rule applies to.
      prefix: Literal prefix token, or an anchored regular expression when
        ``is_pattern`` is set.
      description: Human-readable rationale shown in reports.
      suffix: Optional literal suffix token (or regular expression) the name must end with.
      is_pattern: Treat ``prefix`` and ``suffix`` as regular expressions.

    Raises:
      RuleDefinitionError: If the kind is unknown or a pattern does not compile.
    """
    resolved_kind = ObjectKind.from_label(kind)
    if resolved_kind is None:
        raise RuleDefinitionError(f"Unknown object kind in naming rule: {kind!r}")
    if not isinstance(prefix, str) or not prefix.strip():
        raise RuleDefinitionError(f"Naming rule for {resolved_kind.value} requires a prefix.")
    prefix_source = prefix if is_pattern else re.escape(prefix)
    prefix_pattern = _compile(f"^(?:{prefix_source})", resolved_kind)
    suffix_pattern = None
    if suffix is not None:
        if not isinstance(suffix, str) or not suffix.strip():
            raise RuleDefinitionError(
                f"Naming rule suffix for {resolved_kind.value} must be a non-empty string."
            )
        suffix_source = suffix if is_pattern else re.escape(suffix)
        suffix_pattern = _compile(f"(?:{suffix_source})$", resolved_kind)
    return NamingRule(
        object_kind=resolved_kind,
        prefix_pattern=prefix_pattern,
        suffix_pattern=suffix_pattern,
        description=description.strip() if isinstance(description, str) else "",
        prefix_label=prefix,
        suffix_label=suffix,
    )


def build_suffix_rule(suffix: str, types: Iterable[object], *, description: str) -> SuffixRule:
    """Build one field suffix rule from a suffix token and type family labels."""
    if not isinstance(suffix, str) or not _SUFFIX_TOKEN.fullmatch(suffix):
        raise RuleDefinitionError(
            f"Field suffix {suffix!r} must be a lowercase token starting with '_'."
        )
    families: set[TypeFamily] = set()
    for label in types:
        family = parse_type_family(label)
        if family is None or family == TypeFamily.UNKNOWN:
            raise RuleDefinitionError(f"Unknown type family {label!r} for suffix {suffix}.")
        families.add(family)
    if not families:
        raise RuleDefinitionError(f"Suffix {suffix} must name at least one type family.")
    return SuffixRule(
        suffix=suffix,
        expected_types=frozenset(families),
        description=description.strip() if isinstance(description, str) else "",
    )


# pylint: disable=too-many-arguments
def assemble_rule_table(
    naming_rules: Iterable[NamingRule],
    suffix_rules: Iterable[SuffixRule],
    exempt_fields: Iterable[str],
    *,
    require_comments: bool = False,
    max_identifier_length: int = 63,
    disabled_rules: Iterable[str] = (),
) -> RuleTable:
    """Assemble an immutable rule table, rejecting duplicate kinds and suffixes."""
    by_kind: dict[ObjectKind, NamingRule] = {}
    for rule in naming_rules:
        if rule.object_kind in by_kind:
            raise RuleDefinitionError(f"Duplicate naming rule for {rule.object_kind.value}.")
        by_kind[rule.object_kind] = rule

    ordered_suffixes: list[SuffixRule] = []
    seen_suffixes: set[str] = set()
    for suffix_rule in suffix_rules:
        if suffix_rule.suffix in seen_suffixes:
            raise RuleDefinitionError(f"Duplicate suffix rule for {suffix_rule.suffix}.")
        seen_suffixes.add(suffix_rule.suffix)
        ordered_suffixes.append(suffix_rule)

    if max_identifier_length <= 0:
        raise RuleDefinitionError("Maximum identifier length must be greater than zero.")

    table = RuleTable(
        naming_rules=_freeze(by_kind),
        suffix_rules=tuple(ordered_suffixes),
        exempt_fields=frozenset(exempt_fields),
        require_comments=require_comments,
        max_identifier_length=max_identifier_length,
        disabled_rules=frozenset(disabled_rules),
    )
    logger.debug(
        "Rule table assembled: %d naming rules, %d suffix rules, %d exempt fields",
        len(table.naming_rules),
        len(table.suffix_rules),
        len(table.exempt_fields),
    )
    return table


# pylint: enable=too-many-arguments


def _compile(source: str, kind: ObjectKind) -> re.Pattern[str]:
    try:
        return re.compile(source)
    except re.error as exc:
        raise RuleDefinitionError(
            f"Invalid naming pattern for {kind.value}: {source!r} ({exc})"
        ) from exc


def _freeze(rules: dict[ObjectKind, NamingRule]) -> Mapping[ObjectKind, NamingRule]:
    return MappingProxyType(dict(rules))
