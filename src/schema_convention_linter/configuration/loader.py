"""Configuration loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from schema_convention_linter.checking.violation_models import RuleId
from schema_convention_linter.rule_table import (
    DEFAULT_EXEMPT_FIELDS,
    DEFAULT_MAX_IDENTIFIER_LENGTH,
    DEFAULT_PREFIXES,
    DEFAULT_SUFFIXES,
    NamingRule,
    ObjectKind,
    RuleDefinitionError,
    SuffixRule,
    assemble_rule_table,
    build_suffix_rule,
    compile_naming_rule,
)

from .runtime_settings import LintConfiguration

logger = logging.getLogger(__name__)

_KNOWN_KEYS = frozenset(
    {
        "inherit_defaults",
        "prefixes",
        "suffixes",
        "disabled_suffixes",
        "exempt_fields",
        "require_comments",
        "max_identifier_length",
        "disabled_rules",
        "parallelism",
    }
)


class ConfigError(Exception):
    """Raised when the lint configuration or a rule definition is invalid."""


def load_configuration(config_path: Path | str | None = None) -> LintConfiguration:
    """Load and validate the lint configuration file.

    Without a path the canonical rule table is used unchanged.
    """
    if config_path is None:
        return build_configuration({}, path=None)

    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Configuration file {path} is not valid UTF-8: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigError("Configuration root must be a mapping.")

    configuration = build_configuration(parsed, path=path)
    logger.debug("Loaded lint configuration from %s", path)
    return configuration


def build_configuration(parsed: Mapping[str, Any], *, path: Path | None) -> LintConfiguration:
    """Build a lint configuration from an already parsed mapping."""
    unknown_keys = sorted(str(key) for key in parsed if key not in _KNOWN_KEYS)
    if unknown_keys:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown_keys)}.")

    inherit_defaults = _require_bool(parsed.get("inherit_defaults", True), "inherit_defaults")
    try:
        naming_rules = _parse_prefixes_section(
            parsed.get("prefixes"), inherit_defaults=inherit_defaults
        )
        suffix_rules = _parse_suffixes_section(
            parsed.get("suffixes"),
            _normalize_string_sequence(parsed.get("disabled_suffixes"), "disabled_suffixes"),
            inherit_defaults=inherit_defaults,
        )
        exempt_fields = _parse_exempt_fields(
            parsed.get("exempt_fields"), inherit_defaults=inherit_defaults
        )
        rule_table = assemble_rule_table(
            naming_rules=naming_rules,
            suffix_rules=suffix_rules,
            exempt_fields=exempt_fields,
            require_comments=_require_bool(
                parsed.get("require_comments", False), "require_comments"
            ),
            max_identifier_length=_require_positive_int(
                parsed.get("max_identifier_length", DEFAULT_MAX_IDENTIFIER_LENGTH),
                "max_identifier_length",
            ),
            disabled_rules=_parse_disabled_rules(parsed.get("disabled_rules")),
        )
    except RuleDefinitionError as exc:
        raise ConfigError(str(exc)) from exc

    parallelism = _require_positive_int(parsed.get("parallelism", 1), "parallelism")
    return LintConfiguration(path=path, rule_table=rule_table, parallelism=parallelism)


def _parse_prefixes_section(value: Any, *, inherit_defaults: bool) -> list[NamingRule]:
    entries: dict[ObjectKind, Mapping[str, Any] | None] = {}
    if inherit_defaults:
        for kind, prefix, description in DEFAULT_PREFIXES:
            entries[kind] = {"prefix": prefix, "description": description}

    if value is not None:
        section = _require_mapping(value, "prefixes")
        for raw_kind, definition in section.items():
            kind = ObjectKind.from_label(raw_kind)
            if kind is None:
                raise ConfigError(f"prefixes: unknown object kind '{raw_kind}'.")
            entries[kind] = _normalize_prefix_definition(definition, kind)

    return [
        compile_naming_rule(
            kind,
            definition.get("pattern") or definition["prefix"],
            description=definition.get("description") or "",
            suffix=definition.get("suffix"),
            is_pattern="pattern" in definition,
        )
        for kind, definition in entries.items()
        if definition is not None
    ]


def _normalize_prefix_definition(definition: Any, kind: ObjectKind) -> Mapping[str, Any] | None:
    label = f"prefixes.{kind.value}"
    if definition is None:
        return None
    if isinstance(definition, str):
        return {"prefix": _require_non_empty_string(definition, label)}
    section = _require_mapping(definition, label)
    prefix = section.get("prefix")
    pattern = section.get("pattern")
    if (prefix is None) == (pattern is None):
        raise ConfigError(f"{label} requires exactly one of 'prefix' or 'pattern'.")
    normalized: dict[str, Any] = {
        "description": _optional_string(section.get("description"), f"{label}.description"),
        "suffix": _optional_string(section.get("suffix"), f"{label}.suffix"),
    }
    if pattern is not None:
        normalized["pattern"] = _require_non_empty_string(pattern, f"{label}.pattern")
    else:
        normalized["prefix"] = _require_non_empty_string(prefix, f"{label}.prefix")
    return normalized


def _parse_suffixes_section(
    value: Any, disabled_suffixes: tuple[str, ...], *, inherit_defaults: bool
) -> list[SuffixRule]:
    entries: dict[str, SuffixRule] = {}
    if inherit_defaults:
        for suffix, types, description in DEFAULT_SUFFIXES:
            entries[suffix] = build_suffix_rule(suffix, types, description=description)

    if value is not None:
        if isinstance(value, str | bytes) or not isinstance(value, Sequence):
            raise ConfigError("suffixes must be a list of suffix definitions.")
        for position, item in enumerate(value, start=1):
            label = f"suffixes[{position}]"
            section = _require_mapping(item, label)
            suffix = _require_non_empty_string(section.get("suffix"), f"{label}.suffix")
            types = _normalize_string_sequence(section.get("types"), f"{label}.types")
            description = _optional_string(section.get("description"), f"{label}.description")
            # A redefined suffix keeps its original position in the table.
            entries[suffix] = build_suffix_rule(suffix, types, description=description or "")

    for suffix in disabled_suffixes:
        if suffix not in entries:
            raise ConfigError(f"disabled_suffixes: unknown suffix '{suffix}'.")
        del entries[suffix]
    return list(entries.values())


def _parse_exempt_fields(value: Any, *, inherit_defaults: bool) -> frozenset[str]:
    configured = set(_normalize_string_sequence(value, "exempt_fields"))
    if inherit_defaults:
        configured |= DEFAULT_EXEMPT_FIELDS
    return frozenset(configured)


def _parse_disabled_rules(value: Any) -> frozenset[str]:
    disabled = _normalize_string_sequence(value, "disabled_rules")
    known = {rule_id.value for rule_id in RuleId}
    for rule_id in disabled:
        if rule_id not in known:
            raise ConfigError(
                f"disabled_rules: unknown rule '{rule_id}'. Known rules: "
                f"{', '.join(sorted(known))}."
            )
    return frozenset(disabled)


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigError(f"{field_name} must be a string or list of strings.")


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{field_name} must be true or false.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigError(f"{field_name} must be greater than zero.")
    return value
