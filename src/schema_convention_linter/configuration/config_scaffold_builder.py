"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-conventions.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Lint configuration for schema-convention-linter.
# Every key is optional; remove the ones you do not need.

# Start from the canonical rule table and apply the changes below.
# Set to false to check only the rules listed in this file.
inherit_defaults: true

prefixes:
  # Object kind -> required prefix token. Use null to drop a kind's rule.
  # table: "tb_"
  # view: {prefix: "vw_", description: "Views, including soft-delete views."}
  # policy: {pattern: "pol_(select|insert|update|delete)_", suffix: null}

suffixes:
  # Field suffix -> type families it implies. Type families: timestamp_tz,
  # timestamp, date, time, decimal, integer, boolean, text, json, uuid, binary.
  # - suffix: "_amt"
  #   types: [decimal]
  #   description: "Monetary amount, stored as numeric."

# Suffixes to drop from the inherited rule table.
disabled_suffixes: []

# Self-documenting fields that never need a suffix (added to the defaults).
exempt_fields: []

# Report tables, views and functions (and their fields) without a comment.
require_comments: false

max_identifier_length: 63

# Rule ids to skip: object-prefix, object-suffix, snake-case, identifier-length,
# object-comment, field-suffix-type, field-suffix-missing, field-comment.
disabled_rules: []

# Number of worker threads used to check schema objects.
parallelism: 1
"""


def build_placeholder_configuration() -> str:
    """Build a commented lint configuration scaffold."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the lint configuration scaffold to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Lint configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
