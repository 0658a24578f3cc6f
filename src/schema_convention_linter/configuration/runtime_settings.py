"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_convention_linter.rule_table.rule_models import RuleTable


@dataclass(frozen=True)
class LintConfiguration:
    """Top-level lint configuration aggregate."""

    path: Path | None
    rule_table: RuleTable
    parallelism: int = 1
