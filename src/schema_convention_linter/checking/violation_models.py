"""Checking domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from schema_convention_linter.schema_ingestion.schema_object_models import SchemaObject


class Severity(str, Enum):
    """How strongly a violation should be acted upon."""

    ERROR = "error"
    ADVISORY = "advisory"


class RuleId(str, Enum):
    """Identifiers of the checks the checker evaluates, in evaluation order."""

    OBJECT_PREFIX = "object-prefix"
    OBJECT_SUFFIX = "object-suffix"
    SNAKE_CASE = "snake-case"
    IDENTIFIER_LENGTH = "identifier-length"
    OBJECT_COMMENT = "object-comment"
    FIELD_SUFFIX_TYPE = "field-suffix-type"
    FIELD_SUFFIX_MISSING = "field-suffix-missing"
    FIELD_COMMENT = "field-comment"


@dataclass(frozen=True)
class Violation:
    """One convention mismatch found on a schema object or one of its fields."""

    object_name: str
    field_name: str | None
    rule_violated: RuleId
    message: str
    severity: Severity = Severity.ERROR

    @property
    def location(self) -> str:
        if self.field_name is None:
            return self.object_name
        return f"{self.object_name}.{self.field_name}"


@dataclass(frozen=True)
class ObjectCheckResult:
    """Outcome of checking one schema object."""

    schema_object: SchemaObject
    violations: tuple[Violation, ...]
    input_error: str | None = None

    @property
    def failed(self) -> bool:
        """Return True when the object could not be checked at all."""
        return self.input_error is not None


@dataclass(frozen=True)
class CheckReport:
    """Outcome of checking a batch of schema objects, in input order."""

    results: tuple[ObjectCheckResult, ...]

    @property
    def violations(self) -> tuple[Violation, ...]:
        return tuple(violation for result in self.results for violation in result.violations)

    @property
    def error_count(self) -> int:
        return sum(1 for item in self.violations if item.severity == Severity.ERROR)

    @property
    def advisory_count(self) -> int:
        return sum(1 for item in self.violations if item.severity == Severity.ADVISORY)

    @property
    def failed_count(self) -> int:
        return sum(1 for result in self.results if result.failed)

    def has_findings_at(self, threshold: Severity | None) -> bool:
        """Return True when violations at or above ``threshold`` exist.

        A ``None`` threshold never fails on violations. Objects that failed with an
        input error always count as findings.
        """
        if self.failed_count:
            return True
        if threshold is None:
            return False
        if threshold == Severity.ADVISORY:
            return bool(self.violations)
        return self.error_count > 0
