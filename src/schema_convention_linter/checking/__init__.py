"""Checking domain exports."""

from .batch_checker import check_schema_objects
from .object_checker import check_schema_object
from .violation_models import CheckReport, ObjectCheckResult, RuleId, Severity, Violation

__all__ = [
    "CheckReport",
    "ObjectCheckResult",
    "RuleId",
    "Severity",
    "Violation",
    "check_schema_object",
    "check_schema_objects",
]
