"""Batch checking service."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from schema_convention_linter.rule_table.rule_models import RuleTable
from schema_convention_linter.schema_ingestion.schema_object_models import (
    InputError,
    SchemaObject,
)

from .object_checker import check_schema_object
from .violation_models import CheckReport, ObjectCheckResult

logger = logging.getLogger(__name__)


def check_schema_objects(
    schema_objects: Sequence[SchemaObject],
    rule_table: RuleTable,
    *,
    parallelism: int = 1,
) -> CheckReport:
    """Check every schema object and collect the results in input order.

    An input error on one object is recorded on that object's result; the remaining
    objects are still checked.
    """
    max_workers = max(1, parallelism)
    if max_workers == 1 or len(schema_objects) <= 1:
        results = [_check_single(schema_object, rule_table) for schema_object in schema_objects]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(
                executor.map(lambda item: _check_single(item, rule_table), schema_objects)
            )

    report = CheckReport(results=tuple(results))
    logger.info(
        "Checked %d schema objects: %d errors, %d advisories, %d failed",
        len(report.results),
        report.error_count,
        report.advisory_count,
        report.failed_count,
    )
    return report


def _check_single(schema_object: SchemaObject, rule_table: RuleTable) -> ObjectCheckResult:
    try:
        violations = check_schema_object(schema_object, rule_table)
    except InputError as exc:
        logger.warning("Skipping malformed schema object: %s", exc)
        return ObjectCheckResult(schema_object=schema_object, violations=(), input_error=str(exc))
    return ObjectCheckResult(schema_object=schema_object, violations=violations)
