"""Run execution domain exports."""

from .lint_run_use_case import RunExecutionError, execute_lint_run
from .run_contracts import RunOutcome, RunRequest

__all__ = [
    "RunRequest",
    "RunOutcome",
    "RunExecutionError",
    "execute_lint_run",
]
