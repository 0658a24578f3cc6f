"""Report writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


class ReportFormat(str, Enum):
    """Console output formats."""

    TEXT = "text"
    JSON = "json"


@dataclass(frozen=True)
class RunMetadata:
    """Metadata rendered into the RunInfo sheet and the JSON summary."""

    run_start: datetime
    input_paths: tuple[Path, ...]
    config_path: Path | None
