"""Template generation exports."""

from .constants import DESCRIPTOR_COLUMNS, DESCRIPTOR_SHEET_NAME, RULES_COLUMNS, RULES_SHEET_NAME
from .template_workbook_builder import generate_template_workbook

__all__ = [
    "DESCRIPTOR_SHEET_NAME",
    "RULES_SHEET_NAME",
    "DESCRIPTOR_COLUMNS",
    "RULES_COLUMNS",
    "generate_template_workbook",
]
