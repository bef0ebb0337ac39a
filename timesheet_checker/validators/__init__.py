"""Validation layer for timesheet rows."""

from timesheet_checker.validators.row_validator import RowValidator
from timesheet_checker.validators.validation_report import (
    IssueKind,
    ValidationIssue,
    ValidationReport,
)

__all__ = [
    "IssueKind",
    "RowValidator",
    "ValidationIssue",
    "ValidationReport",
]
