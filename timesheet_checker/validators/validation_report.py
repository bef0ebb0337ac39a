"""Validation report for collecting row-level timesheet issues."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


class IssueKind(Enum):
    """Kinds of problems the row validator can report."""

    INVALID_TIME_FORMAT = "invalid_time_format"
    INVALID_DURATION_FORMAT = "invalid_duration_format"
    INCONSISTENT_ROW = "inconsistent_row"
    NEGATIVE_INTERVAL = "negative_interval"


@dataclass
class ValidationIssue:
    """Represents a single validation issue.

    Attributes:
        row: 1-based index of the row the issue belongs to
        field: The field key that has the issue (e.g. "basic", "break")
        kind: The kind of problem
        message: Human-readable description of the issue
        value: The value that caused the issue
        context: Optional context information (e.g. the row's date label)
    """

    row: int
    field: str
    kind: IssueKind
    message: str
    value: Any = None
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        """Return string representation of the issue.

        Returns:
            Formatted string with row, field, and message
        """
        return f"[row {self.row}] {self.field}: {self.message}"


class ValidationReport:
    """Collects validation issues for a set of rows.

    The report also records how many rows were checked, so that an empty
    document can be told apart from a clean one.

    Example:
        >>> report = ValidationReport(rows_checked=1)
        >>> report.add_issue(1, "basic", IssueKind.INVALID_DURATION_FORMAT,
        ...                  'Basic hours "x" is invalid.', "x")
        >>> report.is_valid()
        False
    """

    def __init__(self, rows_checked: int = 0) -> None:
        """Initialize an empty validation report.

        Args:
            rows_checked: Number of rows covered by this report
        """
        self.issues: List[ValidationIssue] = []
        self.rows_checked = rows_checked

    @property
    def issue_count(self) -> int:
        return len(self.issues)

    @property
    def has_data(self) -> bool:
        """True when at least one row was checked."""
        return self.rows_checked > 0

    def is_valid(self) -> bool:
        """Check if validation passed (no issues).

        Returns:
            True if no issues are present, False otherwise
        """
        return not self.issues

    def add_issue(
        self,
        row: int,
        field: str,
        kind: IssueKind,
        message: str,
        value: Any = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Add an issue to the report.

        Args:
            row: 1-based row index
            field: The field key with the issue
            kind: The kind of problem
            message: Human-readable description
            value: The value that caused the issue
            context: Optional context information
        """
        self.issues.append(
            ValidationIssue(
                row=row,
                field=field,
                kind=kind,
                message=message,
                value=value,
                context=context,
            )
        )

    def get_issues_by_kind(self, kind: IssueKind) -> List[ValidationIssue]:
        """Get all issues of one kind."""
        return [issue for issue in self.issues if issue.kind is kind]

    def merge(self, other: "ValidationReport") -> None:
        """Merge another validation report into this one.

        Args:
            other: Another ValidationReport to merge
        """
        self.issues.extend(other.issues)
        self.rows_checked += other.rows_checked

    def summary(self) -> str:
        """Get a one-line summary of the report.

        Returns:
            Summary string with the number of issues and rows
        """
        if not self.has_data:
            return "No issues detected (no data)."
        if not self.issues:
            return "No issues detected."
        return f"{self.issue_count} issue(s) in {self.rows_checked} row(s)"
