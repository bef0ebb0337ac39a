"""Text rendering of timesheet totals and validation issues.

This module turns minute totals into fixed "Hh Mm" text and composes the
overall summary, the per-week summary and the issue list. It holds no
business rules: everything it renders has already been computed by the
aggregation pipeline.
"""

from typing import TYPE_CHECKING, List

from timesheet_checker.models.totals import WeekBucket

if TYPE_CHECKING:
    from timesheet_checker.aggregators.timesheet_aggregator import (
        TimesheetSummary,
    )
    from timesheet_checker.validators.validation_report import ValidationReport

NO_ROWS_MESSAGE = "No rows in timesheet."
NO_WEEKLY_DATA_MESSAGE = "No weekly data."
SEPARATOR = "-" * 25

# Keyed by IssueKind value
ISSUE_KIND_LABELS = {
    "invalid_time_format": "Invalid time format",
    "invalid_duration_format": "Invalid duration format",
    "inconsistent_row": "Hours mismatch",
    "negative_interval": "Finish before start",
}


def format_hm(minutes: int) -> str:
    """Format a minute count as hours and minutes.

    Args:
        minutes: Number of minutes, possibly negative

    Returns:
        Text in the form "{h}h {m}m", prefixed with "-" when negative

    Example:
        >>> format_hm(450)
        '7h 30m'
        >>> format_hm(-61)
        '-1h 1m'
    """
    sign = "-" if minutes < 0 else ""
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours}h {mins}m"


def format_bucket_lines(bucket: WeekBucket, indent: str = "") -> List[str]:
    """Render the three buckets of a week as aligned lines."""
    return [
        f"{indent}Basic:  {format_hm(bucket.basic)}",
        f"{indent}OT 1.5: {format_hm(bucket.ot15)}",
        f"{indent}OT 2.0: {format_hm(bucket.ot20)}",
    ]


def format_overall_summary(summary: "TimesheetSummary") -> str:
    """Render the overall totals across all weeks.

    Args:
        summary: Result of a recalculation

    Returns:
        Multi-line text with basic, OT 1.5, OT 2.0 and the grand total
    """
    if not summary.has_data:
        return NO_ROWS_MESSAGE

    overall = summary.overall
    return "\n".join(
        [
            f"Basic:   {format_hm(overall.basic)}",
            f"OT 1.5:  {format_hm(overall.ot15)}",
            f"OT 2.0:  {format_hm(overall.ot20)}",
            SEPARATOR,
            f"TOTAL:   {format_hm(overall.total)}",
        ]
    )


def format_weekly_summary(summary: "TimesheetSummary") -> str:
    """Render one block of adjusted totals per week.

    Weeks are ordered by plain string comparison of their labels, so
    "Week 10" is listed before "Week 2".

    Args:
        summary: Result of a recalculation

    Returns:
        Multi-line text with one block per week
    """
    if not summary.has_data:
        return NO_ROWS_MESSAGE

    blocks = []
    for label in sorted(summary.adjusted_weekly):
        bucket = summary.adjusted_weekly[label]
        lines = [label]
        lines.extend(format_bucket_lines(bucket, indent="  "))
        lines.append(f"  Total:  {format_hm(bucket.total)}")
        blocks.append("\n".join(lines) + "\n")

    return "\n".join(blocks) if blocks else NO_WEEKLY_DATA_MESSAGE


def format_issues(report: "ValidationReport") -> str:
    """Render the issue list, one line per issue.

    Args:
        report: Validation report of a recalculation

    Returns:
        Issue lines prefixed with the row label, or a no-issues message
    """
    if not report.has_data or report.is_valid():
        return report.summary()

    lines = []
    for issue in report.issues:
        label = (issue.context or {}).get("label", f"Row {issue.row}")
        lines.append(f"{label}: {issue.message}")
    return "\n".join(lines)


def format_issue_breakdown(report: "ValidationReport") -> str:
    """Count issues per kind, one line per kind that occurs.

    Args:
        report: Validation report of a recalculation

    Returns:
        Lines such as "Invalid duration format: 2", empty when there are no issues
    """
    kinds = dict.fromkeys(issue.kind for issue in report.issues)
    lines = []
    for kind in kinds:
        count = len(report.get_issues_by_kind(kind))
        lines.append(f"{ISSUE_KIND_LABELS[kind.value]}: {count}")
    return "\n".join(lines)
