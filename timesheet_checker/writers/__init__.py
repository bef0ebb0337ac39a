"""Writers for rendering and exporting timesheet data."""

from timesheet_checker.writers.csv_writer import (
    CSV_HEADER,
    rows_to_csv,
    write_csv,
)
from timesheet_checker.writers.report_formatter import (
    format_hm,
    format_issue_breakdown,
    format_issues,
    format_overall_summary,
    format_weekly_summary,
)

__all__ = [
    "CSV_HEADER",
    "format_hm",
    "format_issue_breakdown",
    "format_issues",
    "format_overall_summary",
    "format_weekly_summary",
    "rows_to_csv",
    "write_csv",
]
