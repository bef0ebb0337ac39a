"""Timesheet checker: validation and weekly totals for work-time records."""

__version__ = "1.0.0"
