"""Data models for the timesheet checker.

This package contains:
- BaseDataModel: Base class with common configuration
- TimeEntryRow: One day's record as entered or imported
- WeekBucket: Basic / OT 1.5 / OT 2.0 minute totals
"""

from timesheet_checker.models.base import BaseDataModel
from timesheet_checker.models.timesheet import (
    UNSPECIFIED_WEEK,
    FieldKey,
    TimeEntryRow,
    normalize_week_label,
)
from timesheet_checker.models.totals import WeekBucket

__all__ = [
    "BaseDataModel",
    "FieldKey",
    "TimeEntryRow",
    "UNSPECIFIED_WEEK",
    "WeekBucket",
    "normalize_week_label",
]
