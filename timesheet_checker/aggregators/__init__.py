"""Aggregators module for totalling timesheet rows.

This module provides the weekly fold and the full recalculation pipeline.
"""

from timesheet_checker.aggregators.timesheet_aggregator import (
    TimesheetSummary,
    recalculate,
)
from timesheet_checker.aggregators.weekly_aggregator import aggregate_weekly

__all__ = [
    "TimesheetSummary",
    "aggregate_weekly",
    "recalculate",
]
