"""Recalculation pipeline for a timesheet.

This module ties the core together: each row is parsed once, the parsed
rows are validated and aggregated into weekly totals, the weekly totals
are reallocated so overtime only counts after 40 basic hours, and the
overall totals are summed from the adjusted weeks.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Sequence

from timesheet_checker.aggregators.weekly_aggregator import aggregate_weekly
from timesheet_checker.calculators.overtime_reallocator import (
    BASIC_THRESHOLD_MINUTES,
    reallocate_weekly,
    sum_buckets,
)
from timesheet_checker.calculators.row_parser import parse_row
from timesheet_checker.models.timesheet import TimeEntryRow
from timesheet_checker.models.totals import WeekBucket
from timesheet_checker.utils.logging_utils import LogContext
from timesheet_checker.validators.row_validator import (
    MISMATCH_TOLERANCE_MINUTES,
    RowValidator,
)
from timesheet_checker.validators.validation_report import ValidationReport

logger = logging.getLogger(__name__)


@dataclass
class TimesheetSummary:
    """Container for the result of one recalculation.

    Attributes:
        row_count: Number of rows in the snapshot
        report: Validation issues for all rows
        raw_weekly: Entered totals keyed by week label
        adjusted_weekly: Totals after overtime reallocation
        overall: Sum of the adjusted weekly totals

    Example:
        >>> summary = recalculate(rows)
        >>> summary.overall.total
        2880
    """

    row_count: int
    report: ValidationReport
    raw_weekly: Dict[str, WeekBucket] = field(default_factory=dict)
    adjusted_weekly: Dict[str, WeekBucket] = field(default_factory=dict)
    overall: WeekBucket = field(default_factory=WeekBucket)

    @property
    def has_data(self) -> bool:
        return self.row_count > 0


def recalculate(
    rows: Sequence[TimeEntryRow],
    basic_threshold: int = BASIC_THRESHOLD_MINUTES,
    tolerance_minutes: int = MISMATCH_TOLERANCE_MINUTES,
) -> TimesheetSummary:
    """Validate and total a snapshot of timesheet rows.

    The function is pure: it keeps no state between calls and returns the
    same summary for the same row text.

    Args:
        rows: Rows in display order
        basic_threshold: Basic minutes per week before overtime counts
        tolerance_minutes: Allowed worked/entered difference per row

    Returns:
        TimesheetSummary with issues and raw, adjusted and overall totals
    """
    with LogContext(row_count=len(rows)):
        if not rows:
            logger.info("No rows in timesheet, nothing to recalculate")
            return TimesheetSummary(row_count=0, report=ValidationReport())

        parsed_rows = [parse_row(row) for row in rows]

        report = RowValidator(tolerance_minutes).validate_rows(parsed_rows)
        raw_weekly = aggregate_weekly(parsed_rows)
        adjusted_weekly = reallocate_weekly(raw_weekly, basic_threshold)
        overall = sum_buckets(adjusted_weekly)

        logger.info(
            f"Recalculated {len(rows)} rows across {len(adjusted_weekly)} week(s) "
            f"with {report.issue_count} issue(s)"
        )

        return TimesheetSummary(
            row_count=len(rows),
            report=report,
            raw_weekly=raw_weekly,
            adjusted_weekly=adjusted_weekly,
            overall=overall,
        )
