"""Weekly aggregation of entered hours.

This module folds parsed rows into raw per-week totals. Every row
contributes, whatever its validation outcome: a cell that failed to parse
simply adds 0 to its bucket.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable

from timesheet_checker.calculators.row_parser import ParsedRow
from timesheet_checker.models.totals import WeekBucket

logger = logging.getLogger(__name__)


def aggregate_weekly(parsed_rows: Iterable[ParsedRow]) -> Dict[str, WeekBucket]:
    """Sum entered minutes per week label.

    Rows are keyed by their normalized week label (empty labels become
    "Unspecified"). The result does not depend on row order.

    Args:
        parsed_rows: Parsed rows to aggregate

    Returns:
        Raw totals keyed by week label

    Example:
        >>> weekly = aggregate_weekly([parse_row(row1), parse_row(row2)])
        >>> weekly["Week 1"].basic
        930
    """
    weekly: Dict[str, WeekBucket] = defaultdict(WeekBucket)

    for parsed in parsed_rows:
        label = parsed.week_label
        weekly[label] = weekly[label] + parsed.entered_minutes()

    logger.debug(f"Aggregated rows into {len(weekly)} week(s)")
    return dict(weekly)
