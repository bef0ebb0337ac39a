"""Weekly overtime reallocation.

A week must accumulate 40 hours of basic time before any overtime is paid
as overtime. Overtime entered while basic is below that threshold is moved
into basic, taking OT 1.5 minutes first and OT 2.0 minutes second.
"""

import logging
from typing import Dict

from timesheet_checker.models.totals import WeekBucket

logger = logging.getLogger(__name__)

# 40 hours in minutes
BASIC_THRESHOLD_MINUTES = 40 * 60


def reallocate_overtime(
    bucket: WeekBucket, target: int = BASIC_THRESHOLD_MINUTES
) -> WeekBucket:
    """Move overtime minutes into basic until basic reaches the target.

    The total number of minutes is conserved, and applying the rule to an
    already reallocated bucket returns it unchanged.

    Args:
        bucket: Raw weekly totals
        target: Basic minutes required before overtime counts (default: 2400)

    Returns:
        Adjusted weekly totals

    Example:
        >>> reallocate_overtime(WeekBucket(2000, 300, 300))
        WeekBucket(basic=2400, ot15=0, ot20=200)
    """
    if bucket.basic >= target:
        return bucket

    needed = target - bucket.basic
    shift = min(needed, bucket.ot15 + bucket.ot20)

    from15 = min(shift, bucket.ot15)
    from20 = min(shift - from15, bucket.ot20)

    return WeekBucket(
        basic=bucket.basic + from15 + from20,
        ot15=bucket.ot15 - from15,
        ot20=bucket.ot20 - from20,
    )


def reallocate_weekly(
    weekly: Dict[str, WeekBucket], target: int = BASIC_THRESHOLD_MINUTES
) -> Dict[str, WeekBucket]:
    """Apply the reallocation rule to every week independently.

    Args:
        weekly: Raw totals keyed by week label
        target: Basic minutes required before overtime counts

    Returns:
        New mapping of adjusted totals keyed by week label
    """
    adjusted: Dict[str, WeekBucket] = {}
    for label, bucket in weekly.items():
        adjusted[label] = reallocate_overtime(bucket, target)
        if adjusted[label] != bucket:
            logger.debug(
                f"Reallocated {adjusted[label].basic - bucket.basic} overtime "
                f"minutes into basic for '{label}'"
            )
    return adjusted


def sum_buckets(weekly: Dict[str, WeekBucket]) -> WeekBucket:
    """Sum weekly buckets into overall totals.

    Args:
        weekly: Totals keyed by week label

    Returns:
        Combined totals across all weeks
    """
    total = WeekBucket()
    for bucket in weekly.values():
        total = total + bucket
    return total
