"""Unit tests for the weekly overtime reallocation rule."""

import itertools

import pytest

from timesheet_checker.calculators.overtime_reallocator import (
    BASIC_THRESHOLD_MINUTES,
    reallocate_overtime,
    reallocate_weekly,
    sum_buckets,
)
from timesheet_checker.models.totals import WeekBucket


class TestReallocateOvertime:
    """Test the 40-hours-basic-first rule for a single week."""

    def test_threshold_is_40_hours(self):
        assert BASIC_THRESHOLD_MINUTES == 2400

    def test_takes_ot15_before_ot20(self):
        """Test that OT 1.5 is used up before OT 2.0."""
        adjusted = reallocate_overtime(WeekBucket(2000, 300, 300))
        assert adjusted == WeekBucket(2400, 0, 200)

    def test_unchanged_when_basic_meets_threshold(self):
        bucket = WeekBucket(2400, 120, 60)
        assert reallocate_overtime(bucket) == bucket

    def test_unchanged_when_basic_above_threshold(self):
        bucket = WeekBucket(2700, 120, 60)
        assert reallocate_overtime(bucket) == bucket

    def test_partial_ot15_shift(self):
        """Test that only the needed OT 1.5 minutes move."""
        adjusted = reallocate_overtime(WeekBucket(2300, 300, 60))
        assert adjusted == WeekBucket(2400, 200, 60)

    def test_all_overtime_moves_when_not_enough(self):
        """Test a short week where all overtime becomes basic."""
        adjusted = reallocate_overtime(WeekBucket(600, 120, 60))
        assert adjusted == WeekBucket(780, 0, 0)

    def test_no_overtime(self):
        bucket = WeekBucket(1200, 0, 0)
        assert reallocate_overtime(bucket) == bucket

    def test_custom_target(self):
        adjusted = reallocate_overtime(WeekBucket(400, 100, 100), target=480)
        assert adjusted == WeekBucket(480, 20, 100)

    @pytest.mark.parametrize(
        "basic,ot15,ot20",
        list(itertools.product([0, 1, 1200, 2399, 2400, 3000], [0, 59, 600], [0, 1, 900])),
    )
    def test_conserves_total_and_is_idempotent(self, basic, ot15, ot20):
        bucket = WeekBucket(basic, ot15, ot20)
        once = reallocate_overtime(bucket)
        assert once.total == bucket.total
        assert min(once.basic, once.ot15, once.ot20) >= 0
        assert reallocate_overtime(once) == once
        assert once.basic >= BASIC_THRESHOLD_MINUTES or (once.ot15 == 0 and once.ot20 == 0)


class TestReallocateWeekly:
    """Test per-week application and overall totals."""

    def test_no_borrowing_between_weeks(self):
        """Test that surplus basic in one week does not help another."""
        weekly = {
            "Week 1": WeekBucket(3000, 0, 0),
            "Week 2": WeekBucket(2000, 600, 0),
        }
        adjusted = reallocate_weekly(weekly)
        assert adjusted["Week 1"] == WeekBucket(3000, 0, 0)
        assert adjusted["Week 2"] == WeekBucket(2400, 200, 0)

    def test_input_mapping_not_modified(self):
        weekly = {"Week 1": WeekBucket(2000, 600, 0)}
        reallocate_weekly(weekly)
        assert weekly["Week 1"] == WeekBucket(2000, 600, 0)

    def test_sum_buckets(self):
        weekly = {
            "Week 1": WeekBucket(2400, 60, 0),
            "Week 2": WeekBucket(2400, 0, 30),
        }
        assert sum_buckets(weekly) == WeekBucket(4800, 60, 30)

    def test_sum_buckets_empty(self):
        assert sum_buckets({}) == WeekBucket(0, 0, 0)

    def test_overall_comes_from_adjusted_weeks(self):
        """Test that overall totals differ from summing raw weeks."""
        raw = {
            "Week 1": WeekBucket(2000, 400, 0),
            "Week 2": WeekBucket(2400, 400, 0),
        }
        overall = sum_buckets(reallocate_weekly(raw))
        assert overall == WeekBucket(4800, 400, 0)
        assert sum_buckets(raw) == WeekBucket(4400, 800, 0)
